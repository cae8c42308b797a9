"""entitygate - authorize-then-act CRUD dispatch for FastAPI and SQLAlchemy."""

__version__ = "0.1.0"
