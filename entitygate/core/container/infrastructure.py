"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (SQLAlchemy async engine)
- Token validation (JWT)
- Logging (structlog console)
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from entitygate.core.config import settings
from entitygate.core.enums import Environment
from entitygate.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from entitygate.domain.protocols import LoggerProtocol
    from entitygate.infrastructure.security import JWTService


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )


@lru_cache()
def get_jwt_service() -> "JWTService":
    """Get JWT service singleton (app-scoped).

    Returns:
        JWTService configured from settings.
    """
    from entitygate.infrastructure.security import JWTService

    return JWTService(secret_key=settings.secret_key, algorithm=settings.algorithm)


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from entitygate.infrastructure.logging import ConsoleAdapter

    return ConsoleAdapter(
        use_json=settings.environment != Environment.DEVELOPMENT,
        level=settings.log_level,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    One session per request, shared by the guard and the operation:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Yields:
        Database session for request duration.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
