"""
Main FastAPI application entry point.

Wires trace middleware, RFC 9457 exception handlers and the versioned
entity routers. With ``AUTO_CREATE_SCHEMA`` set, missing tables are
created on startup.

Run:
    uvicorn entitygate.main:app
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from entitygate.core.config import settings
from entitygate.core.container import get_database, get_logger
from entitygate.presentation.errors import register_exception_handlers
from entitygate.presentation.middleware import TraceMiddleware
from entitygate.presentation.routers import v1_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: create schema when configured
    - Shutdown: dispose the connection pool
    """
    logger = get_logger()
    database = get_database()

    if settings.auto_create_schema:
        await database.create_all()
        logger.info("Database schema created")

    logger.info(
        "Application started",
        app_name=settings.app_name,
        environment=settings.environment.value,
    )

    yield

    await database.close()
    logger.info("Application stopped")


app = FastAPI(
    title=settings.app_name,
    description="Authorize-then-act CRUD API",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Request correlation
app.add_middleware(TraceMiddleware)

register_exception_handlers(app)

app.include_router(v1_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers."""
    return {"status": "healthy"}
