"""
FastAPI application entry point.
Assembles the app with routers, middleware, lifespan handlers, and exception handlers.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from crm.api.router import api_router
from crm.api.endpoints.health import get_health
from crm.core.config import settings
from crm.core.exceptions import setup_exception_handlers
from crm.core.logging import setup_logging, get_logger
from crm.db import session as db_session
from crm.db.init_db import create_tables
from crm.deps.di_container import build_container, set_container

logger = get_logger(__name__)

# Every route gets the default per-minute limit
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[f"{settings.RATE_LIMIT_PER_MINUTE}/minute"],
    enabled=settings.RATE_LIMIT_ENABLED,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    Initializes logging, the database and the DI container.
    """
    # Startup
    setup_logging()

    await db_session.init_db()
    if settings.AUTO_CREATE_TABLES:
        await create_tables(db_session.engine)

    container = build_container()
    app.state.container = container
    set_container(container)

    logger.info("Application started", extra={"version": settings.VERSION})

    yield

    # Shutdown
    await db_session.close_db()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="People, clients and jobs API",
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Rate limiting middleware
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Include API router
    app.include_router(api_router, prefix=settings.API_PREFIX)

    # Root-level health endpoint for load balancers
    app.add_api_route("/health", get_health, methods=["GET"], include_in_schema=False)

    # Global exception handlers
    setup_exception_handlers(app)

    return app


app = create_app()
