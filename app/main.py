import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.cors import add_cors_middleware
from app.core.exception_handlers import register_exception_handlers
from app.core.logging import configure_logging
from app.core.request_logging import add_request_logging_middleware
from app.core.security_headers import add_security_headers_middleware
from app.core.settings import Settings, get_settings
from app.db.engine import build_engine, init_db, ping
from app.health.router import router as health_router
from app.user.router import router as user_router

configure_logging()

logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    engine: Engine = app.state.engine
    try:
        ping(engine)
        if settings.db_auto_create:
            init_db(engine)
    except SQLAlchemyError:
        logger.exception("Failed to connect to the database")
        raise
    logger.info("Database connected (%s)", engine.url.render_as_string())

    yield

    if app.state.owns_engine:
        engine.dispose()


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Configuration; read from the environment when omitted
        engine: Database engine to use; built from settings when omitted.
            An engine passed in is not disposed on shutdown.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="User Records API",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
    )
    app.state.settings = settings
    app.state.owns_engine = engine is None
    app.state.engine = engine if engine is not None else build_engine(settings)

    api_router = APIRouter(prefix=settings.normalized_api_prefix)
    api_router.include_router(health_router)
    api_router.include_router(user_router)
    app.include_router(api_router)

    add_security_headers_middleware(app, settings)
    add_request_logging_middleware(app)
    add_cors_middleware(app, settings)
    register_exception_handlers(app)

    return app


app = create_app()
