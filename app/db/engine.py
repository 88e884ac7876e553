"""Database engine construction and per-request sessions.

The engine is built once per application by ``create_app`` and kept on
``app.state``; nothing here holds a process-wide connection.
"""

from collections.abc import Generator

from fastapi import Request
from sqlalchemy import Engine, text
from sqlmodel import Session, SQLModel, create_engine

from app.core.settings import Settings


def build_engine(settings: Settings) -> Engine:
    connect_args: dict[str, object] = {}
    if settings.database_url.startswith("sqlite"):
        # Required for SQLite when used with FastAPI across threads.
        connect_args = {"check_same_thread": False}

    return create_engine(
        settings.database_url,
        echo=settings.db_echo,
        connect_args=connect_args,
        pool_pre_ping=True,
    )


def init_db(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    import app.models  # noqa: F401  (registers table models)

    SQLModel.metadata.create_all(engine)


def ping(engine: Engine) -> None:
    """Run a trivial query; raises if the database is unreachable."""
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))


def get_session(request: Request) -> Generator[Session, None, None]:
    with Session(request.app.state.engine) as session:
        yield session
