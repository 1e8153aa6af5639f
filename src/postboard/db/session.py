"""Engine, session factory and declarative base for the Postboard schema."""

from __future__ import annotations

from collections.abc import Generator

from sqlalchemy import MetaData, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from postboard.core.settings import settings


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


def _engine_options(url: str) -> dict:
    options: dict = {"pool_pre_ping": True, "echo": settings.sql_debug}
    if url.startswith("sqlite"):
        # Requests may be served from a different thread than the one that opened the connection.
        options["connect_args"] = {"check_same_thread": False}
    return options


engine = create_engine(
    settings.effective_database_url,
    **_engine_options(settings.effective_database_url),
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session for dependency injection."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def schema_metadata() -> MetaData:
    """Return ``Base.metadata`` with every table registered on it."""
    from postboard import models  # noqa: F401

    return Base.metadata


def create_tables() -> None:
    """Create all database tables."""
    schema_metadata().create_all(bind=engine)


def drop_tables() -> None:
    """Drop all database tables."""
    schema_metadata().drop_all(bind=engine)
