"""Database configuration and session management.

This module initializes the SQLAlchemy engine and session factory,
switches on foreign key enforcement for SQLite connections, and provides
the request-scoped session dependency used by the services.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from .core import get_settings
from .logging import get_logger

logger = get_logger(__name__)
settings = get_settings()


def is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


engine = create_engine(
    settings.DATABASE_URL,
    connect_args={"check_same_thread": False} if is_sqlite(settings.DATABASE_URL) else {},
    future=True,
)
"""SQLAlchemy engine bound to the configured database URL."""


@event.listens_for(Engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """Make SQLite honour ``ON DELETE CASCADE`` on every new connection."""
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    future=True,
)
"""Factory for database sessions."""


Base = declarative_base()
"""Declarative base class for SQLAlchemy models."""


def init_db(bind=None) -> None:
    """
    Create every table that does not exist yet.

    Args:
        bind: Engine to use; defaults to the application engine.
    """
    target = bind or engine
    Base.metadata.create_all(bind=target)
    logger.info("Database tables ready on %s", target.url.render_as_string())


def get_db():
    """
    Provide a SQLAlchemy database session.

    This function is used as a FastAPI dependency.
    It yields a database session and ensures it is
    properly closed after the request is completed.
    """

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
