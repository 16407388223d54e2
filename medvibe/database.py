"""
Database connection and session management.
Provides SQLAlchemy engine, session, base class for models and the
Alembic migration runner used at startup.
"""
import logging
import sqlite3
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from .config import settings

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


# Create SQLAlchemy engine for database connection
engine = create_engine(settings.database_url, **_engine_kwargs(settings.database_url))

# Create session factory for database sessions
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

# Create base class for declarative models
Base = declarative_base()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite only enforces ON DELETE CASCADE with this pragma set per connection."""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_db():
    """
    Database dependency - Creates and yields a database session.

    The session is automatically closed after the request is processed,
    even if an exception occurs during request handling.

    Yields:
        SQLAlchemy Session: Database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def alembic_config(database_url: str = None) -> Config:
    """
    Build an Alembic configuration pointing at the packaged migrations.

    Args:
        database_url: Connection string to migrate, defaults to the configured one

    Returns:
        Config: Alembic configuration object
    """
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    config.set_main_option("sqlalchemy.url", database_url or settings.database_url)
    return config


def run_migrations(bind: Engine = None) -> None:
    """
    Apply every pending schema revision in order.

    Revisions already recorded in ``alembic_version`` are skipped, so this
    is safe to call on every startup.

    Args:
        bind: Engine to migrate, defaults to the application engine
    """
    bind = bind or engine
    config = alembic_config(bind.url.render_as_string(hide_password=False))
    with bind.begin() as connection:
        config.attributes["connection"] = connection
        command.upgrade(config, "head")
    logger.info("🗄️  Database schema is up to date")
