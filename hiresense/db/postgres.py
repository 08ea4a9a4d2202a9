"""
SQL Connection Utility

PostgreSQL in production. The engine is built from a URL, so any
SQLAlchemy dialect works (tests run against SQLite).
"""
from contextlib import contextmanager
from functools import lru_cache
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from hiresense.core.config import get_settings
from hiresense.core.log import get_logger

logger = get_logger(__name__)


def build_engine(url: str, connect_timeout: Optional[int] = None, echo: bool = False) -> Engine:
    """
    Create an engine for the given URL.

    connect_timeout only applies to PostgreSQL; it makes startup fail fast
    when the server is down so storage selection can move on.
    """
    if url.startswith("sqlite"):
        return create_engine(url, echo=echo)

    connect_args = {}
    if connect_timeout:
        connect_args["connect_timeout"] = connect_timeout
    # pool_size=5: maintain 5 connections ready
    # max_overflow=10: allow 10 extra connections under load
    return create_engine(
        url,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
        connect_args=connect_args,
        echo=echo
    )


@lru_cache()
def get_engine() -> Engine:
    """Engine for the configured PostgreSQL database (created once)."""
    settings = get_settings()
    return build_engine(
        settings.postgres_url,
        connect_timeout=settings.postgres_connect_timeout,
        echo=settings.debug
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def session_scope(factory: sessionmaker):
    """
    Context manager for database sessions.
    Usage:
        with session_scope(factory) as db:
            db.execute(text("SELECT * FROM users"))
    """
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def test_postgres_connection(engine: Optional[Engine] = None) -> bool:
    """
    Test if the database is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with (engine or get_engine()).connect() as conn:
            return conn.execute(text("SELECT 1")).scalar() == 1
    except Exception as e:
        logger.warning("PostgreSQL connection failed: %s", e)
        return False
