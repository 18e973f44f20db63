"""Database session management for the booking backend."""

from contextlib import contextmanager
from typing import Generator, Iterator, Optional

from sqlalchemy import create_engine as sa_create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from core.config import settings


class DatabaseConfig:
    """Database configuration settings."""

    URL: str = settings.database_url
    ECHO: bool = settings.db_echo
    POOL_PRE_PING: bool = True


def _connect_args(url: str) -> dict:
    # SQLite connections are shared across FastAPI's worker threads
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


def _enable_sqlite_savepoints(engine: Engine) -> None:
    """
    Let SQLAlchemy own BEGIN on pysqlite connections.

    The driver otherwise defers BEGIN until the first DML statement, so a
    SAVEPOINT issued earlier would open and then commit its own transaction.
    """
    @event.listens_for(engine, "connect")
    def _disable_driver_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")


def create_engine(
    url: str = DatabaseConfig.URL,
    echo: bool = DatabaseConfig.ECHO,
) -> Engine:
    """
    Create SQLAlchemy engine.

    Args:
        url: Database URL
        echo: Whether to log all SQL statements

    Returns:
        SQLAlchemy engine
    """
    engine = sa_create_engine(
        url,
        echo=echo,
        pool_pre_ping=DatabaseConfig.POOL_PRE_PING,
        connect_args=_connect_args(url),
    )
    if engine.dialect.name == "sqlite":
        _enable_sqlite_savepoints(engine)
    return engine


def create_test_engine(url: str = "sqlite://") -> Engine:
    """
    Create an in-memory engine for testing.

    StaticPool keeps the single in-memory database alive for every
    connection checked out of the engine.
    """
    engine = sa_create_engine(
        url,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    _enable_sqlite_savepoints(engine)
    return engine


def create_session_factory(bind: Engine) -> sessionmaker:
    """Build a session factory bound to an engine."""
    return sessionmaker(
        bind=bind,
        class_=Session,
        expire_on_commit=False,
        autoflush=False,
    )


# Global engine instance
engine: Engine = create_engine()

# Session factory
SessionLocal = create_session_factory(engine)


def get_session() -> Generator[Session, None, None]:
    """
    Dependency for getting a database session.

    One session is one transaction: it is committed when the caller finishes
    without error and rolled back otherwise.

    Yields:
        Session instance

    Example:
        def my_view(session: Session = Depends(get_session)):
            # use session
            pass
    """
    with SessionLocal() as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise


@contextmanager
def get_session_context(factory: Optional[sessionmaker] = None) -> Iterator[Session]:
    """
    Context manager for getting a database session.

    Example:
        with get_session_context() as session:
            # use session
            pass
    """
    factory = factory or SessionLocal
    with factory() as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise


def init_db(bind: Optional[Engine] = None) -> None:
    """Initialize database by creating all tables."""
    from . import models_sqlalchemy  # noqa: F401  (registers tables)
    from .base import Base

    Base.metadata.create_all(bind=bind or engine)


def drop_db(bind: Optional[Engine] = None) -> None:
    """Drop all database tables. Use with caution!"""
    from .base import Base

    Base.metadata.drop_all(bind=bind or engine)


def close_db() -> None:
    """Close database engine and all connections."""
    engine.dispose()
