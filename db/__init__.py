"""Database layer for the booking backend."""

from .base import Base, TimestampMixin
from .models_sqlalchemy import Reservation, Shift, User
from .repositories import ReservationRepository, ShiftRepository, UserRepository
from .session import (
    engine,
    SessionLocal,
    create_engine,
    create_session_factory,
    create_test_engine,
    get_session,
    get_session_context,
    init_db,
    drop_db,
    close_db,
    DatabaseConfig,
)

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    # Models
    "Reservation",
    "Shift",
    "User",
    # Repositories
    "ReservationRepository",
    "ShiftRepository",
    "UserRepository",
    # Session
    "engine",
    "SessionLocal",
    "create_engine",
    "create_session_factory",
    "create_test_engine",
    "get_session",
    "get_session_context",
    "init_db",
    "drop_db",
    "close_db",
    "DatabaseConfig",
]
