"""SQLAlchemy models for the booking backend tables."""

import datetime as dt
from typing import Optional

from sqlalchemy import (
    CheckConstraint,
    Date,
    Enum as SAEnum,
    ForeignKey,
    Index,
    Integer,
    String,
    Time,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin
from domain.enums import ReservationStatus, UserRole


class User(Base, TimestampMixin):
    """Customer, staff member or admin."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    role: Mapped[UserRole] = mapped_column(
        SAEnum(UserRole, native_enum=False, length=20, validate_strings=True),
        nullable=False,
        default=UserRole.CUSTOMER,
        index=True,
    )

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"


class Shift(Base, TimestampMixin):
    """Working window of a staff member on one date."""

    __tablename__ = "shifts"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    staff_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"),
        nullable=False,
    )

    date: Mapped[dt.date] = mapped_column(
        Date,
        nullable=False,
        index=True,
    )

    start_time: Mapped[dt.time] = mapped_column(
        Time,
        nullable=False,
    )

    end_time: Mapped[dt.time] = mapped_column(
        Time,
        nullable=False,
    )

    staff: Mapped[User] = relationship(foreign_keys=[staff_id])

    __table_args__ = (
        UniqueConstraint("staff_id", "date", name="uq_shifts_staff_date"),
        CheckConstraint("start_time < end_time", name="start_before_end"),
    )

    def __repr__(self) -> str:
        """String representation of Shift."""
        return (
            f"<Shift(id={self.id}, staff_id={self.staff_id}, date={self.date}, "
            f"start={self.start_time}, end={self.end_time})>"
        )


class Reservation(Base, TimestampMixin):
    """Reservation table model."""

    __tablename__ = "reservations"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    customer_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    staff_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("users.id"),
        nullable=True,
    )

    date: Mapped[dt.date] = mapped_column(
        Date,
        nullable=False,
        index=True,
    )

    time_slot: Mapped[dt.time] = mapped_column(
        Time,
        nullable=False,
    )

    menu: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
    )

    status: Mapped[ReservationStatus] = mapped_column(
        SAEnum(ReservationStatus, native_enum=False, length=20, validate_strings=True),
        nullable=False,
        default=ReservationStatus.BOOKED,
        index=True,
    )

    customer: Mapped[User] = relationship(foreign_keys=[customer_id])
    staff: Mapped[Optional[User]] = relationship(foreign_keys=[staff_id], lazy="joined")

    __table_args__ = (
        # Cancelled rows keep their slot, matching the service-level conflict check
        UniqueConstraint("staff_id", "date", "time_slot", name="uq_reservations_staff_slot"),
        Index("ix_reservations_staff_date", "staff_id", "date"),
        Index("ix_reservations_customer_date_time", "customer_id", "date", "time_slot"),
    )

    @property
    def staff_name(self) -> Optional[str]:
        return self.staff.name if self.staff is not None else None

    def __repr__(self) -> str:
        """String representation of Reservation."""
        return (
            f"<Reservation(id={self.id}, customer_id={self.customer_id}, "
            f"staff_id={self.staff_id}, date={self.date}, time={self.time_slot}, "
            f"status='{self.status}')>"
        )
