"""
SQLAlchemy implementations of the store protocols in ``domain.stores``.

Repositories only flush; committing or rolling back the surrounding
transaction belongs to whoever owns the session (see ``db.session``).
"""
import logging
from datetime import date, time
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from domain.enums import UserRole
from domain.exceptions import NotFoundError, SlotConflictError
from domain.models import ReservationRecord, ShiftRecord, UserRecord

from .models_sqlalchemy import Reservation, Shift, User


logger = logging.getLogger(__name__)


class UserRepository:
    """Users table access."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, user_id: int) -> Optional[UserRecord]:
        user = self.session.get(User, user_id)
        return UserRecord.model_validate(user) if user else None

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        user = self.session.scalars(
            select(User).where(User.email == email)
        ).first()
        return UserRecord.model_validate(user) if user else None

    def find_by_role(self, role: UserRole) -> List[UserRecord]:
        users = self.session.scalars(
            select(User).where(User.role == role).order_by(User.name, User.id)
        ).all()
        return [UserRecord.model_validate(u) for u in users]

    def create(
        self,
        name: str,
        email: str,
        role: UserRole,
        password_hash: str,
    ) -> UserRecord:
        """
        Insert a user.

        Args:
            name: Display name (used as the staff key in reports)
            email: Unique login email
            role: User role
            password_hash: Stored credential, never read back by the services

        Returns:
            Created UserRecord
        """
        user = User(name=name, email=email, role=role, password_hash=password_hash)
        self.session.add(user)
        self.session.flush()
        logger.info("User created", extra={"user_id": user.id, "role": role.value})
        return UserRecord.model_validate(user)


class ShiftRepository:
    """Shifts table access."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_staff_and_date(self, staff_id: int, shift_date: date) -> Optional[ShiftRecord]:
        shift = self.session.scalars(
            select(Shift).where(Shift.staff_id == staff_id, Shift.date == shift_date)
        ).first()
        return ShiftRecord.model_validate(shift) if shift else None

    def find_by_staff_ordered(self, staff_id: int) -> List[ShiftRecord]:
        shifts = self.session.scalars(
            select(Shift)
            .where(Shift.staff_id == staff_id)
            .order_by(Shift.date, Shift.start_time)
        ).all()
        return [ShiftRecord.model_validate(s) for s in shifts]

    def find_in_date_range(self, start_date: date, end_date: date) -> List[ShiftRecord]:
        shifts = self.session.scalars(
            select(Shift)
            .where(Shift.date.between(start_date, end_date))
            .order_by(Shift.date, Shift.start_time, Shift.staff_id)
        ).all()
        return [ShiftRecord.model_validate(s) for s in shifts]

    def save(self, shift: ShiftRecord) -> ShiftRecord:
        """
        Insert a new shift or overwrite the stored one with the same id.

        Raises:
            NotFoundError: If the record carries an id that is not stored
        """
        if shift.id is None:
            row = Shift(
                staff_id=shift.staff_id,
                date=shift.date,
                start_time=shift.start_time,
                end_time=shift.end_time,
            )
            self.session.add(row)
        else:
            row = self.session.get(Shift, shift.id)
            if row is None:
                raise NotFoundError(f"Shift {shift.id} not found")
            row.staff_id = shift.staff_id
            row.date = shift.date
            row.start_time = shift.start_time
            row.end_time = shift.end_time

        self.session.flush()
        self.session.refresh(row)
        return ShiftRecord.model_validate(row)


class ReservationRepository:
    """Reservations table access."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, reservation_id: int) -> Optional[ReservationRecord]:
        reservation = self.session.get(Reservation, reservation_id)
        return ReservationRecord.model_validate(reservation) if reservation else None

    def find_by_customer_ordered(self, customer_id: int) -> List[ReservationRecord]:
        return self._all(
            select(Reservation)
            .where(Reservation.customer_id == customer_id)
            .order_by(Reservation.date.desc(), Reservation.time_slot.desc())
        )

    def find_all(self) -> List[ReservationRecord]:
        return self._all(select(Reservation).order_by(Reservation.id))

    def find_in_date_range(self, start_date: date, end_date: date) -> List[ReservationRecord]:
        return self._all(
            select(Reservation)
            .where(Reservation.date.between(start_date, end_date))
            .order_by(Reservation.date, Reservation.time_slot, Reservation.id)
        )

    def find_exact(
        self, reservation_date: date, time_slot: time, staff_id: Optional[int]
    ) -> Optional[ReservationRecord]:
        reservation = self.session.scalars(
            select(Reservation).where(
                Reservation.date == reservation_date,
                Reservation.time_slot == time_slot,
                Reservation.staff_id == staff_id,
            )
        ).first()
        return ReservationRecord.model_validate(reservation) if reservation else None

    def find_by_staff_and_date_range(
        self, staff_id: int, start_date: date, end_date: date
    ) -> List[ReservationRecord]:
        return self._all(
            select(Reservation)
            .where(
                Reservation.staff_id == staff_id,
                Reservation.date.between(start_date, end_date),
            )
            .order_by(Reservation.date, Reservation.time_slot)
        )

    def save(self, reservation: ReservationRecord) -> ReservationRecord:
        """
        Insert a new reservation or overwrite the stored one with the same id.

        The write runs inside a savepoint. When the database rejects it, only
        this write is undone and other pending work in the session is kept.

        Args:
            reservation: Record to persist; ``staff_name`` and the timestamps
                are ignored

        Returns:
            The stored record

        Raises:
            NotFoundError: If the record carries an id that is not stored
            SlotConflictError: If the database already holds the same
                (staff, date, time slot)
        """
        try:
            with self.session.begin_nested():
                row = self._apply(reservation)
                self.session.flush()
        except IntegrityError as e:
            logger.warning(
                "Reservation rejected by slot constraint",
                extra={
                    "staff_id": reservation.staff_id,
                    "date": reservation.date.isoformat(),
                    "time_slot": reservation.time_slot.isoformat(),
                },
            )
            raise SlotConflictError("This time slot is already booked.") from e

        self.session.refresh(row)
        return ReservationRecord.model_validate(row)

    def _apply(self, reservation: ReservationRecord) -> Reservation:
        if reservation.id is None:
            row = Reservation(
                customer_id=reservation.customer_id,
                staff_id=reservation.staff_id,
                date=reservation.date,
                time_slot=reservation.time_slot,
                menu=reservation.menu,
                status=reservation.status,
            )
            self.session.add(row)
            return row

        row = self.session.get(Reservation, reservation.id)
        if row is None:
            raise NotFoundError(f"Reservation {reservation.id} not found")
        row.date = reservation.date
        row.time_slot = reservation.time_slot
        row.menu = reservation.menu
        row.status = reservation.status
        return row

    def _all(self, statement) -> List[ReservationRecord]:
        rows = self.session.scalars(statement).all()
        return [ReservationRecord.model_validate(r) for r in rows]
