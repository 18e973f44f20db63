"""
Persistence contracts consumed by the scheduling services.

The services only depend on these protocols; ``db.repositories`` provides the
SQLAlchemy implementations.
"""

from datetime import date, time
from typing import List, Optional, Protocol

from .enums import UserRole
from .models import ReservationRecord, ShiftRecord, UserRecord


class UserStore(Protocol):
    """Lookup of customers, staff and admins."""

    def find_by_id(self, user_id: int) -> Optional[UserRecord]:
        ...

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        ...

    def find_by_role(self, role: UserRole) -> List[UserRecord]:
        ...


class ShiftStore(Protocol):
    """Working windows per staff member and date."""

    def find_by_staff_and_date(self, staff_id: int, shift_date: date) -> Optional[ShiftRecord]:
        ...

    def find_by_staff_ordered(self, staff_id: int) -> List[ShiftRecord]:
        """Shifts of one staff member by date, then start time."""
        ...

    def find_in_date_range(self, start_date: date, end_date: date) -> List[ShiftRecord]:
        ...

    def save(self, shift: ShiftRecord) -> ShiftRecord:
        ...


class ReservationStore(Protocol):
    """Reservation records; nothing is ever deleted."""

    def find_by_id(self, reservation_id: int) -> Optional[ReservationRecord]:
        ...

    def find_by_customer_ordered(self, customer_id: int) -> List[ReservationRecord]:
        """Reservations of a customer, most recent date and time first."""
        ...

    def find_all(self) -> List[ReservationRecord]:
        ...

    def find_in_date_range(self, start_date: date, end_date: date) -> List[ReservationRecord]:
        ...

    def find_exact(
        self, reservation_date: date, time_slot: time, staff_id: Optional[int]
    ) -> Optional[ReservationRecord]:
        """Reservation at exactly this date, time and staff, whatever its status."""
        ...

    def find_by_staff_and_date_range(
        self, staff_id: int, start_date: date, end_date: date
    ) -> List[ReservationRecord]:
        ...

    def save(self, reservation: ReservationRecord) -> ReservationRecord:
        ...
