"""Staff directory and shift management."""
import logging
from datetime import date, time
from typing import List, Optional

from domain.enums import UserRole
from domain.exceptions import NotFoundError
from domain.models import ShiftRecord, UserRecord
from domain.stores import ShiftStore, UserStore


logger = logging.getLogger(__name__)


class StaffService:
    """Lists staff members and maintains their one-per-day shifts."""

    def __init__(self, users: UserStore, shifts: ShiftStore):
        self.users = users
        self.shifts = shifts

    def list_staff(self) -> List[UserRecord]:
        """All users with the STAFF role."""
        return self.users.find_by_role(UserRole.STAFF)

    def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        return self.users.find_by_email(email)

    def upsert_shift(
        self,
        staff_id: int,
        shift_date: date,
        start_time: time,
        end_time: time,
    ) -> ShiftRecord:
        """
        Create the shift of a staff member on a date, or replace its window.

        Args:
            staff_id: Staff member ID
            shift_date: Shift date
            start_time: Shift start
            end_time: Shift end, exclusive

        Returns:
            The stored ShiftRecord

        Raises:
            NotFoundError: If the staff member does not exist
            ValueError: If start_time is not before end_time
        """
        staff = self._get_staff_or_raise(staff_id)
        existing = self.shifts.find_by_staff_and_date(staff.id, shift_date)

        shift = ShiftRecord(
            id=existing.id if existing else None,
            staff_id=staff.id,
            date=shift_date,
            start_time=start_time,
            end_time=end_time,
        )
        saved = self.shifts.save(shift)

        logger.info(
            "Shift replaced" if existing else "Shift created",
            extra={"shift_id": saved.id, "staff_id": staff.id, "date": shift_date.isoformat()},
        )
        return saved

    def shifts_for_staff(self, staff_id: int) -> List[ShiftRecord]:
        """Shifts of one staff member ordered by date and start time."""
        staff = self._get_staff_or_raise(staff_id)
        return self.shifts.find_by_staff_ordered(staff.id)

    def shifts_in_range(self, start_date: date, end_date: date) -> List[ShiftRecord]:
        return self.shifts.find_in_date_range(start_date, end_date)

    def _get_staff_or_raise(self, staff_id: int) -> UserRecord:
        staff = self.users.find_by_id(staff_id)
        if staff is None:
            raise NotFoundError("Staff not found")
        return staff
