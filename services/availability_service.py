"""Availability service: free slots of a staff member on a date."""
import logging
from datetime import date, time
from typing import List

from core.utils_datetime import generate_time_slots
from domain.exceptions import NotFoundError
from domain.stores import ReservationStore, ShiftStore, UserStore


logger = logging.getLogger(__name__)


class AvailabilityService:
    """Derives bookable slots from a shift minus the recorded reservations."""

    def __init__(
        self,
        users: UserStore,
        shifts: ShiftStore,
        reservations: ReservationStore,
        slot_interval_minutes: int = 30,
    ):
        """
        Initialize the availability service.

        Args:
            users: User lookup
            shifts: Shift lookup
            reservations: Reservation lookup
            slot_interval_minutes: Granularity of generated slots
        """
        self.users = users
        self.shifts = shifts
        self.reservations = reservations
        self.slot_interval_minutes = slot_interval_minutes

    def available_slots(self, staff_id: int, on_date: date) -> List[time]:
        """
        List the free slot start times of a staff member on a date.

        Slots run from the shift start in fixed steps and stop before the
        shift end. A slot is dropped when any recorded reservation of the
        staff member starts at exactly that time, cancelled ones included.

        Args:
            staff_id: Staff member ID
            on_date: Date to inspect

        Returns:
            Ascending list of free slot times; empty if there is no shift

        Raises:
            NotFoundError: If the staff member does not exist
        """
        staff = self.users.find_by_id(staff_id)
        if staff is None:
            raise NotFoundError("Staff not found")

        shift = self.shifts.find_by_staff_and_date(staff.id, on_date)
        if shift is None:
            logger.debug(
                "No shift, no availability",
                extra={"staff_id": staff.id, "date": on_date.isoformat()},
            )
            return []

        candidates = generate_time_slots(
            shift.start_time, shift.end_time, self.slot_interval_minutes
        )
        booked = {
            r.time_slot
            for r in self.reservations.find_by_staff_and_date_range(staff.id, on_date, on_date)
        }

        return [slot for slot in candidates if slot not in booked]
