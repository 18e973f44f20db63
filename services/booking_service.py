"""Booking service for creating, moving and cancelling reservations."""
import logging
from datetime import date, time
from typing import List, Optional

from core.utils_datetime import format_time_slot, is_within_shift
from domain.enums import ReservationStatus
from domain.exceptions import NotFoundError, SlotConflictError, StaffUnavailableError
from domain.models import ReservationRecord
from domain.stores import ReservationStore, ShiftStore, UserStore


logger = logging.getLogger(__name__)


class BookingService:
    """
    Service for managing reservations against staff shifts.

    A reservation is created ``BOOKED``, may be moved or have its menu
    changed while booked, and is moved to ``CANCELLED`` instead of being
    deleted.
    """

    def __init__(
        self,
        users: UserStore,
        shifts: ShiftStore,
        reservations: ReservationStore,
    ):
        self.users = users
        self.shifts = shifts
        self.reservations = reservations

    def create(
        self,
        customer_id: int,
        staff_id: int,
        reservation_date: date,
        time_slot: time,
        menu: Optional[str] = None,
    ) -> ReservationRecord:
        """
        Create a new reservation.

        Args:
            customer_id: Acting customer
            staff_id: Staff member to book
            reservation_date: Date of the reservation
            time_slot: Start time of the reservation
            menu: Optional menu label

        Returns:
            Created ReservationRecord

        Raises:
            NotFoundError: If the staff member or customer does not exist
            StaffUnavailableError: If the time is outside the staff member's shift
            SlotConflictError: If the slot is already booked
        """
        staff = self.users.find_by_id(staff_id)
        if staff is None:
            raise NotFoundError("Staff not found")

        customer = self.users.find_by_id(customer_id)
        if customer is None:
            raise NotFoundError("Customer not found")

        if not self._is_within_shift(staff.id, reservation_date, time_slot):
            logger.info(
                "Booking rejected: outside shift",
                extra={"staff_id": staff.id, "date": reservation_date.isoformat(),
                       "time_slot": format_time_slot(time_slot)},
            )
            raise StaffUnavailableError("Staff is not available at this time.")

        if self.reservations.find_exact(reservation_date, time_slot, staff.id) is not None:
            logger.info(
                "Booking rejected: slot taken",
                extra={"staff_id": staff.id, "date": reservation_date.isoformat(),
                       "time_slot": format_time_slot(time_slot)},
            )
            raise SlotConflictError("This time slot is already booked.")

        reservation = self.reservations.save(
            ReservationRecord(
                customer_id=customer.id,
                staff_id=staff.id,
                date=reservation_date,
                time_slot=time_slot,
                menu=menu,
                status=ReservationStatus.BOOKED,
            )
        )

        logger.info(
            "Reservation created",
            extra={"reservation_id": reservation.id, "staff_id": staff.id,
                   "customer_id": customer.id},
        )
        return reservation

    def update(
        self,
        reservation_id: int,
        new_date: date,
        new_time_slot: time,
        new_menu: Optional[str] = None,
    ) -> ReservationRecord:
        """
        Move a reservation and/or change its menu.

        The customer, the assigned staff member and the status stay as they
        are. Moving onto the reservation's own current slot is allowed.

        Args:
            reservation_id: ID of the reservation to update
            new_date: New date
            new_time_slot: New start time
            new_menu: New menu label

        Returns:
            Updated ReservationRecord

        Raises:
            NotFoundError: If the reservation does not exist
            SlotConflictError: If another reservation holds the new slot
            StaffUnavailableError: If the new time is outside the staff member's shift
        """
        reservation = self._get_or_raise(reservation_id)

        clash = self.reservations.find_exact(new_date, new_time_slot, reservation.staff_id)
        if clash is not None and clash.id != reservation.id:
            logger.info(
                "Update rejected: slot taken",
                extra={"reservation_id": reservation.id, "conflicting_id": clash.id},
            )
            raise SlotConflictError("This new time slot is already booked.")

        if reservation.staff_id is None or not self._is_within_shift(
            reservation.staff_id, new_date, new_time_slot
        ):
            logger.info(
                "Update rejected: outside shift",
                extra={"reservation_id": reservation.id, "staff_id": reservation.staff_id},
            )
            raise StaffUnavailableError("Staff is not available at this new time.")

        updated = self.reservations.save(
            reservation.model_copy(
                update={"date": new_date, "time_slot": new_time_slot, "menu": new_menu}
            )
        )

        logger.info("Reservation updated", extra={"reservation_id": updated.id})
        return updated

    def cancel(self, reservation_id: int) -> None:
        """
        Cancel a reservation. Cancelling twice is not an error.

        Raises:
            NotFoundError: If the reservation does not exist
        """
        reservation = self._get_or_raise(reservation_id)
        self.reservations.save(
            reservation.model_copy(update={"status": ReservationStatus.CANCELLED})
        )
        logger.info("Reservation cancelled", extra={"reservation_id": reservation.id})

    def list_for_customer(self, customer_id: int) -> List[ReservationRecord]:
        """Reservations of a customer, most recent first."""
        return self.reservations.find_by_customer_ordered(customer_id)

    def get(self, reservation_id: int) -> Optional[ReservationRecord]:
        return self.reservations.find_by_id(reservation_id)

    def list_all(self) -> List[ReservationRecord]:
        return self.reservations.find_all()

    def list_by_date_range(self, start_date: date, end_date: date) -> List[ReservationRecord]:
        """Reservations dated between start_date and end_date, both inclusive."""
        return self.reservations.find_in_date_range(start_date, end_date)

    def _get_or_raise(self, reservation_id: int) -> ReservationRecord:
        reservation = self.reservations.find_by_id(reservation_id)
        if reservation is None:
            raise NotFoundError("Reservation not found")
        return reservation

    def _is_within_shift(self, staff_id: int, on_date: date, time_slot: time) -> bool:
        shift = self.shifts.find_by_staff_and_date(staff_id, on_date)
        if shift is None:
            return False
        return is_within_shift(time_slot, shift.start_time, shift.end_time)
