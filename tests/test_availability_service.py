"""Unit tests for the availability service."""
import pytest
from datetime import date, time

from domain.exceptions import NotFoundError
from services.availability_service import AvailabilityService


@pytest.mark.unit
class TestAvailableSlots:
    """Test free slot calculation."""

    def test_unknown_staff_raises(self, availability_service, users, base_date):
        """Test that an unknown staff id is reported as not found."""
        with pytest.raises(NotFoundError, match="Staff not found"):
            availability_service.available_slots(9999, base_date)

    def test_no_shift_means_no_slots(self, availability_service, users, base_date):
        """Test that a staff member without a shift has no availability."""
        assert availability_service.available_slots(users["staff"].id, base_date) == []

    def test_one_hour_shift_yields_two_slots(self, availability_service, users, add_shift, base_date):
        """Test 30-minute granularity with the shift end excluded."""
        add_shift(users["staff"].id, base_date, time(9, 0), time(10, 0))

        slots = availability_service.available_slots(users["staff"].id, base_date)

        assert slots == [time(9, 0), time(9, 30)]

    def test_shift_not_aligned_to_interval(self, availability_service, users, add_shift, base_date):
        """Test that slots step from the shift start, not from the full hour."""
        add_shift(users["staff"].id, base_date, time(9, 15), time(10, 30))

        slots = availability_service.available_slots(users["staff"].id, base_date)

        assert slots == [time(9, 15), time(9, 45), time(10, 15)]

    def test_booked_slots_are_excluded(
        self, availability_service, users, add_shift, create_reservation, base_date
    ):
        """Test that reserved times disappear and order is preserved."""
        add_shift(users["staff"].id, base_date, time(9, 0), time(11, 0))
        create_reservation(time_slot=time(9, 30))

        slots = availability_service.available_slots(users["staff"].id, base_date)

        assert slots == [time(9, 0), time(10, 0), time(10, 30)]

    def test_cancelled_reservation_still_blocks_slot(
        self, availability_service, booking_service, users, add_shift, create_reservation, base_date
    ):
        """Test that a cancelled reservation keeps its slot out of availability."""
        add_shift(users["staff"].id, base_date, time(9, 0), time(10, 0))
        reservation = create_reservation(time_slot=time(9, 0))
        booking_service.cancel(reservation.id)

        slots = availability_service.available_slots(users["staff"].id, base_date)

        assert slots == [time(9, 30)]

    def test_off_grid_reservation_does_not_block(
        self, availability_service, users, add_shift, create_reservation, base_date
    ):
        """Test that only an exact time match removes a slot."""
        add_shift(users["staff"].id, base_date, time(9, 0), time(10, 0))
        create_reservation(time_slot=time(9, 59))

        slots = availability_service.available_slots(users["staff"].id, base_date)

        assert slots == [time(9, 0), time(9, 30)]

    def test_other_staff_and_other_days_ignored(
        self, availability_service, users, add_shift, create_reservation, base_date
    ):
        """Test that reservations of other staff or other dates do not interfere."""
        next_day = date(2024, 1, 11)
        add_shift(users["staff"].id, base_date, time(9, 0), time(10, 0))
        add_shift(users["other_staff"].id, base_date, time(9, 0), time(10, 0))
        add_shift(users["staff"].id, next_day, time(9, 0), time(10, 0))
        create_reservation(staff_id=users["other_staff"].id, time_slot=time(9, 0))
        create_reservation(reservation_date=next_day, time_slot=time(9, 30))

        slots = availability_service.available_slots(users["staff"].id, base_date)

        assert slots == [time(9, 0), time(9, 30)]

    def test_custom_interval(self, user_repository, shift_repository, reservation_repository,
                             users, add_shift, base_date):
        """Test that the slot interval is configurable."""
        add_shift(users["staff"].id, base_date, time(9, 0), time(10, 0))
        service = AvailabilityService(
            user_repository, shift_repository, reservation_repository, slot_interval_minutes=15
        )

        slots = service.available_slots(users["staff"].id, base_date)

        assert slots == [time(9, 0), time(9, 15), time(9, 30), time(9, 45)]
