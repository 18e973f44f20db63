"""Tests for domain models and enums."""
import pytest
from datetime import date, time

from pydantic import ValidationError

from domain.enums import ReservationStatus, UserRole
from domain.models import (
    ReservationCreate,
    ReservationRecord,
    ReservationUpdate,
    ShiftRecord,
    ShiftUpsert,
)


class TestEnums:
    """Tests for the closed status and role enumerations."""

    def test_values(self):
        assert ReservationStatus.BOOKED == "BOOKED"
        assert ReservationStatus.CANCELLED == "CANCELLED"
        assert {r.value for r in UserRole} == {"CUSTOMER", "STAFF", "ADMIN"}

    def test_unknown_status_rejected(self):
        with pytest.raises(ValueError):
            ReservationStatus("PENDING")


class TestShiftModels:
    """Tests for the shift window invariant."""

    def test_valid_shift(self):
        shift = ShiftRecord(staff_id=1, date=date(2024, 1, 10), start_time=time(9, 0), end_time=time(12, 0))
        assert shift.id is None

    @pytest.mark.parametrize("start, end", [(time(12, 0), time(12, 0)), (time(13, 0), time(12, 0))])
    def test_start_must_precede_end(self, start, end):
        with pytest.raises(ValidationError):
            ShiftUpsert(start_time=start, end_time=end)

    def test_offset_aware_window_rejected(self):
        with pytest.raises(ValidationError):
            ShiftUpsert.model_validate({"start_time": "09:00Z", "end_time": "12:00"})


class TestReservationModels:
    """Tests for reservation records and requests."""

    def test_defaults(self):
        record = ReservationRecord(customer_id=1, date=date(2024, 1, 10), time_slot=time(9, 0))

        assert record.status == ReservationStatus.BOOKED
        assert record.staff_id is None
        assert record.menu is None
        assert not record.is_cancelled

    def test_create_request_parses_iso_strings(self):
        request = ReservationCreate.model_validate(
            {"customer_id": 1, "staff_id": 2, "date": "2024-01-10", "time_slot": "09:30", "menu": " Cut "}
        )

        assert request.date == date(2024, 1, 10)
        assert request.time_slot == time(9, 30)
        assert request.menu == "Cut"

    @pytest.mark.parametrize("model", [ReservationCreate, ReservationUpdate])
    def test_offset_aware_slot_rejected(self, model):
        payload = {"customer_id": 1, "staff_id": 2, "date": "2024-01-10", "time_slot": "09:00:00+09:00"}

        with pytest.raises(ValidationError):
            model.model_validate(payload)

    def test_status_must_be_known(self):
        with pytest.raises(ValidationError):
            ReservationRecord(customer_id=1, date=date(2024, 1, 10), time_slot=time(9, 0), status="DONE")
