"""Staff directory, shift and availability endpoints."""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query

from apps.api.deps import get_services
from domain.models import AvailabilityResponse, ShiftRecord, ShiftUpsert, UserRecord
from services import ServiceContainer


router = APIRouter(tags=["staff"])


@router.get("/staff", response_model=List[UserRecord])
def list_staff(services: ServiceContainer = Depends(get_services)):
    return services.staff.list_staff()


@router.get("/staff/{staff_id}/availability", response_model=AvailabilityResponse)
def get_availability(
    staff_id: int,
    on_date: date = Query(..., alias="date", description="Date to inspect"),
    services: ServiceContainer = Depends(get_services),
):
    """
    Free slots of a staff member on a date.

    Args:
        staff_id: Staff member ID
        on_date: Date to inspect
        services: Request-scoped services

    Returns:
        AvailabilityResponse: Ascending free slot times
    """
    slots = services.availability.available_slots(staff_id, on_date)
    return AvailabilityResponse(staff_id=staff_id, date=on_date, slots=slots)


@router.put("/staff/{staff_id}/shifts/{shift_date}", response_model=ShiftRecord)
def put_shift(
    staff_id: int,
    shift_date: date,
    payload: ShiftUpsert,
    services: ServiceContainer = Depends(get_services),
):
    """Create or replace the shift of a staff member on a date."""
    return services.staff.upsert_shift(
        staff_id, shift_date, payload.start_time, payload.end_time
    )


@router.get("/staff/{staff_id}/shifts", response_model=List[ShiftRecord])
def list_staff_shifts(
    staff_id: int,
    services: ServiceContainer = Depends(get_services),
):
    return services.staff.shifts_for_staff(staff_id)


@router.get("/shifts", response_model=List[ShiftRecord])
def list_shifts(
    start: date = Query(..., description="First date, inclusive"),
    end: date = Query(..., description="Last date, inclusive"),
    services: ServiceContainer = Depends(get_services),
):
    return services.staff.shifts_in_range(start, end)
