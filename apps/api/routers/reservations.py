"""Reservation endpoints: booking, moving, cancelling and listing."""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from apps.api.deps import get_services
from domain.models import ReservationCreate, ReservationRecord, ReservationUpdate
from services import ServiceContainer


router = APIRouter(tags=["reservations"])


@router.post(
    "/reservations",
    response_model=ReservationRecord,
    status_code=status.HTTP_201_CREATED,
)
def create_reservation(
    payload: ReservationCreate,
    services: ServiceContainer = Depends(get_services),
):
    """
    Book a slot with a staff member for the acting customer.

    Args:
        payload: Customer, staff, date, time slot and menu
        services: Request-scoped services

    Returns:
        ReservationRecord: The created reservation
    """
    return services.booking.create(
        customer_id=payload.customer_id,
        staff_id=payload.staff_id,
        reservation_date=payload.date,
        time_slot=payload.time_slot,
        menu=payload.menu,
    )


@router.get("/reservations", response_model=List[ReservationRecord])
def list_reservations(
    start: Optional[date] = Query(None, description="First date, inclusive"),
    end: Optional[date] = Query(None, description="Last date, inclusive"),
    services: ServiceContainer = Depends(get_services),
):
    """List all reservations, or only those dated between start and end."""
    if start is None and end is None:
        return services.booking.list_all()
    if start is None or end is None:
        raise HTTPException(status_code=400, detail="Both start and end are required for a date range")
    return services.booking.list_by_date_range(start, end)


@router.get("/reservations/{reservation_id}", response_model=ReservationRecord)
def get_reservation(
    reservation_id: int,
    services: ServiceContainer = Depends(get_services),
):
    reservation = services.booking.get(reservation_id)

    if not reservation:
        raise HTTPException(status_code=404, detail="Reservation not found")

    return reservation


@router.put("/reservations/{reservation_id}", response_model=ReservationRecord)
def update_reservation(
    reservation_id: int,
    payload: ReservationUpdate,
    services: ServiceContainer = Depends(get_services),
):
    """Move a reservation to a new date/time and set its menu."""
    return services.booking.update(
        reservation_id,
        new_date=payload.date,
        new_time_slot=payload.time_slot,
        new_menu=payload.menu,
    )


@router.post(
    "/reservations/{reservation_id}/cancel",
    status_code=status.HTTP_204_NO_CONTENT,
)
def cancel_reservation(
    reservation_id: int,
    services: ServiceContainer = Depends(get_services),
):
    services.booking.cancel(reservation_id)


@router.get("/customers/{customer_id}/reservations", response_model=List[ReservationRecord])
def list_customer_reservations(
    customer_id: int,
    services: ServiceContainer = Depends(get_services),
):
    """Reservation history of a customer, most recent first."""
    return services.booking.list_for_customer(customer_id)
