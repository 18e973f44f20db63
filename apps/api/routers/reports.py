"""Reservation statistics endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Query

from apps.api.deps import get_services
from domain.models import CountReport
from services import ServiceContainer


router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/by-menu", response_model=CountReport)
def reservations_by_menu(
    start: date = Query(..., description="First date, inclusive"),
    end: date = Query(..., description="Last date, inclusive"),
    services: ServiceContainer = Depends(get_services),
):
    """Reservation counts per menu, cancelled ones included."""
    counts = services.reporting.count_by_menu(start, end)
    return CountReport(start_date=start, end_date=end, counts=counts, total=sum(counts.values()))


@router.get("/by-staff", response_model=CountReport)
def reservations_by_staff(
    start: date = Query(..., description="First date, inclusive"),
    end: date = Query(..., description="Last date, inclusive"),
    services: ServiceContainer = Depends(get_services),
):
    """Reservation counts per staff member, unassigned ones skipped."""
    counts = services.reporting.count_by_staff(start, end)
    return CountReport(start_date=start, end_date=end, counts=counts, total=sum(counts.values()))
