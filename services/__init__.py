"""Scheduling services and their wiring to a database session."""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session

from core.config import Settings, settings as default_settings
from db.repositories import ReservationRepository, ShiftRepository, UserRepository

from .availability_service import AvailabilityService
from .booking_service import BookingService
from .reporting_service import ReportingService
from .staff_service import StaffService


@dataclass
class ServiceContainer:
    """All services sharing one session, i.e. one transaction."""

    booking: BookingService
    availability: AvailabilityService
    reporting: ReportingService
    staff: StaffService


def build_services(session: Session, settings: Optional[Settings] = None) -> ServiceContainer:
    """
    Wire the SQLAlchemy repositories of a session into the services.

    Args:
        session: Open database session
        settings: Settings to read slot interval and report labels from

    Returns:
        ServiceContainer
    """
    settings = settings or default_settings
    users = UserRepository(session)
    shifts = ShiftRepository(session)
    reservations = ReservationRepository(session)

    return ServiceContainer(
        booking=BookingService(users, shifts, reservations),
        availability=AvailabilityService(
            users, shifts, reservations,
            slot_interval_minutes=settings.slot_interval_minutes,
        ),
        reporting=ReportingService(
            reservations,
            unspecified_menu_label=settings.unspecified_menu_label,
        ),
        staff=StaffService(users, shifts),
    )


__all__ = [
    "AvailabilityService",
    "BookingService",
    "ReportingService",
    "StaffService",
    "ServiceContainer",
    "build_services",
]
