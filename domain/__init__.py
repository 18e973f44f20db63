"""Domain layer for the booking backend."""

from .enums import ReservationStatus, UserRole
from .exceptions import (
    BookingError,
    NotFoundError,
    SlotConflictError,
    StaffUnavailableError,
)
from .models import (
    AvailabilityResponse,
    CountReport,
    ReservationCreate,
    ReservationRecord,
    ReservationUpdate,
    ShiftRecord,
    ShiftUpsert,
    ShiftWindow,
    UserRecord,
)
from .stores import ReservationStore, ShiftStore, UserStore

__all__ = [
    # Enums
    "ReservationStatus",
    "UserRole",
    # Exceptions
    "BookingError",
    "NotFoundError",
    "SlotConflictError",
    "StaffUnavailableError",
    # Models
    "AvailabilityResponse",
    "CountReport",
    "ReservationCreate",
    "ReservationRecord",
    "ReservationUpdate",
    "ShiftRecord",
    "ShiftUpsert",
    "ShiftWindow",
    "UserRecord",
    # Stores
    "ReservationStore",
    "ShiftStore",
    "UserStore",
]
