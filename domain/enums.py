"""Domain enums for the booking backend."""

from enum import Enum


class UserRole(str, Enum):
    """User role enumeration."""

    CUSTOMER = "CUSTOMER"
    STAFF = "STAFF"
    ADMIN = "ADMIN"


class ReservationStatus(str, Enum):
    """Reservation status enumeration."""

    BOOKED = "BOOKED"
    CANCELLED = "CANCELLED"
