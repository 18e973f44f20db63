"""
Typed failures raised by the scheduling services.

All of them are recoverable: the request-handling layer turns them into
user-visible messages and the caller may resubmit with other parameters.
"""


class BookingError(Exception):
    """Base class for all booking errors."""


class NotFoundError(BookingError):
    """Raised when a referenced user, staff member or reservation does not exist."""


class StaffUnavailableError(BookingError):
    """Raised when the staff member has no shift or the time lies outside it."""


class SlotConflictError(BookingError):
    """Raised when a reservation already exists for the exact date, time and staff."""
