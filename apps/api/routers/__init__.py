"""API routers."""

from . import reports, reservations, staff

__all__ = ["reports", "reservations", "staff"]
