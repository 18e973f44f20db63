"""Reservation statistics over a date range."""
import logging
from collections import Counter
from datetime import date
from typing import Dict

from domain.stores import ReservationStore


logger = logging.getLogger(__name__)


DEFAULT_UNSPECIFIED_MENU = "unspecified"


class ReportingService:
    """
    Aggregates reservations by menu and by staff member.

    Status is not filtered: cancelled reservations count like booked ones.
    """

    def __init__(
        self,
        reservations: ReservationStore,
        unspecified_menu_label: str = DEFAULT_UNSPECIFIED_MENU,
    ):
        self.reservations = reservations
        self.unspecified_menu_label = unspecified_menu_label

    def count_by_menu(self, start_date: date, end_date: date) -> Dict[str, int]:
        """
        Count reservations per menu label in an inclusive date range.

        Reservations without a menu (or with a blank one) are counted under
        ``unspecified_menu_label``.
        """
        reservations = self.reservations.find_in_date_range(start_date, end_date)
        counts = Counter(
            (r.menu if r.menu and r.menu.strip() else self.unspecified_menu_label)
            for r in reservations
        )
        logger.debug(
            "Menu report built",
            extra={"start_date": start_date.isoformat(), "end_date": end_date.isoformat(),
                   "total": len(reservations)},
        )
        return dict(counts)

    def count_by_staff(self, start_date: date, end_date: date) -> Dict[str, int]:
        """Count reservations per staff display name; unassigned ones are skipped."""
        reservations = self.reservations.find_in_date_range(start_date, end_date)
        counts = Counter(
            r.staff_name for r in reservations
            if r.staff_id is not None and r.staff_name is not None
        )
        return dict(counts)
