"""
Time-of-day utilities for shift windows and slot generation.

All arithmetic happens on a fixed reference date so that results never wrap
past midnight the way bare ``time`` arithmetic would.
"""
from datetime import date, datetime, time, timedelta
from typing import List


_REFERENCE_DATE = date(2000, 1, 1)


def _on_reference_date(t: time) -> datetime:
    return datetime.combine(_REFERENCE_DATE, t)


def minus_minutes(t: time, minutes: int) -> time:
    """
    Subtract minutes from a time of day, clamped at 00:00.

    Args:
        t: Time of day
        minutes: Minutes to subtract

    Returns:
        The shifted time, or 00:00 if the result would fall on the previous day
    """
    shifted = _on_reference_date(t) - timedelta(minutes=minutes)
    if shifted.date() < _REFERENCE_DATE:
        return time(0, 0)
    return shifted.time()


def plus_minutes(t: time, minutes: int) -> time:
    """Add minutes to a time of day, clamped at 23:59:59.999999."""
    shifted = _on_reference_date(t) + timedelta(minutes=minutes)
    if shifted.date() > _REFERENCE_DATE:
        return time.max
    return shifted.time()


def is_within_shift(slot: time, shift_start: time, shift_end: time) -> bool:
    """
    Check whether a reservation may start at ``slot`` inside a shift.

    The lower bound is inclusive. The upper bound is the last whole minute
    of the shift: a slot at ``shift_end - 1 minute`` is accepted, a slot at
    ``shift_end`` (or any second after ``shift_end - 1 minute``) is not.

    Args:
        slot: Requested start time
        shift_start: Shift start time
        shift_end: Shift end time

    Returns:
        True if the slot is bookable within the shift
    """
    last_bookable = minus_minutes(shift_end, 1)
    return shift_start <= slot <= last_bookable


def generate_time_slots(start: time, end: time, interval_minutes: int) -> List[time]:
    """
    Generate slot start times from ``start`` up to, but excluding, ``end``.

    Args:
        start: First slot
        end: Exclusive upper bound
        interval_minutes: Step between consecutive slots

    Returns:
        Ascending list of slot times

    Raises:
        ValueError: If interval_minutes is not positive
    """
    if interval_minutes <= 0:
        raise ValueError(f"interval_minutes must be positive, got {interval_minutes}")

    slots: List[time] = []
    current = _on_reference_date(start)
    limit = _on_reference_date(end)
    step = timedelta(minutes=interval_minutes)

    while current < limit:
        slots.append(current.time())
        current += step

    return slots


def format_time_slot(t: time) -> str:
    """Format a slot as HH:MM."""
    return t.strftime("%H:%M")
