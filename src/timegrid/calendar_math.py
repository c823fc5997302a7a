"""Calendar arithmetic for the timeline grid.

Every day difference in this package goes through ``diff_days``. Dates are
reduced to an integer day index before subtracting, so wall-clock shifts in
``datetime`` inputs (DST transitions, differing UTC offsets) never leak into
pixel math.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta

# Epoch for day indexes (1970-01-01, the UTC epoch)
EPOCH = date(1970, 1, 1)
_EPOCH_ORDINAL = EPOCH.toordinal()

MONTHS_PER_YEAR = 12
DAYS_PER_WEEK = 7


def start_of_day(value: date) -> date:
    """Return the calendar date of ``value`` with any time of day stripped.

    Uses the value's own calendar fields; aware datetimes are not converted
    to another timezone first.
    """
    if isinstance(value, datetime):
        return value.date()
    return date(value.year, value.month, value.day)


def start_of_month(value: date) -> date:
    """Return the first day of the value's month."""
    return date(value.year, value.month, 1)


def start_of_week_monday(value: date) -> date:
    """Return the Monday on or before ``value``."""
    day = start_of_day(value)
    sunday_based = day.isoweekday() % DAYS_PER_WEEK  # 0=Sun..6=Sat
    return add_days(day, -((sunday_based + 6) % DAYS_PER_WEEK))


def add_days(value: date, days: int) -> date:
    """Add ``days`` calendar days (may be negative)."""
    return start_of_day(value) + timedelta(days=days)


def add_months_from_month_start(value: date, months: int) -> date:
    """Return the first day of the month ``months`` away from ``value``.

    ``value`` is expected to be a month start. Only its year and month are read.
    """
    year, month_index = divmod(value.month - 1 + months, MONTHS_PER_YEAR)
    return date(value.year + year, month_index + 1, 1)


def day_index(value: date) -> int:
    """Integer number of days between the epoch and the value's calendar date."""
    return start_of_day(value).toordinal() - _EPOCH_ORDINAL


def diff_days(a: date, b: date) -> int:
    """Signed number of calendar days from ``a`` to ``b``."""
    return day_index(b) - day_index(a)


def clamp_date(value: date, lo: date, hi: date) -> date:
    """Clamp ``value`` into ``[lo, hi]`` (inclusive on both ends)."""
    value = start_of_day(value)
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def pixel_from_date(visible_start: date, px_per_day: float, value: date) -> int:
    """Pixel offset of ``value`` from ``visible_start`` at ``px_per_day``.

    This is the same rounding path the layout engine uses for rectangle
    boundaries, so markers placed with it line up with rendered bars.
    """
    return round_half_up(diff_days(visible_start, start_of_day(value)) * px_per_day)
