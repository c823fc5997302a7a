"""Data models for the timeline grid."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from .calendar_math import diff_days, pixel_from_date, round_half_up, start_of_day


class ZoomLevel(str, Enum):
    """Timeline granularity: pixel density and column size."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class WidthPolicy(str, Enum):
    """How column widths are derived from the dates they cover."""

    PROPORTIONAL = "proportional"  # width = days * px_per_day
    FIXED = "fixed"  # every column has the same width


@dataclass(slots=True, frozen=True)
class TimelineColumn:
    """A header column covering ``[start, end)``."""

    start: date
    end: date
    label: str
    width_px: int
    left_px: int = 0

    @property
    def right_px(self) -> int:
        return self.left_px + self.width_px

    @property
    def days(self) -> int:
        return diff_days(self.start, self.end)


@dataclass(slots=True, frozen=True)
class TimelineContext:
    """Visible window, pixel scale and columns for one zoom level.

    ``visible_start`` is inclusive and ``visible_end`` exclusive. A context is
    never modified; build a new one when the zoom level or reference date
    changes.

    With the fixed width policy ``px_per_day`` is only the configured density
    for the zoom level, not the scale of the grid: positions come from
    ``pixel_from_date``, which places a date inside its fixed-width column.
    """

    zoom: ZoomLevel
    visible_start: date
    visible_end: date
    px_per_day: int
    columns: tuple[TimelineColumn, ...]
    total_width_px: int
    width_policy: WidthPolicy = WidthPolicy.PROPORTIONAL
    _column_starts: tuple[date, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_column_starts", tuple(c.start for c in self.columns))

    @property
    def visible_days(self) -> int:
        return diff_days(self.visible_start, self.visible_end)

    def contains(self, value: date) -> bool:
        """Check whether the value's calendar date falls inside the window."""
        day = start_of_day(value)
        return self.visible_start <= day < self.visible_end

    def column_at(self, value: date) -> TimelineColumn | None:
        """Return the column covering the value's date, or None if outside the window."""
        if not self.contains(value):
            return None
        return self.columns[bisect_right(self._column_starts, start_of_day(value)) - 1]

    def offset_px(self, value: date) -> int:
        """Pixel offset of the value's date from ``visible_start``.

        With the proportional policy this is ``pixel_from_date`` at
        ``px_per_day``. With fixed-width columns the date is placed linearly
        inside its own column. Dates outside the window extrapolate from the
        first or last column.
        """
        if self.width_policy is WidthPolicy.PROPORTIONAL or not self.columns:
            return pixel_from_date(self.visible_start, self.px_per_day, value)

        day = start_of_day(value)
        index = bisect_right(self._column_starts, day) - 1
        column = self.columns[min(max(index, 0), len(self.columns) - 1)]
        days_in = diff_days(column.start, day)
        return column.left_px + round_half_up(days_in * column.width_px / column.days)

    def pixel_from_date(self, value: date) -> int:
        """Pixel offset for markers drawn over this grid.

        Holds under both width policies and matches rectangle edges from
        ``layout`` exactly. Prefer it over the module-level
        ``pixel_from_date``, which only knows the proportional scale.
        """
        return self.offset_px(value)

    @property
    def effective_px_per_day(self) -> float:
        """Average pixels per day across the window."""
        return self.total_width_px / self.visible_days


@dataclass(slots=True, frozen=True)
class WorkInterval:
    """A time-bounded entity to place on the timeline.

    ``start`` is inclusive and ``end`` exclusive. Either may be a ``datetime``;
    only its calendar date is used.
    """

    id: str
    group_key: str
    start: date
    end: date


@dataclass(slots=True, frozen=True)
class LayoutRectangle:
    """A work interval positioned in pixels, clipped to the visible window."""

    id: str
    group_key: str
    left_px: int
    width_px: int
    clipped_start: date
    clipped_end: date
    is_clipped: bool

    @property
    def right_px(self) -> int:
        return self.left_px + self.width_px
