"""Grid builder: visible window, scale and header columns for a zoom level."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from .calendar_math import (
    DAYS_PER_WEEK,
    add_days,
    add_months_from_month_start,
    diff_days,
    start_of_day,
    start_of_month,
    start_of_week_monday,
)
from .config import DayZoomConfig, GridConfig, MonthZoomConfig, WeekZoomConfig
from .labels import column_label
from .logger import get_logger
from .models import TimelineColumn, TimelineContext, WidthPolicy, ZoomLevel

logger = get_logger()


def build_grid(
    zoom: ZoomLevel | str,
    reference: date,
    config: GridConfig | None = None,
) -> TimelineContext:
    """Build the timeline context for ``zoom`` anchored on ``reference``.

    The window is derived from the reference date only, so the same inputs
    always give the same context. Callers pass "now" explicitly.

    The reference must leave room for the window inside ``date.min`` ..
    ``date.max``; with the default spans a year from either end
    is enough.

    Args:
        zoom: Zoom level (enum member or its string value)
        reference: Reference instant; only its calendar date is used
        config: Optional grid configuration (defaults when None)

    Returns:
        A fresh TimelineContext

    Raises:
        ValueError: If the window would extend past the supported date range
    """
    zoom = ZoomLevel(zoom)
    config = config or GridConfig()
    today = start_of_day(reference)

    zoom_config = config.for_zoom(zoom)
    px_per_day = zoom_config.px_per_day
    try:
        visible_start, visible_end = visible_range(zoom, today, config)
    except (OverflowError, ValueError) as e:
        raise ValueError(
            f"{zoom.value} window around {today} falls outside the supported date range "
            f"({date.min} .. {date.max})"
        ) from e

    width_policy = WidthPolicy.PROPORTIONAL
    fixed_width_px: int | None = None
    if isinstance(zoom_config, MonthZoomConfig) and zoom_config.width_policy is WidthPolicy.FIXED:
        width_policy = WidthPolicy.FIXED
        fixed_width_px = zoom_config.fixed_width_px

    columns = build_columns(zoom, visible_start, visible_end, px_per_day, fixed_width_px)

    if width_policy is WidthPolicy.PROPORTIONAL:
        total_width_px = diff_days(visible_start, visible_end) * px_per_day
    else:
        total_width_px = sum(c.width_px for c in columns)

    logger.changes(
        f"Built {zoom.value} grid for {today}: [{visible_start}, {visible_end}) "
        f"{len(columns)} columns, {total_width_px}px"
    )

    return TimelineContext(
        zoom=zoom,
        visible_start=visible_start,
        visible_end=visible_end,
        px_per_day=px_per_day,
        columns=columns,
        total_width_px=total_width_px,
        width_policy=width_policy,
    )


def visible_range(zoom: ZoomLevel, today: date, config: GridConfig) -> tuple[date, date]:
    """Return the half-open ``(visible_start, visible_end)`` window around today."""
    if zoom is ZoomLevel.DAY:
        return _day_range(today, config.day)
    if zoom is ZoomLevel.WEEK:
        return _week_range(today, config.week)
    return _month_range(today, config.month)


def _day_range(today: date, config: DayZoomConfig) -> tuple[date, date]:
    return add_days(today, -config.days_before), add_days(today, config.days_after)


def _week_range(today: date, config: WeekZoomConfig) -> tuple[date, date]:
    month_start = start_of_month(today)
    start_anchor = start_of_week_monday(
        add_months_from_month_start(month_start, -config.months_before)
    )
    end_anchor = start_of_week_monday(add_months_from_month_start(month_start, config.months_after))
    # End is exclusive; add a week so the end anchor's week is included
    return start_anchor, add_days(end_anchor, DAYS_PER_WEEK)


def _month_range(today: date, config: MonthZoomConfig) -> tuple[date, date]:
    month_start = start_of_month(today)
    start_anchor = add_months_from_month_start(month_start, -config.months_before)
    end_anchor = add_months_from_month_start(month_start, config.months_after)
    return start_anchor, add_months_from_month_start(end_anchor, 1)


def _next_boundary(zoom: ZoomLevel) -> Callable[[date], date]:
    if zoom is ZoomLevel.DAY:
        return lambda d: add_days(d, 1)
    if zoom is ZoomLevel.WEEK:
        return lambda d: add_days(d, DAYS_PER_WEEK)
    return lambda d: add_months_from_month_start(d, 1)


def build_columns(
    zoom: ZoomLevel,
    visible_start: date,
    visible_end: date,
    px_per_day: int,
    fixed_width_px: int | None = None,
) -> tuple[TimelineColumn, ...]:
    """Partition ``[visible_start, visible_end)`` into contiguous columns.

    With ``fixed_width_px`` every column gets that width; otherwise a column's
    width is its day count times ``px_per_day``. Offsets are taken from the
    same day-index math as the total width, so the columns tile it exactly.
    """
    next_boundary = _next_boundary(zoom)
    columns: list[TimelineColumn] = []
    start = visible_start
    while start < visible_end:
        end = next_boundary(start)
        if fixed_width_px is not None:
            left_px = len(columns) * fixed_width_px
            width_px = fixed_width_px
        else:
            left_px = diff_days(visible_start, start) * px_per_day
            width_px = diff_days(start, end) * px_per_day
        columns.append(
            TimelineColumn(
                start=start,
                end=end,
                label=column_label(zoom, start),
                width_px=width_px,
                left_px=left_px,
            )
        )
        start = end

    return tuple(columns)
