"""Viewport helpers for the rendering side: today marker and scroll centering."""

from __future__ import annotations

from datetime import date

from .models import TimelineContext


def today_offset_px(context: TimelineContext, instant: date) -> int:
    """Pixel offset of the "today" marker for ``instant``.

    Uses the same mapping as the layout engine so the marker lines up with
    rendered rectangles.
    """
    return context.pixel_from_date(instant)


def centered_scroll_offset(today_px: float, viewport_width: float) -> float:
    """Horizontal scroll offset that centers ``today_px`` in the viewport."""
    return max(0, today_px - viewport_width / 2)


def scroll_offset_for(context: TimelineContext, instant: date, viewport_width: float) -> float:
    """Scroll offset centering the instant's day in a viewport of ``viewport_width``."""
    return centered_scroll_offset(today_offset_px(context, instant), viewport_width)
