"""Layout engine: place work intervals on the timeline as pixel rectangles."""

from __future__ import annotations

from collections.abc import Iterable

from .calendar_math import start_of_day
from .logger import get_logger
from .models import LayoutRectangle, TimelineContext, WorkInterval

logger = get_logger()


def layout(context: TimelineContext, intervals: Iterable[WorkInterval]) -> list[LayoutRectangle]:
    """Convert work intervals into rectangles for the context's visible window.

    - Intervals are clipped to ``[visible_start, visible_end)``
    - Intervals that are empty, inverted or outside the window are dropped
    - Both edges are rounded independently and width is ``right - left``,
      so adjacent rectangles never accumulate rounding error

    Output keeps input order. Nothing here raises for bad intervals.
    """
    visible_start = context.visible_start
    visible_end = context.visible_end

    rectangles: list[LayoutRectangle] = []

    for interval in intervals:
        start = start_of_day(interval.start)
        end = start_of_day(interval.end)

        # Reject before any pixel math
        if end <= start:
            logger.checks(f"  Dropping {interval.id}: empty or inverted interval [{start}, {end})")
            continue

        if end <= visible_start or start >= visible_end:
            logger.checks(f"  Dropping {interval.id}: outside [{visible_start}, {visible_end})")
            continue

        clipped_start = max(start, visible_start)
        clipped_end = min(end, visible_end)
        if clipped_end <= clipped_start:
            continue

        is_clipped = clipped_start != start or clipped_end != end

        left = context.offset_px(clipped_start)
        right = context.offset_px(clipped_end)
        width = max(0, right - left)
        if width == 0:
            logger.checks(f"  Dropping {interval.id}: zero width at {left}px")
            continue

        logger.debug(
            f"  {interval.id} ({interval.group_key}): left={left} width={width}"
            + (" clipped" if is_clipped else "")
        )
        rectangles.append(
            LayoutRectangle(
                id=interval.id,
                group_key=interval.group_key,
                left_px=left,
                width_px=width,
                clipped_start=clipped_start,
                clipped_end=clipped_end,
                is_clipped=is_clipped,
            )
        )

    logger.changes(f"Laid out {len(rectangles)} rectangles on the {context.zoom.value} grid")
    return rectangles


def group_rectangles(rectangles: Iterable[LayoutRectangle]) -> dict[str, list[LayoutRectangle]]:
    """Group rectangles by ``group_key`` (one timeline row per key).

    Keys appear in order of first occurrence; rectangles keep their order
    within a key. Overlaps inside a row are left as they are.
    """
    groups: dict[str, list[LayoutRectangle]] = {}
    for rectangle in rectangles:
        if rectangle.group_key not in groups:
            groups[rectangle.group_key] = []
        groups[rectangle.group_key].append(rectangle)
    return groups
