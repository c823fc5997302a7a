"""Pytest configuration and fixtures for timegrid tests."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date

import pytest

from timegrid import context
from timegrid.grid import build_grid
from timegrid.logger import reset_logger
from timegrid.models import TimelineContext, WorkInterval, ZoomLevel

# U.S. spring-forward date; the day window around it is [2024-02-25, 2024-03-25)
DST_REFERENCE = date(2024, 3, 10)

# Reference dates covering DST transitions, leap days and year boundaries
REFERENCE_DATES = [
    date(2024, 3, 10),  # U.S. spring forward
    date(2024, 3, 31),  # EU spring forward
    date(2024, 11, 3),  # U.S. fall back
    date(2024, 10, 27),  # EU fall back
    date(2024, 2, 29),  # Leap day
    date(2023, 12, 31),  # Year end
    date(2025, 1, 1),  # Year start, Wednesday
    date(2024, 1, 1),  # Monday
    date(2024, 7, 15),
]

ZOOM_IDS = [z.value for z in ZoomLevel]


@pytest.fixture(autouse=True)
def clean_global_state() -> Iterator[None]:
    """Reset logger and CLI context before and after each test."""
    reset_logger()
    context.set_config_path(None)
    yield
    reset_logger()
    context.set_config_path(None)


@pytest.fixture
def day_context() -> TimelineContext:
    """Day grid around the spring-forward reference date."""
    return build_grid(ZoomLevel.DAY, DST_REFERENCE)


@pytest.fixture
def week_context() -> TimelineContext:
    """Week grid around the spring-forward reference date."""
    return build_grid(ZoomLevel.WEEK, DST_REFERENCE)


@pytest.fixture
def month_context() -> TimelineContext:
    """Month grid around the spring-forward reference date."""
    return build_grid(ZoomLevel.MONTH, DST_REFERENCE)


def interval(
    interval_id: str, start: date, end: date, group_key: str = "WC-1"
) -> WorkInterval:
    """Create a WorkInterval with a default work center.

    Example:
        interval("WO-1", date(2024, 3, 1), date(2024, 3, 20))
    """
    return WorkInterval(id=interval_id, group_key=group_key, start=start, end=end)


def assert_columns_tile(ctx: TimelineContext) -> None:
    """Assert columns are contiguous, ordered and sum exactly to the total width."""
    columns = ctx.columns
    assert columns, "Grid has no columns"
    assert columns[0].start == ctx.visible_start
    assert columns[-1].end == ctx.visible_end

    for prev, nxt in zip(columns, columns[1:]):
        assert prev.end == nxt.start, f"Gap or overlap between {prev.label} and {nxt.label}"
        assert prev.right_px == nxt.left_px

    for column in columns:
        assert column.start < column.end
        assert column.width_px > 0

    assert columns[0].left_px == 0
    assert columns[-1].right_px == ctx.total_width_px
    assert sum(c.width_px for c in columns) == ctx.total_width_px
