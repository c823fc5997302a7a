"""Tests for today marker and scroll centering helpers."""

from datetime import date, datetime

import pytest

from tests.conftest import DST_REFERENCE
from timegrid.calendar_math import pixel_from_date
from timegrid.config import GridConfig, MonthZoomConfig
from timegrid.grid import build_grid
from timegrid.layout import layout
from timegrid.models import TimelineContext, WidthPolicy, WorkInterval, ZoomLevel
from timegrid.viewport import centered_scroll_offset, scroll_offset_for, today_offset_px


def test_today_offset_on_day_grid(day_context: TimelineContext) -> None:
    """Today sits 14 days into the day window."""
    assert today_offset_px(day_context, date(2024, 3, 10)) == 14 * 48


def test_today_offset_matches_pixel_from_date(month_context: TimelineContext) -> None:
    instant = datetime(2024, 3, 10, 16, 45)
    expected = pixel_from_date(month_context.visible_start, month_context.px_per_day, instant)
    assert today_offset_px(month_context, instant) == expected


def test_today_marker_lines_up_with_rectangle(day_context: TimelineContext) -> None:
    """A work order starting today begins exactly at the marker."""
    today = date(2024, 3, 10)
    rect = layout(day_context, [WorkInterval("WO-1", "WC-1", today, date(2024, 3, 12))])[0]
    assert rect.left_px == today_offset_px(day_context, today)


def test_centered_scroll_offset() -> None:
    assert centered_scroll_offset(672, 1000) == 172
    assert centered_scroll_offset(672, 1001) == 171.5


def test_centered_scroll_offset_never_negative() -> None:
    assert centered_scroll_offset(672, 2000) == 0
    assert centered_scroll_offset(0, 500) == 0


def test_scroll_offset_for(day_context: TimelineContext) -> None:
    assert scroll_offset_for(day_context, datetime(2024, 3, 10, 18, 0), 1000) == 172


class TestFixedMonthMarker:
    """The today marker under fixed-width month columns."""

    @pytest.fixture
    def fixed_context(self) -> TimelineContext:
        config = GridConfig(
            month=MonthZoomConfig(width_policy=WidthPolicy.FIXED, fixed_width_px=100)
        )
        return build_grid(ZoomLevel.MONTH, DST_REFERENCE, config)

    def test_marker_lines_up_with_rectangle(self, fixed_context: TimelineContext) -> None:
        """March 2024 is the seventh column; the 10th is 9 of its 31 days in."""
        today = date(2024, 3, 10)
        rect = layout(fixed_context, [WorkInterval("WO-1", "WC-1", today, date(2024, 4, 20))])[0]

        assert today_offset_px(fixed_context, today) == rect.left_px == 629
        assert fixed_context.pixel_from_date(datetime(2024, 3, 10, 23, 30)) == 629

    def test_proportional_scale_does_not_apply(self, fixed_context: TimelineContext) -> None:
        naive = pixel_from_date(
            fixed_context.visible_start, fixed_context.px_per_day, DST_REFERENCE
        )
        assert naive != today_offset_px(fixed_context, DST_REFERENCE)
        assert fixed_context.effective_px_per_day == pytest.approx(1300 / 396)

    def test_scroll_offset_centers_marker(self, fixed_context: TimelineContext) -> None:
        assert scroll_offset_for(fixed_context, DST_REFERENCE, 600) == 329


def test_effective_scale_matches_px_per_day(month_context: TimelineContext) -> None:
    assert month_context.effective_px_per_day == month_context.px_per_day
