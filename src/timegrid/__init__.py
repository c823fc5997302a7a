"""timegrid - deterministic, zoomable timeline grid and work order layout.

Main entry points:
- build_grid: Visible window, scale and header columns for a zoom level
- layout: Clipped, pixel-positioned rectangles for work intervals

Calendar primitives (DST-safe day math) are exported for callers that place
their own markers; they share the layout engine's rounding path.
"""

from .calendar_math import (
    add_days,
    add_months_from_month_start,
    clamp_date,
    day_index,
    diff_days,
    pixel_from_date,
    round_half_up,
    start_of_day,
    start_of_month,
    start_of_week_monday,
)
from .config import GridConfig, load_config
from .exceptions import ConfigError, ParseError, TimegridError
from .grid import build_grid
from .layout import group_rectangles, layout
from .models import (
    LayoutRectangle,
    TimelineColumn,
    TimelineContext,
    WidthPolicy,
    WorkInterval,
    ZoomLevel,
)
from .viewport import centered_scroll_offset, scroll_offset_for, today_offset_px

__all__ = [
    "ConfigError",
    "GridConfig",
    "LayoutRectangle",
    "ParseError",
    "TimegridError",
    "TimelineColumn",
    "TimelineContext",
    "WidthPolicy",
    "WorkInterval",
    "ZoomLevel",
    "add_days",
    "add_months_from_month_start",
    "build_grid",
    "centered_scroll_offset",
    "clamp_date",
    "day_index",
    "diff_days",
    "group_rectangles",
    "layout",
    "load_config",
    "pixel_from_date",
    "round_half_up",
    "scroll_offset_for",
    "start_of_day",
    "start_of_month",
    "start_of_week_monday",
    "today_offset_px",
]
