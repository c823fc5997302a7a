"""Header labels for timeline columns (display only)."""

from __future__ import annotations

from datetime import date

from .models import ZoomLevel

# Fixed English abbreviations so labels don't depend on the process locale
MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def format_day(day: date) -> str:
    """Format a day column label: "Mar 10"."""
    return f"{MONTH_ABBREVIATIONS[day.month - 1]} {day.day}"


def format_week(start: date) -> str:
    """Format a week column label: "Week of Mar 4"."""
    return f"Week of {format_day(start)}"


def format_month(start: date) -> str:
    """Format a month column label: "Mar 2024"."""
    return f"{MONTH_ABBREVIATIONS[start.month - 1]} {start.year}"


def column_label(zoom: ZoomLevel, start: date) -> str:
    """Label for a column starting at ``start`` at the given zoom level."""
    if zoom is ZoomLevel.DAY:
        return format_day(start)
    if zoom is ZoomLevel.WEEK:
        return format_week(start)
    return format_month(start)
