"""Command-line interface for timegrid."""

from __future__ import annotations

import json
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer

from . import context
from .config import GridConfig, discover_config
from .exceptions import TimegridError
from .grid import build_grid
from .layout import group_rectangles, layout
from .loader import load_work_intervals
from .logger import setup_logger
from .models import LayoutRectangle, TimelineContext, WidthPolicy, ZoomLevel
from .viewport import centered_scroll_offset, today_offset_px

app = typer.Typer(
    name="timegrid",
    help="Zoomable timeline grid and work order layout",
    add_completion=False,
)


class OutputFormat(str, Enum):
    """Output formats for grid and layout commands."""

    TEXT = "text"
    JSON = "json"


ZoomOption = Annotated[
    ZoomLevel | None,
    typer.Option("--zoom", "-z", help="Zoom level (defaults to the config's default_zoom)"),
]
DateOption = Annotated[
    str | None,
    typer.Option("--date", "-d", help="Reference date (YYYY-MM-DD). Defaults to today"),
]
FormatOption = Annotated[
    OutputFormat, typer.Option("--format", "-f", help="Output format")
]


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=summaries, 2=layout checks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: timegrid_config.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for timegrid commands."""
    setup_logger(verbose)
    context.set_config_path(config)


def _parse_date_option(date_str: str | None) -> date:
    """Parse the --date option, falling back to today."""
    if date_str is None:
        return date.today()  # noqa: DTZ011

    try:
        return date.fromisoformat(date_str)
    except ValueError:
        typer.echo(
            f"Error: Invalid date format '{date_str}'. Use YYYY-MM-DD format.",
            err=True,
        )
        raise typer.Exit(1) from None


def _load_config() -> GridConfig:
    try:
        return discover_config()
    except (FileNotFoundError, TimegridError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None


def _build(zoom: ZoomLevel | None, date_str: str | None) -> tuple[TimelineContext, date]:
    config = _load_config()
    reference = _parse_date_option(date_str)
    try:
        ctx = build_grid(zoom or config.default_zoom, reference, config)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None
    return ctx, reference


def _context_dict(ctx: TimelineContext) -> dict[str, Any]:
    return {
        "zoom": ctx.zoom.value,
        "visible_start": ctx.visible_start.isoformat(),
        "visible_end": ctx.visible_end.isoformat(),
        # Fixed-width columns have no single scale; see effective_px_per_day
        "px_per_day": ctx.px_per_day if ctx.width_policy is WidthPolicy.PROPORTIONAL else None,
        "effective_px_per_day": ctx.effective_px_per_day,
        "total_width_px": ctx.total_width_px,
        "width_policy": ctx.width_policy.value,
        "columns": [
            {
                "start": c.start.isoformat(),
                "end": c.end.isoformat(),
                "label": c.label,
                "left_px": c.left_px,
                "width_px": c.width_px,
            }
            for c in ctx.columns
        ],
    }


def _rectangle_dict(rect: LayoutRectangle) -> dict[str, Any]:
    return {
        "id": rect.id,
        "work_center": rect.group_key,
        "left_px": rect.left_px,
        "width_px": rect.width_px,
        "clipped_start": rect.clipped_start.isoformat(),
        "clipped_end": rect.clipped_end.isoformat(),
        "is_clipped": rect.is_clipped,
    }


def _echo_window(ctx: TimelineContext) -> None:
    if ctx.width_policy is WidthPolicy.FIXED:
        scale = f"fixed {ctx.columns[0].width_px}px columns"
    else:
        scale = f"{ctx.px_per_day}px/day"
    typer.echo(f"Zoom:    {ctx.zoom.value} ({scale})")
    typer.echo(f"Window:  {ctx.visible_start} .. {ctx.visible_end} (exclusive)")
    typer.echo(f"Width:   {ctx.total_width_px}px in {len(ctx.columns)} columns")


@app.command()
def grid(
    zoom: ZoomOption = None,
    date_str: DateOption = None,
    output_format: FormatOption = OutputFormat.TEXT,
) -> None:
    """Show the visible window and header columns for a zoom level."""
    ctx, _ = _build(zoom, date_str)

    if output_format is OutputFormat.JSON:
        typer.echo(json.dumps(_context_dict(ctx), indent=2))
        return

    _echo_window(ctx)
    typer.echo("")
    for column in ctx.columns:
        typer.echo(f"  {column.left_px:>6}  {column.width_px:>4}px  {column.label}")


@app.command("layout")
def layout_command(
    file: Annotated[Path, typer.Argument(help="Path to the work order YAML file")] = Path(
        "work_orders.yaml"
    ),
    *,
    zoom: ZoomOption = None,
    date_str: DateOption = None,
    output_format: FormatOption = OutputFormat.TEXT,
) -> None:
    """Lay out work orders on the grid and print their rectangles."""
    try:
        intervals = load_work_intervals(file)
    except TimegridError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    ctx, _ = _build(zoom, date_str)
    rectangles = layout(ctx, intervals)

    if output_format is OutputFormat.JSON:
        payload = {
            "grid": _context_dict(ctx),
            "rectangles": [_rectangle_dict(r) for r in rectangles],
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    _echo_window(ctx)
    for work_center, rows in group_rectangles(rectangles).items():
        typer.echo("")
        typer.echo(work_center)
        for rect in rows:
            marker = "  (clipped)" if rect.is_clipped else ""
            typer.echo(
                f"  {rect.id}: {rect.left_px}px +{rect.width_px}px "
                f"[{rect.clipped_start} .. {rect.clipped_end}){marker}"
            )

    dropped = len(intervals) - len(rectangles)
    if dropped:
        typer.echo(f"\n{dropped} work order(s) not visible", err=True)


@app.command()
def today(
    zoom: ZoomOption = None,
    date_str: DateOption = None,
    viewport_width: Annotated[
        int,
        typer.Option("--viewport-width", "-w", help="Viewport width in pixels", min=0),
    ] = 1200,
) -> None:
    """Show the today marker offset and the scroll offset that centers it."""
    ctx, reference = _build(zoom, date_str)
    offset = today_offset_px(ctx, reference)
    scroll = centered_scroll_offset(offset, viewport_width)

    typer.echo(f"Today offset:  {offset}px")
    typer.echo(f"Scroll offset: {scroll:g}px")
