"""Configuration for grid construction.

Settings come from an optional YAML file (``timegrid_config.yaml``)::

    default_zoom: week
    day:
      px_per_day: 40
    month:
      width_policy: fixed
      fixed_width_px: 200

Every section and key is optional; missing values fall back to the defaults
below.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, NonNegativeInt, PositiveInt
from pydantic import ValidationError as PydanticValidationError

from . import context
from .exceptions import ConfigError
from .models import WidthPolicy, ZoomLevel

DEFAULT_CONFIG_FILENAME = "timegrid_config.yaml"


class ZoomConfig(BaseModel):
    """Settings shared by every zoom level."""

    px_per_day: PositiveInt


class DayZoomConfig(ZoomConfig):
    """Day zoom: a fixed window of days around today."""

    px_per_day: PositiveInt = 48
    days_before: NonNegativeInt = 14
    days_after: PositiveInt = 15  # Exclusive end, so today is always visible


class WeekZoomConfig(ZoomConfig):
    """Week zoom: Monday-aligned window spanning whole months around today."""

    px_per_day: PositiveInt = 18
    months_before: NonNegativeInt = 2
    months_after: NonNegativeInt = 2


class MonthZoomConfig(ZoomConfig):
    """Month zoom: month-aligned window around today."""

    px_per_day: PositiveInt = 8
    months_before: NonNegativeInt = 6
    months_after: NonNegativeInt = 6
    width_policy: WidthPolicy = WidthPolicy.PROPORTIONAL
    fixed_width_px: PositiveInt = 240  # Only used with width_policy: fixed


class GridConfig(BaseModel):
    """Top-level grid configuration."""

    default_zoom: ZoomLevel = ZoomLevel.DAY
    day: DayZoomConfig = Field(default_factory=DayZoomConfig)
    week: WeekZoomConfig = Field(default_factory=WeekZoomConfig)
    month: MonthZoomConfig = Field(default_factory=MonthZoomConfig)

    def for_zoom(self, zoom: ZoomLevel) -> DayZoomConfig | WeekZoomConfig | MonthZoomConfig:
        """Return the settings section for a zoom level."""
        if zoom is ZoomLevel.DAY:
            return self.day
        if zoom is ZoomLevel.WEEK:
            return self.week
        return self.month


def load_config(config_path: Path | str) -> GridConfig:
    """Load grid configuration from a YAML file.

    Args:
        config_path: Path to the config file

    Returns:
        Validated GridConfig (defaults for an empty file)

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ConfigError: If the file is not valid YAML or fails validation
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config YAML: {e}") from e

    if data is None:
        return GridConfig()

    if not isinstance(data, dict):
        raise ConfigError("Config must contain a mapping at the root level")

    try:
        return GridConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid config in {config_path}: {e}") from e


def discover_config(config_path: Path | None = None) -> GridConfig:
    """Find and load configuration.

    Search order:
    1. Explicit config_path argument
    2. Global context (set via CLI --config)
    3. Current directory / timegrid_config.yaml
    4. Built-in defaults
    """
    if config_path is not None:
        return load_config(config_path)

    ctx_config = context.get_config_path()
    if ctx_config is not None:
        return load_config(ctx_config)

    cwd_config = Path(DEFAULT_CONFIG_FILENAME)
    if cwd_config.exists():
        return load_config(cwd_config)

    return GridConfig()
