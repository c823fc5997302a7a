"""Loading work intervals from YAML files."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Any

import yaml
from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ParseError
from .models import WorkInterval


class WorkIntervalSchema(BaseModel):
    """Schema for a single work order entry."""

    id: str
    work_center: str = Field(validation_alias=AliasChoices("work_center", "work_center_id"))
    start: datetime | date
    end: datetime | date

    @field_validator("id", "work_center", mode="before")
    @classmethod
    def coerce_str(cls, v: Any) -> Any:
        """Allow bare numbers for identifiers."""
        if isinstance(v, int | float):
            return str(v)
        return v

    def to_work_interval(self) -> WorkInterval:
        return WorkInterval(id=self.id, group_key=self.work_center, start=self.start, end=self.end)


class WorkOrderFileSchema(BaseModel):
    """Schema for a work order file."""

    work_orders: list[WorkIntervalSchema] = Field(default_factory=list[WorkIntervalSchema])


def parse_work_intervals(data: Any) -> list[WorkInterval]:
    """Validate already-loaded YAML data into work intervals.

    Inverted or empty intervals are kept; the layout engine drops them.
    """
    if not isinstance(data, dict):
        raise ParseError("YAML must contain a dictionary at the root level")

    try:
        schema = WorkOrderFileSchema.model_validate(data)
    except PydanticValidationError as e:
        raise ParseError(f"Invalid work order data: {e}") from e

    return [entry.to_work_interval() for entry in schema.work_orders]


def load_work_intervals(path: Path | str) -> list[WorkInterval]:
    """Load work intervals from a YAML file.

    Raises:
        ParseError: If the file is missing, not valid YAML, or fails validation
    """
    path = Path(path)
    if not path.exists():
        raise ParseError(f"File not found: {path}")

    try:
        with path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ParseError(f"Failed to parse YAML: {e}") from e

    return parse_work_intervals(data)
