"""Tests for loading work intervals from YAML."""

from datetime import date, datetime
from pathlib import Path

import pytest

from timegrid.exceptions import ParseError
from timegrid.loader import load_work_intervals, parse_work_intervals
from timegrid.models import WorkInterval


def test_load_work_intervals(tmp_path: Path) -> None:
    path = tmp_path / "work_orders.yaml"
    path.write_text(
        """
work_orders:
  - id: WO-1
    work_center: WC-1
    start: 2024-03-01
    end: 2024-03-20
  - id: WO-2
    work_center: WC-2
    start: 2024-03-05
    end: 2024-03-07
""",
        encoding="utf-8",
    )

    intervals = load_work_intervals(path)

    assert intervals == [
        WorkInterval(id="WO-1", group_key="WC-1", start=date(2024, 3, 1), end=date(2024, 3, 20)),
        WorkInterval(id="WO-2", group_key="WC-2", start=date(2024, 3, 5), end=date(2024, 3, 7)),
    ]


def test_work_center_id_alias_and_numeric_ids() -> None:
    data = {
        "work_orders": [
            {"id": 17, "work_center_id": 3, "start": date(2024, 3, 1), "end": date(2024, 3, 2)},
        ]
    }
    [entry] = parse_work_intervals(data)
    assert entry.id == "17"
    assert entry.group_key == "3"


def test_datetimes_preserved() -> None:
    """Time of day is kept here; the layout engine normalizes it."""
    data = {
        "work_orders": [
            {
                "id": "WO-1",
                "work_center": "WC-1",
                "start": datetime(2024, 3, 1, 8, 0),
                "end": datetime(2024, 3, 2, 17, 0),
            }
        ]
    }
    [entry] = parse_work_intervals(data)
    assert entry.start == datetime(2024, 3, 1, 8, 0)


def test_inverted_interval_accepted() -> None:
    data = {
        "work_orders": [
            {"id": "WO-1", "work_center": "WC-1", "start": "2024-03-10", "end": "2024-03-01"},
        ]
    }
    [entry] = parse_work_intervals(data)
    assert entry.end < entry.start


def test_empty_list() -> None:
    assert parse_work_intervals({"work_orders": []}) == []
    assert parse_work_intervals({}) == []


def test_missing_field() -> None:
    with pytest.raises(ParseError, match="Invalid work order data"):
        parse_work_intervals({"work_orders": [{"id": "WO-1", "start": "2024-03-01"}]})


def test_bad_date() -> None:
    data = {
        "work_orders": [
            {"id": "WO-1", "work_center": "WC-1", "start": "not a date", "end": "2024-03-02"},
        ]
    }
    with pytest.raises(ParseError):
        parse_work_intervals(data)


def test_root_must_be_mapping() -> None:
    with pytest.raises(ParseError, match="dictionary"):
        parse_work_intervals(["WO-1"])


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ParseError, match="File not found"):
        load_work_intervals(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("work_orders: [unclosed\n", encoding="utf-8")
    with pytest.raises(ParseError, match="Failed to parse YAML"):
        load_work_intervals(path)


def test_example_file_loads() -> None:
    """The bundled example file stays valid."""
    path = Path(__file__).parents[1] / "examples" / "work_orders.yaml"
    intervals = load_work_intervals(path)

    assert [i.id for i in intervals] == ["WO-1001", "WO-1002", "WO-1003", "WO-1004"]
    assert intervals[3].start == datetime(2024, 3, 9, 22, 0)
