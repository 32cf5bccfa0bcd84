"""Roster loading utilities (schedules CSV, optionally wrapped in a YAML bundle)."""

from __future__ import annotations

from pathlib import Path
from typing import cast

import pandas as pd
import yaml
from pydantic import TypeAdapter, ValidationError

from teamslots.core.errors import RosterShapeError
from teamslots.core.types import WEEKDAYS
from teamslots.scenario.contract import Roster, RosterBundle
from teamslots.validation import validate_roster

__all__ = ["load_roster", "open_roster", "read_csv", "roster_records"]

NAME_COLUMN = "Name"
MIN_COLUMNS = 1 + len(WEEKDAYS)
YAML_SUFFIXES = {".yaml", ".yml"}


def read_csv(path: Path) -> pd.DataFrame:
    """Load a schedules CSV as strings, keeping blank cells as empty strings."""
    try:
        frame = pd.read_csv(
            path, dtype=str, keep_default_na=False, skipinitialspace=True, index_col=False
        )
    except pd.errors.EmptyDataError as exc:
        raise RosterShapeError("CSV must have at least a header and one data row") from exc
    except pd.errors.ParserError as exc:
        raise RosterShapeError(f"Malformed schedules CSV {path}: {exc}") from exc
    frame.columns = [str(column).strip() for column in frame.columns]
    return frame.fillna("")


def roster_records(frame: pd.DataFrame) -> list[dict[str, str]]:
    """Normalise a schedules table into ``{"name", "Monday", ...}`` records.

    Weekday columns are matched by header; when a weekday header is absent the column at the
    weekday's position (after ``Name``) is used instead. Rows with a blank name are skipped.
    """
    columns = list(frame.columns)
    if len(columns) < MIN_COLUMNS or NAME_COLUMN not in columns:
        raise RosterShapeError(
            "CSV must have Name, Monday, Tuesday, Wednesday, Thursday, Friday columns"
        )
    day_columns = {
        day: day.value if day.value in columns else columns[position]
        for position, day in enumerate(WEEKDAYS, start=1)
    }
    records: list[dict[str, str]] = []
    for row in cast(list[dict[str, object]], frame.to_dict("records")):
        name = str(row.get(NAME_COLUMN, "")).strip()
        if not name:
            continue
        record = {"name": name}
        for day, column in day_columns.items():
            record[day.value] = str(row.get(column, "")).strip()
        records.append(record)
    if not records:
        raise RosterShapeError("No valid schedule data found")
    return records


def _load_csv(path: Path, name: str) -> Roster:
    records = roster_records(read_csv(path))
    try:
        return Roster.from_records(records, name=name)
    except ValidationError as exc:
        raise RosterShapeError(str(exc)) from exc


def open_roster(path: str | Path, *, warn: bool = True) -> tuple[Roster, str | None]:
    """Load a roster and the bundle's default earliest start (``None`` for bare CSVs).

    Parameters
    ----------
    path:
        Either a schedules CSV (``Name,Monday,...,Friday``) or a YAML bundle with ``name`` and
        ``data.schedules`` keys; relative CSV paths are resolved against the YAML directory.
    warn:
        Print lint warnings (ignored entries, empty weeks) prefixed with the roster name.
    """
    base_path = Path(path).resolve()
    if not base_path.exists():
        raise FileNotFoundError(base_path)
    earliest_start: str | None = None
    if base_path.suffix.lower() in YAML_SUFFIXES:
        with base_path.open("r", encoding="utf-8") as handle:
            meta = yaml.safe_load(handle) or {}
        data_section = meta.get("data", {})
        try:
            bundle = TypeAdapter(RosterBundle).validate_python(
                {
                    "name": meta.get("name", base_path.stem),
                    "schedules": data_section.get("schedules"),
                    "earliest_start": meta.get("earliest_start"),
                }
            )
        except ValidationError as exc:
            raise RosterShapeError(f"Invalid roster bundle {base_path}: {exc}") from exc
        csv_path = Path(bundle.schedules)
        if not csv_path.is_absolute():
            csv_path = base_path.parent / csv_path
        if not csv_path.exists():
            raise FileNotFoundError(csv_path)
        roster = _load_csv(csv_path, bundle.name)
        earliest_start = bundle.earliest_start
    else:
        roster = _load_csv(base_path, base_path.stem)

    if warn:
        for msg in validate_roster(roster):
            print(f"[roster:{roster.name}] {msg}")
    return roster, earliest_start


def load_roster(path: str | Path, *, warn: bool = True) -> Roster:
    """Load a :class:`Roster` from a schedules CSV or YAML bundle."""
    roster, _ = open_roster(path, warn=warn)
    return roster
