"""Context manager for capturing recommendation and query run telemetry."""

from __future__ import annotations

import time
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping
from uuid import uuid4

from .jsonl import append_jsonl


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


@dataclass(slots=True)
class RunTelemetryLogger(AbstractContextManager["RunTelemetryLogger"]):
    """Record high-level telemetry for a single CLI run.

    Parameters
    ----------
    log_path:
        JSONL path where run records are appended.
    command:
        Command identifier (e.g., ``"recommend"``, ``"query"``).
    roster:
        Roster name.
    roster_path:
        Optional filesystem path to the roster CSV/YAML.
    config:
        Run parameters (earliest start, selected days, queried window).
    context:
        Additional metadata (source command, exports requested).
    log_days:
        Write one step record per weekday evaluated to ``steps/<run_id>.jsonl``.
    """

    log_path: Path
    command: str
    roster: str | None = None
    roster_path: str | None = None
    config: Mapping[str, Any] | None = None
    context: Mapping[str, Any] | None = None
    log_days: bool = False
    schema_version: str = "1.0"
    run_id: str = field(default_factory=lambda: uuid4().hex, init=False)
    _start_time: float = field(default=0.0, init=False)
    _start_timestamp: str | None = field(default=None, init=False)
    _closed: bool = field(default=False, init=False)
    _steps_path: Path | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.log_path = Path(self.log_path)
        if self.log_days:
            self._steps_path = self.log_path.parent / "steps" / f"{self.run_id}.jsonl"

    def __enter__(self) -> "RunTelemetryLogger":
        self._start_time = time.perf_counter()
        self._start_timestamp = _iso_now()
        if self._steps_path:
            self._steps_path.parent.mkdir(parents=True, exist_ok=True)
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type:
            self._close(status="error", metrics=None, extra=None, error=repr(exc))
            return False
        self._close(status="ok", metrics=None, extra=None, error=None)
        return False

    def log_day(self, *, day: str, slot_count: int, best_score: int | None) -> None:
        """Persist a per-weekday snapshot when day logging is enabled."""
        if not self._steps_path:
            return
        record = {
            "record_type": "day",
            "schema_version": self.schema_version,
            "run_id": self.run_id,
            "timestamp": _iso_now(),
            "day": day,
            "slot_count": slot_count,
            "best_score": best_score,
        }
        append_jsonl(self._steps_path, record)

    def finalize(
        self,
        *,
        status: str = "ok",
        metrics: Mapping[str, Any] | None = None,
        extra: Mapping[str, Any] | None = None,
        error: str | None = None,
    ) -> None:
        """Write the terminal run record."""
        self._close(status=status, metrics=metrics, extra=extra, error=error)

    def _close(
        self,
        *,
        status: str,
        metrics: Mapping[str, Any] | None,
        extra: Mapping[str, Any] | None,
        error: str | None,
    ) -> None:
        if self._closed:
            return
        duration = time.perf_counter() - self._start_time if self._start_time else 0.0
        record = {
            "record_type": "run",
            "schema_version": self.schema_version,
            "run_id": self.run_id,
            "command": self.command,
            "roster": self.roster,
            "roster_path": self.roster_path,
            "status": status,
            "metrics": dict(metrics or {}),
            "config": dict(self.config or {}),
            "context": dict(self.context or {}),
            "extra": dict(extra or {}),
            "error": error,
            "started_at": self._start_timestamp,
            "finished_at": _iso_now(),
            "duration_seconds": round(duration, 3),
        }
        append_jsonl(self.log_path, record)
        self._closed = True


__all__ = ["RunTelemetryLogger"]
