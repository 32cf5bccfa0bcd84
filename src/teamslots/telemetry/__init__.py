"""Structured run telemetry (JSONL)."""

from .jsonl import append_jsonl, read_jsonl
from .run_logger import RunTelemetryLogger

__all__ = ["append_jsonl", "read_jsonl", "RunTelemetryLogger"]
