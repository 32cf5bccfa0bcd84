"""Input validation helpers."""

from .schedules import validate_roster

__all__ = ["validate_roster"]
