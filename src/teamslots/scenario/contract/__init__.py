"""Roster contract models (Pydantic schemas, validators)."""

from .models import DaySchedules, Person, Roster, RosterBundle

__all__ = ["DaySchedules", "Person", "Roster", "RosterBundle"]
