"""Pydantic models describing teamslots roster inputs."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from teamslots.core.errors import ScheduleParseError
from teamslots.core.types import WEEKDAYS, Weekday
from teamslots.scheduling.clock import time_to_minutes
from teamslots.scheduling.intervals import Interval, parse_day_schedule

DaySchedules = list[tuple[str, list[Interval]]]


class Person(BaseModel):
    """One team member and their raw weekly free-time strings.

    Attributes
    ----------
    name:
        Unique (within a roster) display name.
    schedule:
        Mapping of weekday to the raw ``"HH:MM-HH:MM;..."`` free-time text. Missing weekdays are
        filled with an empty string, meaning no availability that day.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    schedule: dict[Weekday, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("name")
    @classmethod
    def _name_present(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Person.name must be non-empty")
        return value

    @field_validator("schedule")
    @classmethod
    def _fill_weekdays(cls, value: dict[Weekday, str]) -> dict[Weekday, str]:
        return {day: (value.get(day) or "").strip() for day in WEEKDAYS}

    @classmethod
    def from_record(cls, record: Mapping[str, object]) -> Person:
        """Build a person from a ``{"name": ..., "Monday": ..., ...}`` record."""
        name = record.get("name", record.get("Name", ""))
        schedule = {}
        for day in WEEKDAYS:
            raw = record.get(day.value)
            schedule[day] = "" if raw is None else str(raw)
        return cls(name=str(name), schedule=schedule)

    def free_time(self, day: Weekday | str) -> str:
        return self.schedule[Weekday.parse(day)]

    def intervals(self, day: Weekday | str) -> list[Interval]:
        return parse_day_schedule(self.free_time(day))


class Roster(BaseModel):
    """Snapshot of every person considered by one recommendation or query run."""

    model_config = ConfigDict(frozen=True)

    name: str = "roster"
    people: tuple[Person, ...]

    @model_validator(mode="after")
    def _unique_names(self) -> Roster:
        seen: set[str] = set()
        duplicates: list[str] = []
        for person in self.people:
            if person.name in seen:
                duplicates.append(person.name)
            seen.add(person.name)
        if duplicates:
            raise ValueError(f"Duplicate person names in roster: {sorted(set(duplicates))}")
        return self

    @classmethod
    def from_records(cls, records: list[Mapping[str, object]], name: str = "roster") -> Roster:
        return cls(name=name, people=tuple(Person.from_record(record) for record in records))

    def names(self) -> list[str]:
        return [person.name for person in self.people]

    def person(self, name: str) -> Person:
        for person in self.people:
            if person.name == name:
                return person
        raise KeyError(f"No person named {name!r} in roster {self.name!r}")

    def day_schedules(self, day: Weekday | str) -> DaySchedules:
        """Return ``(name, intervals)`` pairs for ``day`` in roster order."""
        weekday = Weekday.parse(day)
        return [(person.name, person.intervals(weekday)) for person in self.people]


class RosterBundle(BaseModel):
    """YAML bundle metadata pointing at a schedules CSV."""

    name: str
    schedules: str
    earliest_start: str | None = None

    @field_validator("earliest_start")
    @classmethod
    def _clock_time(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            time_to_minutes(value)
        except ScheduleParseError as exc:
            raise ValueError(str(exc)) from exc
        return value.strip()


__all__ = ["DaySchedules", "Person", "Roster", "RosterBundle"]
