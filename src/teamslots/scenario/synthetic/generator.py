"""Seeded synthetic roster generator for demos and benchmarks."""

from __future__ import annotations

import random
from dataclasses import dataclass

from teamslots.core.types import HORIZON_MINUTES, SLOT_MINUTES, WEEKDAYS
from teamslots.scenario.contract import Person, Roster
from teamslots.scheduling.clock import PICKER_START
from teamslots.scheduling.intervals import Interval


@dataclass
class SyntheticRosterSpec:
    """Configuration for generating synthetic rosters."""

    num_people: int
    seed: int = 42
    name: str = "synthetic-roster"
    day_probability: float = 0.8
    max_intervals_per_day: int = 2

    def __post_init__(self) -> None:
        if self.num_people < 1:
            raise ValueError("num_people must be >= 1")
        if not 0.0 <= self.day_probability <= 1.0:
            raise ValueError("day_probability must lie in [0, 1]")
        if self.max_intervals_per_day < 1:
            raise ValueError("max_intervals_per_day must be >= 1")


def _random_day(rng: random.Random, spec: SyntheticRosterSpec) -> str:
    if rng.random() > spec.day_probability:
        return ""
    slots = (HORIZON_MINUTES - PICKER_START) // SLOT_MINUTES
    count = rng.randint(1, spec.max_intervals_per_day)
    cuts = sorted(rng.sample(range(slots + 1), min(2 * count, slots + 1)))
    intervals = [
        Interval(start=PICKER_START + lo * SLOT_MINUTES, end=PICKER_START + hi * SLOT_MINUTES)
        for lo, hi in zip(cuts[0::2], cuts[1::2])
    ]
    return ";".join(interval.label() for interval in intervals)


def generate_roster(spec: SyntheticRosterSpec) -> Roster:
    """Generate a roster of ``P1..Pn`` with random on-grid free time."""

    rng = random.Random(spec.seed)
    people = [
        Person(
            name=f"P{idx + 1}",
            schedule={day: _random_day(rng, spec) for day in WEEKDAYS},
        )
        for idx in range(spec.num_people)
    ]
    return Roster(name=spec.name, people=tuple(people))


__all__ = ["SyntheticRosterSpec", "generate_roster"]
