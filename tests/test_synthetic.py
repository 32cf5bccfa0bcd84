import pytest

from teamslots.core.types import WEEKDAYS
from teamslots.scenario.synthetic import SyntheticRosterSpec, generate_roster
from teamslots.scheduling.clock import is_picker_time
from teamslots.scheduling.intervals import dropped_tokens


def test_generate_roster_is_seeded():
    spec = SyntheticRosterSpec(num_people=5, seed=7)
    assert generate_roster(spec) == generate_roster(spec)
    assert generate_roster(spec).names() == ["P1", "P2", "P3", "P4", "P5"]


def test_generated_entries_are_valid_and_on_grid():
    roster = generate_roster(SyntheticRosterSpec(num_people=8, seed=3, max_intervals_per_day=3))
    for person in roster.people:
        for day in WEEKDAYS:
            assert dropped_tokens(person.free_time(day)) == []
            for interval in person.intervals(day):
                assert is_picker_time(interval.start)
                assert is_picker_time(interval.end)


def test_zero_day_probability_gives_empty_week():
    roster = generate_roster(SyntheticRosterSpec(num_people=2, day_probability=0.0))
    assert all(person.free_time(day) == "" for person in roster.people for day in WEEKDAYS)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"num_people": 0},
        {"num_people": 1, "day_probability": 1.5},
        {"num_people": 1, "max_intervals_per_day": 0},
    ],
)
def test_invalid_generator_parameters(kwargs):
    with pytest.raises(ValueError):
        SyntheticRosterSpec(**kwargs)
