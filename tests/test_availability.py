import pytest

from teamslots.evaluation.availability import AvailabilitySet, classify
from teamslots.scheduling.intervals import Interval, parse_day_schedule


def _people(**schedules: str):
    return [(name, parse_day_schedule(raw)) for name, raw in schedules.items()]


def test_fully_partially_and_not_available():
    people = _people(
        Alice="09:00-12:00",
        Bob="10:00-10:30",
        Carol="",
        Dan="11:30-13:00",
    )
    result = classify(people, 600, 720)
    assert result.fully_available == ["Alice"]
    assert result.partially_available == ["Bob", "Dan"]
    assert result.not_available == ["Carol"]


def test_window_contained_by_both_people():
    result = classify(_people(Alice="09:00-12:00", Bob="10:00-10:30"), 600, 630)
    assert result == AvailabilitySet(["Alice", "Bob"], [], [])


def test_empty_schedule_is_never_available():
    people = _people(Carol="")
    for start in range(420, 1110, 30):
        assert classify(people, start, start + 30).not_available == ["Carol"]


def test_overlap_below_threshold_is_not_available():
    result = classify(_people(Bob="09:00-09:20"), 540, 600)
    assert result.not_available == ["Bob"]


def test_intervals_are_not_unioned_for_full_availability():
    people = [("Alice", [Interval(540, 600), Interval(600, 660)])]
    result = classify(people, 540, 660)
    assert result.fully_available == []
    assert result.partially_available == ["Alice"]


def test_unordered_and_overlapping_intervals():
    people = [("Alice", [Interval(780, 840), Interval(570, 660), Interval(540, 600)])]
    assert classify(people, 600, 660).fully_available == ["Alice"]


@pytest.mark.parametrize(("start", "end"), [(540, 570), (600, 720), (420, 1110), (690, 750)])
def test_every_person_lands_in_exactly_one_group(start, end):
    people = _people(
        Alice="09:00-12:00",
        Bob="10:00-10:30;11:00-12:30",
        Carol="",
        Dan="07:00-08:00",
        Erin="12:00-18:30",
    )
    result = classify(people, start, end)
    names = result.names()
    assert sorted(names) == sorted(name for name, _ in people)
    assert len(names) == len(set(names))


def test_classify_is_idempotent():
    people = _people(Alice="09:00-12:00", Bob="10:00-11:00;10:30-12:00", Carol="")
    assert classify(people, 600, 690) == classify(people, 600, 690)


def test_shrinking_the_end_keeps_full_availability():
    people = _people(Alice="09:00-12:00;13:00-14:00", Bob="08:00-10:00")
    fully = set(classify(people, 540, 600).fully_available)
    for end in range(541, 601):
        assert fully <= set(classify(people, 540, end).fully_available)


def test_counts_and_fully_key():
    result = classify(_people(Bob="10:00-11:00", Alice="10:00-11:00", Carol=""), 600, 660)
    assert result.fully_key() == frozenset({"Alice", "Bob"})
    assert result.fully_available == ["Bob", "Alice"]
    assert result.counts() == {
        "fully_available": 2,
        "partially_available": 0,
        "not_available": 1,
    }
