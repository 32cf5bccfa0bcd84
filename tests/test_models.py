import pytest
from pydantic import ValidationError

from teamslots.core.types import WEEKDAYS, Weekday
from teamslots.scenario.contract import Person, Roster


def test_person_fills_missing_weekdays():
    person = Person(name=" Alice ", schedule={"Monday": " 09:00-10:00 "})
    assert person.name == "Alice"
    assert list(person.schedule) == list(WEEKDAYS)
    assert person.free_time("Monday") == "09:00-10:00"
    assert person.free_time(Weekday.FRIDAY) == ""


def test_person_from_record():
    person = Person.from_record({"name": "Bob", "Tuesday": "13:00-14:00", "Friday": None})
    assert person.free_time("Tuesday") == "13:00-14:00"
    assert person.intervals("Friday") == []


def test_person_is_immutable():
    person = Person(name="Alice")
    with pytest.raises(ValidationError):
        person.name = "Bob"


def test_person_requires_name():
    with pytest.raises(ValidationError):
        Person(name="   ")


def test_roster_rejects_duplicate_names():
    with pytest.raises(ValidationError, match="Duplicate person names"):
        Roster(people=(Person(name="Alice"), Person(name="Alice")))


def test_day_schedules_keep_roster_order(mixed_roster):
    schedules = mixed_roster.day_schedules("Monday")
    assert [name for name, _ in schedules] == ["Alice", "Bob", "Carol"]
    assert schedules[2][1] == []


def test_unknown_person_raises_key_error(mixed_roster):
    assert mixed_roster.person("Bob").name == "Bob"
    with pytest.raises(KeyError):
        mixed_roster.person("Zed")


def test_weekday_parse():
    assert Weekday.parse("wed") is Weekday.WEDNESDAY
    assert Weekday.parse(" THURSDAY ") is Weekday.THURSDAY
    with pytest.raises(ValueError):
        Weekday.parse("Sunday")
