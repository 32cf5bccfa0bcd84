from teamslots.scenario.contract import Person, Roster
from teamslots.validation import validate_roster


def test_validate_roster_flags_dropped_entries_and_empty_weeks():
    roster = Roster(
        people=(
            Person(
                name="Alice",
                schedule={"Monday": "09:00-;10:00-11:00", "Friday": "12:00-11:00"},
            ),
            Person(name="Carol"),
        )
    )
    warnings = validate_roster(roster)
    assert warnings == [
        "Alice Monday: ignored malformed entry '09:00-'",
        "Alice Friday: ignored malformed entry '12:00-11:00'",
        "Carol: no availability entered for any weekday",
    ]


def test_validate_roster_ok():
    roster = Roster(people=(Person(name="Alice", schedule={"Monday": "09:00-10:00"}),))
    assert validate_roster(roster) == []
