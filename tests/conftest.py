from pathlib import Path

import pytest

from teamslots.scenario.contract import Person, Roster

HEADER = "Name,Monday,Tuesday,Wednesday,Thursday,Friday"


def _roster(*people: tuple[str, dict[str, str]], name: str = "team") -> Roster:
    return Roster(
        name=name,
        people=tuple(Person(name=person, schedule=schedule) for person, schedule in people),
    )


@pytest.fixture
def pair_roster() -> Roster:
    """Two people who are both free 09:00-11:00 on Monday only."""
    return _roster(
        ("Dana", {"Monday": "09:00-11:00"}),
        ("Eli", {"Monday": "09:00-11:00"}),
    )


@pytest.fixture
def mixed_roster() -> Roster:
    return _roster(
        ("Alice", {"Monday": "09:00-12:00", "Tuesday": "13:00-15:00"}),
        ("Bob", {"Monday": "10:00-10:30", "Tuesday": "14:00-16:00"}),
        ("Carol", {}),
    )


@pytest.fixture
def roster_csv(tmp_path: Path) -> Path:
    path = tmp_path / "team.csv"
    path.write_text(
        "\n".join(
            [
                HEADER,
                "Alice,09:00-12:00,13:00-15:00,,09:00-17:00,",
                "Bob,10:00-10:30,14:00-16:00,,09:00-11:00,09:00-10:00",
                "Carol,,,,,",
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    return path
