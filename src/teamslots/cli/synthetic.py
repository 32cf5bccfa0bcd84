"""Synthetic roster CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from teamslots.planning import roster_dataframe
from teamslots.scenario.synthetic import SyntheticRosterSpec, generate_roster

console = Console()
synth_app = typer.Typer(no_args_is_help=True, help="Generate synthetic team rosters.")


@synth_app.command("roster")
def synth_roster(
    out: Annotated[Path, typer.Option("--out", help="Destination schedules CSV.")],
    people: Annotated[int, typer.Option("--people", "-n", min=1, help="Number of people.")] = 6,
    seed: Annotated[int, typer.Option("--seed", help="RNG seed.")] = 42,
    day_probability: Annotated[
        float,
        typer.Option(
            "--day-probability",
            min=0.0,
            max=1.0,
            help="Chance that a person has any free time on a given weekday.",
        ),
    ] = 0.8,
    max_intervals: Annotated[
        int,
        typer.Option("--max-intervals", min=1, help="Maximum free-time entries per day."),
    ] = 2,
) -> None:
    """Write a seeded random roster CSV in the Name,Monday..Friday layout."""
    spec = SyntheticRosterSpec(
        num_people=people,
        seed=seed,
        day_probability=day_probability,
        max_intervals_per_day=max_intervals,
    )
    roster = generate_roster(spec)
    out.parent.mkdir(parents=True, exist_ok=True)
    roster_dataframe(roster).to_csv(out, index=False)
    console.print(f"Generated {len(roster.people)} people (seed={seed}) -> {out}")


__all__ = ["synth_app"]
