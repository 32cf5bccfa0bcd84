"""Command-line entry point for teamslots."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from teamslots.cli._utils import parse_clock, parse_days
from teamslots.cli.synthetic import synth_app
from teamslots.core.errors import QueryRangeError, RosterShapeError
from teamslots.core.types import Weekday
from teamslots.evaluation import AvailabilitySet, QueryResult, query_roster
from teamslots.optimization import RecommendedSlot, WeekRecommendations, recommend
from teamslots.planning import (
    export_query,
    export_recommendations,
    recommendation_records,
    roster_dataframe,
    summarize_recommendations,
)
from teamslots.scenario.contract import Roster
from teamslots.scenario.io import open_roster
from teamslots.scheduling.clock import is_picker_time, minutes_to_time, picker_times
from teamslots.telemetry import RunTelemetryLogger
from teamslots.validation import validate_roster

app = typer.Typer(add_completion=False, no_args_is_help=True)
app.add_typer(synth_app, name="synth")
console = Console()

DEFAULT_EARLIEST_START = "09:00"


def _open(roster_path: Path, *, warn: bool = True) -> tuple[Roster, str | None]:
    try:
        return open_roster(roster_path, warn=warn)
    except FileNotFoundError as exc:
        console.print(f"[red]Roster not found:[/red] {escape(str(exc))}")
        raise typer.Exit(1)
    except RosterShapeError as exc:
        console.print(f"[red]Invalid roster:[/red] {escape(str(exc))}")
        raise typer.Exit(1)


def _names(names: list[str]) -> str:
    return ", ".join(names) if names else "None"


def _print_day(day: Weekday, slots: list[RecommendedSlot], show_names: bool) -> None:
    if not slots:
        console.print(
            f"[bold]{day.value}[/bold]: [dim]No optimal times found. Try adjusting start time.[/dim]"
        )
        return
    t = Table(title=day.value)
    t.add_column("Rank")
    t.add_column("Time")
    t.add_column("Duration")
    t.add_column("Score", justify="right")
    t.add_column("Fully", justify="right")
    t.add_column("Partial", justify="right")
    t.add_column("Unavailable", justify="right")
    if show_names:
        t.add_column("Available")
    for index, slot in enumerate(slots):
        row = [
            f"#{index + 1}",
            f"{slot.start_time} - {slot.end_time}",
            slot.duration_label,
            str(slot.score),
            str(len(slot.fully_available)),
            str(len(slot.partially_available)),
            str(len(slot.not_available)),
        ]
        if show_names:
            row.append(_names(slot.fully_available))
        t.add_row(*row)
    console.print(t)


def _print_query(result: QueryResult) -> None:
    availability: AvailabilitySet = result.availability
    t = Table(title=f"Availability for {result.day.value} {result.time_range}")
    t.add_column("Status")
    t.add_column("Count", justify="right")
    t.add_column("Names")
    t.add_row(
        "[green]Fully Available[/green]",
        str(len(availability.fully_available)),
        _names(availability.fully_available),
    )
    t.add_row(
        "[yellow]Partially Available[/yellow]",
        str(len(availability.partially_available)),
        _names(availability.partially_available),
    )
    t.add_row(
        "[red]Not Available[/red]",
        str(len(availability.not_available)),
        _names(availability.not_available),
    )
    console.print(t)


@app.command()
def validate(roster_path: Path):
    """Load a roster CSV/YAML bundle, print a preview and lint warnings."""
    roster, earliest = _open(roster_path, warn=False)
    frame = roster_dataframe(roster)
    t = Table(title=f"Loaded Schedules ({len(roster.people)} people)")
    for column in frame.columns:
        t.add_column(str(column))
    for record in frame.itertuples(index=False):
        t.add_row(*(str(value) if value else "-" for value in record))
    console.print(t)
    if earliest:
        console.print(f"[cyan]Bundle earliest start:[/] {earliest}")
    warnings = validate_roster(roster)
    if warnings:
        console.print("[yellow]Warnings:[/]\n- " + "\n- ".join(escape(w) for w in warnings))


@app.command("recommend")
def recommend_cmd(
    roster_path: Path = typer.Argument(..., help="Schedules CSV or YAML roster bundle."),
    earliest: Annotated[
        str | None,
        typer.Option(
            "--earliest",
            "-e",
            help=(
                "Earliest meeting start (HH:MM). Defaults to the bundle value or "
                f"{DEFAULT_EARLIEST_START}."
            ),
        ),
    ] = None,
    day: Annotated[
        list[str] | None,
        typer.Option("--day", "-d", help="Restrict to a weekday (repeatable). Defaults to Mon-Fri."),
    ] = None,
    show_names: Annotated[
        bool, typer.Option("--names/--no-names", help="Show fully available names per slot.")
    ] = True,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Optional CSV export path (file or directory)."),
    ] = None,
    out_json: Annotated[
        Path | None,
        typer.Option("--out-json", help="Optional JSON dump of ranked slots per weekday."),
    ] = None,
    telemetry_log: Annotated[
        Path | None,
        typer.Option(
            "--telemetry-log",
            help="Append run telemetry to a JSONL file; per-day records land in steps/.",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """Recommend the top two meeting windows for each weekday."""
    roster, bundle_earliest = _open(roster_path)
    earliest_text = earliest or bundle_earliest or DEFAULT_EARLIEST_START
    earliest_minutes = parse_clock(earliest_text, "--earliest")
    if not is_picker_time(earliest_minutes):
        console.print(
            f"[yellow]Earliest start {minutes_to_time(earliest_minutes)} is outside the "
            f"07:00-18:30 half-hour grid; continuing anyway.[/]"
        )
    days = parse_days(day)

    def _run(logger: RunTelemetryLogger | None) -> WeekRecommendations:
        results: WeekRecommendations = {}
        for weekday in days:
            slots = recommend(roster.day_schedules(weekday), weekday, earliest_minutes)
            results[weekday] = slots
            if logger is not None:
                logger.log_day(
                    day=weekday.value,
                    slot_count=len(slots),
                    best_score=slots[0].score if slots else None,
                )
        return results

    if telemetry_log:
        with RunTelemetryLogger(
            log_path=telemetry_log,
            command="recommend",
            roster=roster.name,
            roster_path=str(roster_path),
            config={
                "earliest_start": minutes_to_time(earliest_minutes),
                "days": [d.value for d in days],
            },
            context={"source": "cli.recommend", "people": len(roster.people)},
            log_days=True,
        ) as logger:
            results = _run(logger)
            logger.finalize(metrics=summarize_recommendations(results))
    else:
        results = _run(None)

    console.print(
        f"[bold]Top Meeting Recommendations[/bold] for {roster.name} "
        f"(earliest start {minutes_to_time(earliest_minutes)})"
    )
    for weekday, slots in results.items():
        _print_day(weekday, slots, show_names)

    if out:
        target = export_recommendations(results, out)
        console.print(f"Wrote recommendations to {target}")
    if out_json:
        out_json.parent.mkdir(parents=True, exist_ok=True)
        out_json.write_text(json.dumps(recommendation_records(results), indent=2))
        console.print(f"Wrote recommendations to {out_json}")


@app.command("query")
def query_cmd(
    roster_path: Path = typer.Argument(..., help="Schedules CSV or YAML roster bundle."),
    day: Annotated[str, typer.Option("--day", "-d", help="Weekday to query.")] = "Monday",
    start: Annotated[str, typer.Option("--start", "-s", help="Window start (HH:MM).")] = "09:00",
    end: Annotated[str, typer.Option("--end", "-t", help="Window end (HH:MM).")] = "10:00",
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Optional CSV export path (file or directory)."),
    ] = None,
) -> None:
    """Check who can attend a specific window."""
    weekday = parse_days([day])[0]
    start_minutes = parse_clock(start, "--start")
    end_minutes = parse_clock(end, "--end")
    roster, _ = _open(roster_path)
    try:
        result = query_roster(roster, weekday, start_minutes, end_minutes)
    except QueryRangeError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _print_query(result)
    if out:
        target = export_query(result, out)
        console.print(f"Wrote query results to {target}")


@app.command()
def times():
    """List the selectable half-hour times (07:00 to 18:30)."""
    console.print(" ".join(picker_times()))


if __name__ == "__main__":
    app()
