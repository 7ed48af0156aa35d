"""CLI for the classwork demonstrations.

Usage:
    python -m classwork fleet                        # Interactive rental quote
    python -m classwork fleet --vehicle 2 --days 3   # Pre-answered prompts
    python -m classwork vehicles                     # List the rental fleet
    python -m classwork exam                         # Exam grading demo
    python -m classwork exam --essay-score 75        # Demo without the prompt
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from classwork.config import DEFAULT_SETTINGS, Settings
from classwork.exams import ESSAY_MAX_SCORE, ESSAY_MIN_SCORE, ScoreReader, seed_grader
from classwork.fleet import default_fleet
from classwork.pricing import SELECTORS, VehicleKind, classify_selector
from classwork.render import render_fleet_table
from classwork.runner import run_exam_demo, run_rental

app = typer.Typer(
    name="classwork",
    help="Vehicle rental pricing and exam grading demonstrations",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def _print_menu(settings: Settings) -> None:
    console.print(settings.banner, markup=False)
    console.print()
    console.print("Which type of Vehicle would you like to Rent?")
    console.print()
    for number, kind in SELECTORS.items():
        console.print(f'Type {number} for: "{kind.label}"')


def _choose_kind(preset: Optional[int]) -> VehicleKind:
    """Prompt until the selector names a vehicle kind.

    A preset selector counts as the first answer.
    """
    selector = preset
    while True:
        if selector is not None:
            kind = classify_selector(selector)
            if kind is not None:
                return kind
            console.print(f"{selector} not recognized. Please follow the instructions above.")
            console.print()
        selector = typer.prompt("Choice", type=int)


def _essay_score_reader(preset: Optional[int]) -> ScoreReader:
    """Reader that returns the preset score, or prompts for one."""

    def read() -> int:
        if preset is not None:
            return preset
        return typer.prompt(
            f"Enter score for the Essay Exam ({ESSAY_MIN_SCORE}-{ESSAY_MAX_SCORE})",
            type=int,
        )

    return read


@app.command("fleet")
def cmd_fleet(
    vehicle: Optional[int] = typer.Option(None, "--vehicle", help="Vehicle selector: 1=Car, 2=SUV, 3=Truck"),
    days: Optional[int] = typer.Option(None, "--days", "-d", help="Number of rental days"),
    currency: Optional[str] = typer.Option(None, "--currency", help="Currency prefix for the total"),
    agency_name: Optional[str] = typer.Option(None, "--agency-name", help="Agency name shown in the banner"),
    agency_short: Optional[str] = typer.Option(None, "--agency-short", help="Short agency name shown in the banner"),
    verbose: bool = typer.Option(False, "--verbose", help="Show diagnostics on stderr"),
) -> None:
    """Quote the rental cost of a Car, SUV or Truck."""
    settings = DEFAULT_SETTINGS.with_overrides(
        currency=currency,
        agency_name=agency_name,
        agency_short=agency_short,
        verbose=verbose,
    )

    _print_menu(settings)
    kind = _choose_kind(vehicle)

    if days is None:
        days = typer.prompt(
            "Please enter the number of days you want to rent the vehicle", type=int
        )

    chosen = run_rental(kind, days, console, settings)
    if settings.verbose:
        err_console.print(
            f"  [dim]Priced {chosen.year} {chosen.make} {chosen.model} for {days} days[/dim]"
        )


@app.command("vehicles")
def cmd_vehicles(
    currency: Optional[str] = typer.Option(None, "--currency", help="Currency prefix for rates"),
) -> None:
    """List the rental fleet with rates and capacities."""
    settings = DEFAULT_SETTINGS.with_overrides(currency=currency)
    render_fleet_table(default_fleet(), console, settings.currency)


@app.command("exam")
def cmd_exam(
    essay_score: Optional[int] = typer.Option(None, "--essay-score", help="Essay score to assign instead of prompting"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the multiple-choice grader"),
    verbose: bool = typer.Option(False, "--verbose", help="Show diagnostics on stderr"),
) -> None:
    """Run the exam grading demonstration."""
    settings = DEFAULT_SETTINGS.with_overrides(seed=seed, verbose=verbose)

    seed_grader(settings.seed)
    if settings.verbose:
        source = settings.seed if settings.seed is not None else "OS entropy"
        err_console.print(f"  [dim]Grader seeded from {source}[/dim]")

    try:
        run_exam_demo(console, _essay_score_reader(essay_score))
    except typer.Abort:
        raise
    except Exception as e:
        err_console.print(f"[red]An error occurred:[/red] {escape(str(e))}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
