"""Console rendering for both demonstrations.

Turns RentalQuotes, exam details and GradeOutcomes into Rich console output,
and draws the fleet listing table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from rich.console import Console
from rich.table import Table

from classwork.models import GradeOutcome, GradeStatus, RentalQuote
from classwork.pricing import daily_rate, selector_for

if TYPE_CHECKING:
    from classwork.exams import Exam
    from classwork.fleet import Vehicle


def render_quote(quote: RentalQuote, console: Console) -> None:
    """Print the cost report for a rental."""
    console.print(f"{quote.kind.label} Chosen!")
    console.print(
        f"Total Rental Cost: {quote.formatted_total} for {quote.days} days.",
        markup=False,
    )


def render_exam_details(exam: Exam, console: Console) -> None:
    """Print exam ID, subject and duration exactly as stored."""
    console.print(f"Exam ID: {exam.exam_id}", markup=False)
    console.print(f"Subject: {exam.subject}", markup=False)
    console.print(f"Duration: {exam.duration} minutes", markup=False)


def render_outcome(outcome: GradeOutcome, console: Console) -> None:
    """Print a graded score, or the error that stopped grading."""
    if outcome.status is GradeStatus.GRADED:
        console.print(f"Grading {outcome.kind} Exam...")
        console.print(f"{outcome.message}{outcome.score_suffix}")
        return
    console.print(f"[red]{outcome.message}[/red]")


def _fmt_rate(rate: float, currency: str) -> str:
    """Format a per-day rate."""
    return f"{currency}{rate:.2f}"


def render_fleet_table(
    vehicles: Iterable[Vehicle], console: Console, currency: str = "KES"
) -> None:
    """Render a Rich table of the rentable fleet."""
    table = Table(title="Rental Fleet", show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Type", style="green", min_width=6)
    table.add_column("Make")
    table.add_column("Model")
    table.add_column("Year", justify="right")
    table.add_column("Rate/day", justify="right")
    table.add_column("Capacity")

    for v in vehicles:
        table.add_row(
            str(selector_for(v.kind)),
            v.kind.label,
            v.make,
            v.model,
            str(v.year),
            _fmt_rate(daily_rate(v.kind), currency),
            v.capacity,
        )

    console.print()
    console.print(table)
    console.print()
