"""Classwork runner: the fixed demonstration flows behind the CLI commands.

Exam demo, in order:
1. Build the multiple-choice exam, print its details, grade it
2. Print a blank separator line
3. Build the essay exam, print its details, grade it with the supplied reader

Rental flow: build the default vehicle for the chosen kind and print its
cost report.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console

from classwork.config import DEFAULT_SETTINGS, Settings
from classwork.exams import EssayExam, MultipleChoiceExam, ScoreReader
from classwork.fleet import Vehicle, vehicle_for
from classwork.pricing import VehicleKind

# Demonstration exams: (exam_id, subject, duration, questions / topic)
MC_DEMO = ("MC101", "Mathematics", 60, 20)
ESSAY_DEMO = ("EE101", "Literature", 90, "Quantum Computing Term Paper")


def build_demo_exams() -> tuple[MultipleChoiceExam, EssayExam]:
    """Construct the two demonstration exams."""
    return MultipleChoiceExam(*MC_DEMO), EssayExam(*ESSAY_DEMO)


def run_exam_demo(console: Console, read_score: Optional[ScoreReader]) -> None:
    """Run the fixed exam demonstration.

    Validation failures are reported inside grade_exam(); anything else
    propagates to the caller.

    Args:
        console: Rich Console for program output.
        read_score: Supplies the essay score when the essay gets graded.
    """
    mc, essay = build_demo_exams()

    mc.get_exam_details(console)
    mc.grade_exam(console)

    console.print()

    essay.get_exam_details(console)
    essay.grade_exam(console, read_score)


def run_rental(
    kind: VehicleKind,
    days: int,
    console: Console,
    settings: Settings = DEFAULT_SETTINGS,
) -> Vehicle:
    """Price the default vehicle of ``kind`` for ``days`` days and print it."""
    vehicle = vehicle_for(kind)
    vehicle.calculate_rental_cost(days, console, settings.currency)
    return vehicle
