"""Result models for the classwork demonstrations.

RentalQuote, GradeStatus, GradeOutcome, the typed structures that flow
from the vehicle and exam hierarchies to the renderers and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from classwork.pricing import VehicleKind

if TYPE_CHECKING:
    from classwork.exceptions import ExamError


@dataclass(frozen=True)
class RentalQuote:
    """Total cost of renting one vehicle for a number of days."""

    kind: VehicleKind
    days: int
    total: float
    currency: str = "KES"

    @property
    def formatted_total(self) -> str:
        return f"{self.currency}{self.total:.2f}"

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "kind": self.kind.value,
            "days": self.days,
            "total": self.total,
            "currency": self.currency,
        }


class GradeStatus(str, Enum):
    """How a grading attempt ended."""

    GRADED = "graded"
    INVALID_DURATION = "invalid-duration"
    GRADING_ERROR = "grading-error"


@dataclass(frozen=True)
class GradeOutcome:
    """Result of one grading attempt.

    Produced by Exam.evaluate(); a failed attempt carries the ExamError that
    stopped it and no score.
    """

    exam_id: str
    kind: str
    status: GradeStatus
    max_score: int
    score: Optional[int] = None
    error: Optional[ExamError] = None
    score_suffix: str = ""

    @property
    def ok(self) -> bool:
        return self.status is GradeStatus.GRADED

    @property
    def message(self) -> str:
        if self.error is not None:
            return self.error.message
        return f"Score: {self.score}/{self.max_score}"
