"""Exam grading model: abstract Exam and its two variants.

Grading runs in two steps. evaluate() validates the duration, computes a
score and returns a GradeOutcome; any ExamError raised on the way is caught
there. grade_exam() renders that outcome and returns nothing, so grading
never fails from the caller's point of view.

The multiple-choice grader draws from one module-level generator that the
CLI seeds once at startup via seed_grader().
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Optional

from rich.console import Console

from classwork.exceptions import ExamError, GradingError, InvalidExamDurationError
from classwork.models import GradeOutcome, GradeStatus
from classwork.render import render_exam_details, render_outcome

# Zero-argument callable that supplies a grader-assigned score
ScoreReader = Callable[[], int]

ESSAY_MIN_SCORE = 0
ESSAY_MAX_SCORE = 100

_rng = random.Random()


def seed_grader(seed: Optional[int] = None) -> None:
    """Seed the shared grader generator. None uses OS entropy."""
    _rng.seed(seed)


class Exam(ABC):
    """Common attributes of every exam.

    Duration is not checked here: an exam with a zero or negative duration
    can be built and only fails once it is graded.
    """

    kind: ClassVar[str]
    # Printed after a graded score
    score_suffix: ClassVar[str] = ""

    def __init__(self, exam_id: str, subject: str, duration: int) -> None:
        self._exam_id = exam_id
        self._subject = subject
        self._duration = duration

    @property
    def exam_id(self) -> str:
        return self._exam_id

    @property
    def subject(self) -> str:
        return self._subject

    @property
    def duration(self) -> int:
        return self._duration

    @property
    @abstractmethod
    def max_score(self) -> int:
        """Highest score this exam can award."""

    @abstractmethod
    def compute_score(self, read_score: Optional[ScoreReader]) -> int:
        """Produce a score once the duration has been accepted.

        Raises:
            GradingError: if no valid score can be produced.
        """

    def validate_duration(self) -> None:
        if self._duration <= 0:
            raise InvalidExamDurationError()

    def evaluate(self, read_score: Optional[ScoreReader] = None) -> GradeOutcome:
        """Grade the exam without printing anything.

        Args:
            read_score: Supplies a grader-assigned score. Only essay exams
                call it, and only after the duration check passes.

        Returns:
            GradeOutcome describing the score or the error that stopped grading.
        """
        try:
            self.validate_duration()
            score = self.compute_score(read_score)
        except InvalidExamDurationError as e:
            return self._failed(GradeStatus.INVALID_DURATION, e)
        except ExamError as e:
            return self._failed(GradeStatus.GRADING_ERROR, e)
        return GradeOutcome(
            exam_id=self._exam_id,
            kind=self.kind,
            status=GradeStatus.GRADED,
            max_score=self.max_score,
            score=score,
            score_suffix=self.score_suffix,
        )

    def _failed(self, status: GradeStatus, error: ExamError) -> GradeOutcome:
        return GradeOutcome(
            exam_id=self._exam_id,
            kind=self.kind,
            status=status,
            max_score=self.max_score,
            error=error,
        )

    def grade_exam(
        self, console: Console, read_score: Optional[ScoreReader] = None
    ) -> None:
        """Grade the exam and print the score or the error message."""
        render_outcome(self.evaluate(read_score), console)

    def get_exam_details(self, console: Console) -> None:
        render_exam_details(self, console)


class MultipleChoiceExam(Exam):
    """Machine-graded exam; the score is the number of correct answers."""

    kind: ClassVar[str] = "Multiple Choice"
    score_suffix: ClassVar[str] = " correct answers"

    def __init__(self, exam_id: str, subject: str, duration: int, questions: int) -> None:
        super().__init__(exam_id, subject, duration)
        self._questions = questions

    @property
    def questions(self) -> int:
        return self._questions

    @property
    def max_score(self) -> int:
        return self._questions

    def compute_score(self, read_score: Optional[ScoreReader]) -> int:
        if self._questions < 0:
            raise GradingError()
        # Simulated: uniform over [0, questions]
        return _rng.randint(0, self._questions)


class EssayExam(Exam):
    """Hand-graded exam; the grader assigns a score from 0 to 100."""

    kind: ClassVar[str] = "Essay"

    def __init__(self, exam_id: str, subject: str, duration: int, topic: str) -> None:
        super().__init__(exam_id, subject, duration)
        self._topic = topic

    @property
    def topic(self) -> str:
        return self._topic

    @property
    def max_score(self) -> int:
        return ESSAY_MAX_SCORE

    def compute_score(self, read_score: Optional[ScoreReader]) -> int:
        if read_score is None:
            raise GradingError()
        score = read_score()
        if score < ESSAY_MIN_SCORE or score > ESSAY_MAX_SCORE:
            raise GradingError()
        return score
