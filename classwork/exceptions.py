"""
Custom exception classes for the exam grading model.

Grading raises these; Exam.evaluate() catches them and turns them into a
GradeOutcome, so they never escape grade_exam().
"""


class ExamError(Exception):
    """Base class for failures detected while grading an exam."""

    default_message = "Error: Exam processing failed!"

    def __init__(self, message: str = "") -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidExamDurationError(ExamError):
    """Raised at grading time when the exam duration is zero or negative."""

    default_message = "Error: Invalid exam duration!"


class GradingError(ExamError):
    """Raised when a score cannot be produced or lies outside the valid range."""

    default_message = "Error: Grading process failed!"
