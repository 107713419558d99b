"""Domain-level errors for the reciprocal pipeline.

``ReciprocalError`` is the closed set of failures carried in Left values.
The exception classes serve the exception-raising form of the same steps.
"""

from enum import Enum


class ReciprocalError(Enum):
    """Every way the reciprocal pipeline can fail."""

    NOT_A_NUMBER = "not_a_number"
    NO_ZERO_RECIPROCAL = "no_zero_reciprocal"


class ReciprocalPipelineError(Exception):
    """Base exception for all reciprocal pipeline errors."""

    error: ReciprocalError


class NotANumberError(ReciprocalPipelineError, ValueError):
    """Raised when the input is not an integer."""

    error = ReciprocalError.NOT_A_NUMBER

    def __init__(self, text: str):
        super().__init__(f"{text} is not a valid integer.")
        self.text = text


class ZeroReciprocalError(ReciprocalPipelineError, ArithmeticError):
    """Raised when asked for the reciprocal of zero."""

    error = ReciprocalError.NO_ZERO_RECIPROCAL

    def __init__(self) -> None:
        super().__init__("Cannot take reciprocal of 0.")
