"""Pipeline service orchestrating the parse → reciprocal → stringify steps.

This is the application layer that coordinates domain logic.
"""

from typing import Optional

from disjunction.domain.errors import ReciprocalError, ReciprocalPipelineError
from disjunction.domain.models import ReciprocalReport
from disjunction.domain.steps import (
    parse,
    parse_or_raise,
    reciprocal,
    reciprocal_or_raise,
    stringify,
)
from disjunction.shared.comprehension import binding
from disjunction.shared.config import Settings
from disjunction.shared.either import Either, Left, Right, catching
from disjunction.shared.functions import and_then
from disjunction.shared.logging_config import get_logger

logger = get_logger(__name__)

OK_STATUS = 200


def error_message(error: ReciprocalError) -> str:
    """Human-readable message for each pipeline failure."""
    match error:
        case ReciprocalError.NOT_A_NUMBER:
            return "Not a number!"
        case ReciprocalError.NO_ZERO_RECIPROCAL:
            return "Can't take reciprocal of 0!"


class ReciprocalPipelineService:
    """Runs text input through the reciprocal pipeline."""

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize pipeline service.

        Args:
            settings: Application settings (defaults loaded from environment)
        """
        self.settings = settings if settings is not None else Settings()

    def magic(self, text: str) -> Either[ReciprocalError, str]:
        """Parse, take the reciprocal, and format.

        Returns:
            Right(str) with the formatted reciprocal
            Left(ReciprocalError) from the first step that failed
        """
        logger.debug(f"Running pipeline (input={text!r})")
        result = parse(text).flat_map(reciprocal).map(stringify)

        if isinstance(result, Left):
            logger.info(f"Pipeline failed for {text!r}: {result.value.name}")
        return result

    def magic_binding(self, text: str) -> Either[ReciprocalError, str]:
        """Same pipeline as ``magic``, written as a comprehension block."""
        return binding(
            stringify(inverse)
            for number in parse(text)
            for inverse in reciprocal(number)
        )

    def magic_catching(self, text: str) -> Either[ReciprocalPipelineError, str]:
        """Same pipeline built from the exception-raising steps."""
        pipeline = and_then(parse_or_raise, reciprocal_or_raise, stringify)
        return catching(lambda: pipeline(text), ReciprocalPipelineError)  # type: ignore[return-value]

    def describe(self, text: str) -> str:
        """Describe the pipeline outcome for display."""
        match self.magic(text):
            case Left(error):
                return error_message(error)
            case Right(value):
                return f"Got reciprocal: {value}"

    def status_code(self, text: str) -> int:
        """Map the pipeline outcome to an HTTP-style status code."""
        return self.magic(text).map(lambda _: OK_STATUS).get_or_handle(self._error_status)

    def report(self, text: str) -> ReciprocalReport:
        """Run the pipeline and collect the outcome into a report."""
        return self.magic(text).fold(
            lambda error: ReciprocalReport(
                input=text,
                error=error,
                message=error_message(error),
                status_code=self._error_status(error),
            ),
            lambda value: ReciprocalReport(
                input=text,
                value=value,
                message=f"Got reciprocal: {value}",
                status_code=OK_STATUS,
            ),
        )

    def _error_status(self, error: ReciprocalError) -> int:
        match error:
            case ReciprocalError.NOT_A_NUMBER:
                return self.settings.not_a_number_status
            case ReciprocalError.NO_ZERO_RECIPROCAL:
                return self.settings.zero_reciprocal_status
