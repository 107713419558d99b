"""Step 2: Take the reciprocal of an integer."""

from disjunction.domain.errors import ReciprocalError, ZeroReciprocalError
from disjunction.shared.either import Either, Left, Right
from disjunction.shared.logging_config import get_logger

logger = get_logger(__name__)


def reciprocal(number: int) -> Either[ReciprocalError, float]:
    """Compute ``1 / number``.

    Returns:
        Right(float) for a non-zero number
        Left(ReciprocalError.NO_ZERO_RECIPROCAL) for zero
    """
    if number == 0:
        logger.debug("Rejected reciprocal of 0")
        return Left(ReciprocalError.NO_ZERO_RECIPROCAL)
    return Right(1.0 / number)


def reciprocal_or_raise(number: int) -> float:
    """Exception-raising form of ``reciprocal``.

    Raises:
        ZeroReciprocalError: If number is 0
    """
    if number == 0:
        raise ZeroReciprocalError()
    return 1.0 / number
