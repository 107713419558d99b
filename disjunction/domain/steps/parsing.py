"""Step 1: Parse input text into a 32-bit integer."""

import re
from typing import Optional

from disjunction.domain.errors import NotANumberError, ReciprocalError
from disjunction.shared.either import Either, Left, Right
from disjunction.shared.logging_config import get_logger

logger = get_logger(__name__)

INTEGER_PATTERN = re.compile(r"-?[0-9]+")

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
# Digits needed for INT_MIN/INT_MAX once sign and leading zeros are dropped
_MAX_DIGITS = 10


def _to_int(text: str) -> Optional[int]:
    """Integer value of ``text``, or None if it is not a 32-bit integer."""
    if INTEGER_PATTERN.fullmatch(text) is None:
        return None
    if len(text.lstrip("-").lstrip("0")) > _MAX_DIGITS:
        return None
    number = int(text)
    if not INT_MIN <= number <= INT_MAX:
        return None
    return number


def parse(text: str) -> Either[ReciprocalError, int]:
    """Parse an integer.

    Args:
        text: Input text, matched in full against ``-?[0-9]+``

    Returns:
        Right(int) if the text is an integer in the 32-bit signed range
        Left(ReciprocalError.NOT_A_NUMBER) otherwise
    """
    number = _to_int(text)
    if number is None:
        logger.debug(f"Rejected input: {text[:40]!r}")
        return Left(ReciprocalError.NOT_A_NUMBER)
    return Right(number)


def parse_or_raise(text: str) -> int:
    """Exception-raising form of ``parse``.

    Raises:
        NotANumberError: If the text is not a 32-bit integer
    """
    number = _to_int(text)
    if number is None:
        raise NotANumberError(text)
    return number
