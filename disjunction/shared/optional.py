"""Conversions between optional values and Either.

An optional value is a plain ``R | None``. These functions are the only
place where ``None`` crosses into or out of an Either; the Either types
themselves never treat ``None`` specially.
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from disjunction.shared.either import Either, Left, Right

L = TypeVar("L")
R = TypeVar("R")


def right_if_not_null(value: Optional[R], when_null: Callable[[], L]) -> Either[L, R]:
    """Right(value) when present, Left(when_null()) when ``None``."""
    if value is None:
        return Left(when_null())
    return Right(value)


# Name used for the same conversion when building from a nullable source.
from_nullable = right_if_not_null


def right_if_null(value: Optional[L], fallback: Callable[[], R]) -> Either[L, R]:
    """Mirror of ``right_if_not_null``: a present value is the failure.

    Returns:
        Right(fallback()) if value is None
        Left(value) otherwise
    """
    if value is None:
        return Right(fallback())
    return Left(value)


def left_if_null(
    either: Either[L, Optional[R]],
    when_null: Callable[[], L],
) -> Either[L, R]:
    """Turn a Right holding ``None`` into a Left.

    Right(x) with a present ``x`` is kept, and a Left is returned
    unchanged. ``when_null`` is only called for Right(None).
    """
    match either:
        case Right(None):
            return Left(when_null())
        case _:
            return either  # type: ignore[return-value]


def or_none(either: Either[L, R]) -> Optional[R]:
    """Right value, or ``None`` for a Left."""
    return either.fold(lambda _: None, lambda value: value)
