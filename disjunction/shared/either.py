"""Either type for functional error handling.

This module implements a two-variant disjunction: a value is either a
``Left`` (conventionally the error or alternative) or a ``Right``
(conventionally the success). Both variants are immutable; every
transformation returns a new instance.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar, Union

L = TypeVar("L")  # Left (error) type
R = TypeVar("R")  # Right (success) type
U = TypeVar("U")  # Map target type
T = TypeVar("T")  # Fold target type


class _ShortCircuit(BaseException):
    """Raised when a Left is iterated inside a ``binding`` block.

    ``binding`` catches it and returns the carried Left, so the remaining
    clauses of the block are never evaluated. Derives from BaseException
    so ``except Exception`` handlers (including ``catching``) let it through.
    """

    def __init__(self, left: "Left[Any]") -> None:
        super().__init__(left)
        self.left = left


@dataclass(frozen=True)
class Left(Generic[L]):
    """Left value, the failure side of an Either."""

    value: L

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False

    def map(self, func: Callable[[Any], U]) -> "Left[L]":
        """Transform the right value (does nothing for Left)."""
        return self

    def map_left(self, func: Callable[[L], U]) -> "Left[U]":
        """Transform the left value."""
        return Left(func(self.value))

    def flat_map(self, func: Callable[[Any], "Either[L, U]"]) -> "Left[L]":
        """Chain a fallible step (short-circuits for Left)."""
        return self

    def swap(self) -> "Right[L]":
        return Right(self.value)

    def fold(self, on_left: Callable[[L], T], on_right: Callable[[Any], T]) -> T:
        return on_left(self.value)

    def contains(self, value: object) -> bool:
        return False

    def get_or_else(self, default: Callable[[], U]) -> U:
        """Evaluate and return the default (Left has no right value)."""
        return default()

    def get_or_handle(self, recover: Callable[[L], U]) -> U:
        """Compute a value from the left payload."""
        return recover(self.value)

    def __iter__(self) -> Iterator[NoReturn]:
        """Stop the enclosing ``binding`` block on first ``next``.

        Only supported inside ``binding``; iterating a Left anywhere else
        raises the private short-circuit signal.
        """
        raise _ShortCircuit(self)
        yield  # unreachable; makes this a generator so iter() never raises

    def __repr__(self) -> str:
        return f"Left({self.value!r})"


@dataclass(frozen=True)
class Right(Generic[R]):
    """Right value, the success side of an Either."""

    value: R

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True

    def map(self, func: Callable[[R], U]) -> "Right[U]":
        """Transform the right value."""
        return Right(func(self.value))

    def map_left(self, func: Callable[[Any], U]) -> "Right[R]":
        """Transform the left value (does nothing for Right)."""
        return self

    def flat_map(self, func: Callable[[R], "Either[L, U]"]) -> "Either[L, U]":
        """Chain a fallible step; its result is returned as is."""
        return func(self.value)

    def swap(self) -> "Left[R]":
        return Left(self.value)

    def fold(self, on_left: Callable[[Any], T], on_right: Callable[[R], T]) -> T:
        return on_right(self.value)

    def contains(self, value: object) -> bool:
        """Check whether this is a Right holding ``value``."""
        return self.value == value

    def get_or_else(self, default: Callable[[], Any]) -> R:
        """Return the right value; ``default`` is never called."""
        return self.value

    def get_or_handle(self, recover: Callable[[Any], Any]) -> R:
        return self.value

    def __iter__(self) -> Iterator[R]:
        yield self.value

    def __repr__(self) -> str:
        return f"Right({self.value!r})"


# Type alias for clearer function signatures
Either = Union[Left[L], Right[R]]


def left(value: L) -> Left[L]:
    """Wrap ``value`` as a Left."""
    return Left(value)


def right(value: R) -> Right[R]:
    """Wrap ``value`` as a Right."""
    return Right(value)


def conditionally(
    condition: bool,
    if_false: Callable[[], L],
    if_true: Callable[[], R],
) -> Either[L, R]:
    """Build an Either from a condition.

    Only the producer selected by ``condition`` is called.

    Args:
        condition: Selects the variant
        if_false: Producer for the Left payload
        if_true: Producer for the Right payload

    Returns:
        Right(if_true()) if condition is true, Left(if_false()) otherwise
    """
    if condition:
        return Right(if_true())
    return Left(if_false())


def catching(
    func: Callable[[], R],
    *exceptions: type[Exception],
) -> Either[Exception, R]:
    """Run an exception-raising callable and capture its outcome.

    Args:
        func: Zero-argument callable to run
        *exceptions: Exception types to capture (default: Exception)

    Returns:
        Right(result) if ``func`` returns
        Left(exception) if it raises one of ``exceptions``; other
        exceptions propagate
    """
    captured = exceptions or (Exception,)
    try:
        return Right(func())
    except captured as e:
        return Left(e)
