"""Function composition helpers."""

from collections.abc import Callable
from functools import reduce
from typing import Any, TypeVar

T = TypeVar("T")


def identity(value: T) -> T:
    return value


def and_then(*funcs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions left to right.

    ``and_then(f, g, h)(x)`` is ``h(g(f(x)))``.

    Raises:
        ValueError: If no function is given
    """
    if not funcs:
        raise ValueError("and_then requires at least one function")

    def composed(value: Any) -> Any:
        return reduce(lambda acc, func: func(acc), funcs, value)

    return composed
