"""Sequential composition of fallible steps.

Two equivalent ways to chain steps that return an Either:

``chain`` threads ``flat_map`` explicitly::

    chain(parse(text), reciprocal, lambda d: Right(stringify(d)))

``binding`` evaluates a generator expression whose ``for`` clauses iterate
Either values. A Right yields its payload once, binding the loop name for
the clauses after it; a Left stops the block::

    binding(a + b + c for a in Right(1) for b in Right(1 + a) for c in Right(1 + b))

Both forms evaluate steps strictly in order and return the first Left
unchanged, without calling any later step.
"""

from collections.abc import Callable, Generator
from typing import Any, TypeVar

from disjunction.shared.either import Either, Left, Right, _ShortCircuit

T = TypeVar("T")


def binding(steps: Generator[T, None, None]) -> Either[Any, T]:
    """Run a comprehension block.

    Args:
        steps: Generator expression iterating Either values

    Returns:
        Right(value) with the block's final expression if every step is Right
        The first Left encountered otherwise

    Raises:
        ValueError: If the generator finishes without producing a value
    """
    try:
        value = next(steps)
    except _ShortCircuit as short:
        return short.left
    except StopIteration:
        raise ValueError("binding block produced no value") from None
    finally:
        steps.close()
    return Right(value)


def chain(
    initial: Either[Any, Any],
    *steps: Callable[[Any], Either[Any, Any]],
) -> Either[Any, Any]:
    """Apply ``steps`` to ``initial`` with ``flat_map``, stopping at the first Left."""
    current = initial
    for step in steps:
        if isinstance(current, Left):
            return current
        current = current.flat_map(step)
    return current
