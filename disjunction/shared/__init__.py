"""
Shared utilities module.

This module contains the Either type and its helpers, used across all
layers of the application, plus configuration and logging setup.
"""

from disjunction.shared.comprehension import binding, chain
from disjunction.shared.either import Either, Left, Right, catching, conditionally, left, right
from disjunction.shared.optional import (
    from_nullable,
    left_if_null,
    or_none,
    right_if_not_null,
    right_if_null,
)

__all__ = [
    "Either",
    "Left",
    "Right",
    "binding",
    "catching",
    "chain",
    "conditionally",
    "from_nullable",
    "left",
    "left_if_null",
    "or_none",
    "right",
    "right_if_not_null",
    "right_if_null",
]
