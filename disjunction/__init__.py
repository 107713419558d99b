"""
Typed two-variant result type with a safe transformation protocol.

Layers:
- shared/: Either type, optional conversions, comprehension, config, logging
- domain/: reciprocal pipeline built on Either (errors, models, steps)
- application/: pipeline service composing the steps
- main.py: console demo runner
"""

from disjunction.shared import (
    Either,
    Left,
    Right,
    binding,
    catching,
    chain,
    conditionally,
    from_nullable,
    left,
    left_if_null,
    or_none,
    right,
    right_if_not_null,
    right_if_null,
)

__version__ = "0.1.0"

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
