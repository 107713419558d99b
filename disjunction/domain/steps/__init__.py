"""Reciprocal pipeline steps: parse, reciprocal, stringify."""

from disjunction.domain.steps.formatting import stringify
from disjunction.domain.steps.parsing import parse, parse_or_raise
from disjunction.domain.steps.reciprocal import reciprocal, reciprocal_or_raise

__all__ = ["parse", "parse_or_raise", "reciprocal", "reciprocal_or_raise", "stringify"]
