"""Test configuration and fixtures.

Provides:
- Python path setup for imports
- Call-counting producers for laziness checks
- Environment isolation for Settings
- Sample inputs for the reciprocal pipeline
"""

import os
import sys
from pathlib import Path
from typing import Any

import pytest

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


class CallCounter:
    """Callable that records how many times it was invoked."""

    def __init__(self, result: Any = None):
        self.result = result
        self.calls = 0
        self.args: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> Any:
        self.calls += 1
        self.args.append(args)
        return self.result


# ============================================================================
# Producers
# ============================================================================


@pytest.fixture
def counter() -> type[CallCounter]:
    """Factory for call-counting producers."""
    return CallCounter


# ============================================================================
# Environment
# ============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop DISJUNCTION_* variables so Settings sees defaults."""
    for name in list(os.environ):
        if name.upper().startswith("DISJUNCTION_"):
            monkeypatch.delenv(name)


# ============================================================================
# Sample Data
# ============================================================================


@pytest.fixture
def numeric_inputs() -> list[str]:
    """Inputs that parse and have a reciprocal."""
    return ["1", "2", "5", "-4", "10"]
