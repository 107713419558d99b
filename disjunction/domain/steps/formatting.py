"""Step 3: Format a reciprocal for display. Never fails."""


def stringify(value: float) -> str:
    return str(value)
