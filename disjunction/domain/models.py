"""Domain models for the reciprocal pipeline.

All models use Pydantic for validation, serialization, and type safety.
"""

from pydantic import BaseModel, ConfigDict, Field

from disjunction.domain.errors import ReciprocalError


class ReciprocalReport(BaseModel):
    """Outcome of running one input through the reciprocal pipeline."""

    input: str = Field(description="Raw input text")
    value: str | None = Field(
        default=None, description="Formatted reciprocal (None if the pipeline failed)"
    )
    error: ReciprocalError | None = Field(
        default=None, description="Failure reason (None if the pipeline succeeded)"
    )
    message: str = Field(description="Human-readable outcome")
    status_code: int = Field(ge=100, le=599, description="HTTP-style status for the outcome")

    model_config = ConfigDict(frozen=True)  # Immutable

    @property
    def succeeded(self) -> bool:
        return self.error is None
