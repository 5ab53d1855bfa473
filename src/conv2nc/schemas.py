"""Pydantic schemas for runtime validation of engine requests."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from conv2nc.types import ALL_FIELDS


class FieldSelection(BaseModel):
    """Validated field selector.

    ``indices`` is ``None`` when every loaded field is selected.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    indices: tuple[int, ...] | None = Field(default=None)

    @field_validator("indices")
    @classmethod
    def _validate_indices(cls, value: tuple[int, ...] | None) -> tuple[int, ...] | None:
        if value is None:
            return value
        if not value:
            raise ValueError("field selector must name at least one field.")
        if any(index < 0 for index in value):
            raise ValueError("field numbers must be non-negative integers.")
        return value

    @classmethod
    def from_selector(cls, selector: str) -> FieldSelection:
        """Parse the space-separated selector string passed to the engine."""
        tokens = selector.split()
        if tokens == [ALL_FIELDS]:
            return cls()
        return cls(indices=tuple(tokens))

    def resolve(self, count: int) -> tuple[int, ...]:
        """Return the selected indices for a store holding ``count`` fields."""
        if self.indices is None:
            return tuple(range(count))
        return self.indices
