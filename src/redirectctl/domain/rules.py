"""Rule model and RuleSet contract.

A Rule maps a source domain (or regex pattern) to a destination domain.
The persisted shape uses the short keys ``src``, ``dest`` and ``regex``.

INVARIANT: The domain layer never mutates a RuleSet. Callers build a new
sequence and hand it to the store.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field


class Rule(BaseModel):
    """A single redirection rule."""

    model_config = {"frozen": True, "populate_by_name": True}

    source: str = Field(alias="src", min_length=1)
    destination: str = Field(alias="dest", min_length=1)
    is_regex: bool = Field(default=False, alias="regex")

    @classmethod
    def from_input(cls, source: str, destination: str, *, is_regex: bool = False) -> Rule:
        """Build the Rule a caller stores after validation (whitespace trimmed)."""
        return cls(source=source.strip(), destination=destination.strip(), is_regex=is_regex)

    def to_storage(self) -> dict[str, Any]:
        """Serialize to the persisted ``{src, dest, regex}`` shape."""
        return self.model_dump(by_alias=True)


# Ordered; position matters only for display and index-based deletion.
RuleSet = Sequence[Rule]
