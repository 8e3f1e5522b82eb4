"""Plain-data snapshots of result objects.

These models validate dictionaries produced by ``Result.to_dict()`` and
``ValueResult.to_dict()`` (or by any serializer that wrote the same keys)
before they are replayed into a live result.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResultSnapshot(BaseModel):
    """Exported fields of a Result.

    The derived ``failed`` key is accepted but ignored on import.
    """

    model_config = ConfigDict(extra="ignore")

    succeeded: bool = Field(default=True, description="Outcome flag")
    errors: list[str | None] = Field(default_factory=list)
    successes: list[str | None] = Field(default_factory=list)
    messages: list[str | None] = Field(default_factory=list)


class ValueResultSnapshot(ResultSnapshot):
    """Exported fields of a ValueResult. ``has_value`` is derived from ``value``."""

    value: Any = Field(default=None, description="Payload, absent when None")
