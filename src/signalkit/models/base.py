"""Shared pydantic base for models that travel over the wire."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base model serialized with the browser client's camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary keyed by camelCase aliases."""
        return self.model_dump(by_alias=True, mode="json")
