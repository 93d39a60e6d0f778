"""EventSchema value object.

Describes one event type a topic accepts. The schema document is stored
as declared and is not enforced when events are written.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, eq=True)
class EventSchema:
    """Declared event type and its JSON schema document.

    Attributes:
        event_type: Name of the event type (e.g. "Deposit").
        schema: JSON schema document, frozen as a read-only mapping.
    """

    event_type: str
    schema: Mapping[str, Any]

    def __post_init__(self) -> None:
        if isinstance(self.schema, MappingProxyType):
            return
        if not isinstance(self.schema, Mapping):
            raise TypeError(
                f"EventSchema schema must be a mapping, got {type(self.schema).__name__}"
            )
        object.__setattr__(self, "schema", MappingProxyType(dict(self.schema)))

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase wire form."""
        return {"eventType": self.event_type, "schema": dict(self.schema)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EventSchema:
        """Rebuild from the camelCase wire form.

        Raises:
            KeyError: If eventType is missing.
            TypeError: If the schema is not a JSON object.
        """
        schema = data.get("schema")
        return cls(
            event_type=str(data["eventType"]),
            schema={} if schema is None else schema,
        )
