"""TopicCreated lifecycle event.

The durable record of a topic-creation fact. One TopicCreated object is
appended to the reserved configuration topic every time the catalog
registers a new topic.

Wire form (camelCase, as stored in object storage):
    {
        "topicName": "payments",
        "description": "Payment events",
        "version": 1,
        "createdAt": "2026-01-01T00:00:00+00:00",
        "eventSchemas": [{"eventType": "Deposit", "schema": {}}]
    }
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from topic_store.domain.events.event_schema import EventSchema

if TYPE_CHECKING:
    from topic_store.domain.entities.topic import Topic

# Reserved topic that holds topic-lifecycle events
CONFIGURATION_TOPIC = "_configuration"

# Event type constant used in log records
TOPIC_CREATED_EVENT_TYPE = "topic_created"


@dataclass(frozen=True, eq=True)
class TopicCreated:
    """Payload recorded when a topic is created.

    Attributes:
        topic_name: Name of the new topic, with its original casing.
        description: Topic description.
        version: Topic version at creation (always 1 today).
        created_at: When the topic was created (UTC).
        event_schemas: Declared event schemas, in declaration order.
    """

    topic_name: str
    description: str
    created_at: datetime
    event_schemas: tuple[EventSchema, ...]
    version: int = field(default=1)

    def __post_init__(self) -> None:
        if not isinstance(self.event_schemas, tuple):
            object.__setattr__(self, "event_schemas", tuple(self.event_schemas))

    @classmethod
    def from_topic(cls, topic: Topic) -> TopicCreated:
        """Build the lifecycle record for a freshly created topic."""
        return cls(
            topic_name=topic.name,
            description=topic.description,
            version=topic.version,
            created_at=topic.created_at,
            event_schemas=topic.event_schemas,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase wire form.

        Returns:
            Dictionary representation suitable for JSON serialization.
        """
        return {
            "topicName": self.topic_name,
            "description": self.description,
            "version": self.version,
            "createdAt": self.created_at.isoformat(),
            "eventSchemas": [schema.to_dict() for schema in self.event_schemas],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TopicCreated:
        """Rebuild from the camelCase wire form.

        Args:
            data: Decoded JSON object.

        Returns:
            The reconstructed TopicCreated record.

        Raises:
            KeyError: If a required property is missing.
            TypeError: If a property has the wrong shape.
            ValueError: If createdAt is not an ISO 8601 timestamp.
        """
        created_at = datetime.fromisoformat(str(data["createdAt"]))
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        raw_schemas = data["eventSchemas"]
        if not isinstance(raw_schemas, list):
            raise TypeError("eventSchemas must be a list")

        return cls(
            topic_name=str(data["topicName"]),
            description=str(data["description"]),
            version=int(data.get("version", 1)),
            created_at=created_at,
            event_schemas=tuple(EventSchema.from_dict(item) for item in raw_schemas),
        )
