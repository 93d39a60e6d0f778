"""Topic aggregate.

A Topic is a named, independently durable event log plus the event
schemas it declares. Topics are create-only: the entity is validated once
at construction and never mutated afterwards.

Invariants:
- name is non-empty (not whitespace-only) and at most 255 characters
- description is non-empty (not whitespace-only)
- event_schemas holds at least one EventSchema
- version is 1 at creation
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from topic_store.domain.errors.topic import ValidationError
from topic_store.domain.events.event_schema import EventSchema

MAX_TOPIC_NAME_LENGTH = 255

INITIAL_TOPIC_VERSION = 1


@dataclass(frozen=True, eq=True)
class Topic:
    """Immutable topic metadata.

    Use Topic.create() to build new topics. Direct construction runs the
    same validation, so no invalid Topic can exist.

    Attributes:
        name: Topic name, case preserved (storage container names are
            lowercased separately).
        description: Human-readable description.
        created_at: Creation time (UTC).
        event_schemas: Declared event schemas, in declaration order.
        version: Topic version (1 at creation).

    Example:
        >>> from datetime import datetime, timezone
        >>> topic = Topic.create(
        ...     name="payments",
        ...     description="Payment events",
        ...     event_schemas=[EventSchema(event_type="Deposit", schema={})],
        ...     created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        ... )
        >>> topic.version
        1
    """

    name: str
    description: str
    created_at: datetime
    event_schemas: tuple[EventSchema, ...]
    version: int = field(default=INITIAL_TOPIC_VERSION)

    def __post_init__(self) -> None:
        """Validate fields and freeze the schema list.

        Raises:
            ValidationError: If any invariant is violated.
        """
        self._validate_name()
        self._validate_description()
        self._validate_event_schemas()

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        event_schemas: Sequence[EventSchema],
        *,
        created_at: datetime,
    ) -> Topic:
        """Create a new topic at version 1.

        Args:
            name: Topic name.
            description: Topic description.
            event_schemas: Event schemas the topic declares.
            created_at: Creation timestamp, supplied by the time authority.

        Returns:
            A validated, immutable Topic.

        Raises:
            ValidationError: If any invariant is violated. The error's
                ``field`` attribute names the offending field.
        """
        return cls(
            name=name,
            description=description,
            created_at=created_at,
            event_schemas=event_schemas,  # type: ignore[arg-type]
            version=INITIAL_TOPIC_VERSION,
        )

    def _validate_name(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("name", "topic name cannot be empty")
        if len(self.name) > MAX_TOPIC_NAME_LENGTH:
            raise ValidationError(
                "name",
                f"topic name cannot exceed {MAX_TOPIC_NAME_LENGTH} characters, "
                f"got {len(self.name)}",
            )

    def _validate_description(self) -> None:
        if not isinstance(self.description, str) or not self.description.strip():
            raise ValidationError("description", "topic description cannot be empty")

    def _validate_event_schemas(self) -> None:
        schemas = self.event_schemas
        if schemas is None or isinstance(schemas, (str, bytes)):
            raise ValidationError(
                "event_schemas", "topic must have at least one event schema"
            )
        try:
            schemas = tuple(schemas)
        except TypeError as e:
            raise ValidationError(
                "event_schemas", "event schemas must be a sequence"
            ) from e
        if not schemas:
            raise ValidationError(
                "event_schemas", "topic must have at least one event schema"
            )
        for schema in schemas:
            if not isinstance(schema, EventSchema):
                raise ValidationError(
                    "event_schemas",
                    f"expected EventSchema entries, got {type(schema).__name__}",
                )
        object.__setattr__(self, "event_schemas", schemas)
