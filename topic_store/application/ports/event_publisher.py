"""Event publisher port definition.

The write side of the data plane: append one serialized event as a new
immutable object under the topic's container.
"""

from __future__ import annotations

from typing import Any, Protocol


class EventPublisherProtocol(Protocol):
    """Protocol for appending events to a topic."""

    async def publish(self, topic_name: str, event: Any) -> str:
        """Append an event to a topic.

        Args:
            topic_name: Topic to append to. Its container name is the
                lowercased topic name.
            event: The event to serialize (mapping, dataclass, or
                pydantic model).

        Returns:
            The storage key of the written object.

        Raises:
            StorageError: If the write fails. Not retried.
        """
        ...
