"""Event publisher over object storage (data-plane write).

Each publish appends one immutable object to the topic's container:
1. Ensure the container (lowercased topic name) exists; idempotent
2. Serialize the event to indented camelCase JSON
3. Key it ``{yyyy}/{MM}/{dd}/{HH}/{mm}/{uuid}.json`` from the time authority
4. Upload with overwrite disabled

There is no internal retry. Failures are logged and re-raised; the caller
owns retry and backoff.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import uuid4

from topic_store.application.ports.event_publisher import EventPublisherProtocol
from topic_store.infrastructure.adapters.events.event_json_codec import EventJsonCodec
from topic_store.infrastructure.adapters.events.naming import (
    build_object_name,
    container_name_for,
)
from topic_store.infrastructure.observability import get_logger_for_service

if TYPE_CHECKING:
    from topic_store.application.ports.object_store import ObjectStoreProtocol
    from topic_store.application.ports.time_authority import TimeAuthorityProtocol


class BlobEventPublisher(EventPublisherProtocol):
    """Appends events as new objects under per-topic containers.

    Attributes:
        _store: Object store holding topic containers.
        _time: Time authority used for object key prefixes.
        _codec: Event serializer.
    """

    def __init__(
        self,
        object_store: ObjectStoreProtocol,
        time_authority: TimeAuthorityProtocol,
        codec: EventJsonCodec | None = None,
    ) -> None:
        """Initialize the publisher.

        Args:
            object_store: Backing object store.
            time_authority: Clock for object key prefixes.
            codec: Optional serializer (defaults to EventJsonCodec).
        """
        self._store = object_store
        self._time = time_authority
        self._codec = codec or EventJsonCodec()
        self._log = get_logger_for_service("BlobEventPublisher", component="data_plane")

    async def publish(self, topic_name: str, event: Any) -> str:
        """Append an event to a topic.

        Args:
            topic_name: Topic to append to.
            event: Event to serialize.

        Returns:
            The storage key of the written object.

        Raises:
            ObjectAlreadyExistsError: If the generated key already exists.
            StorageError: For any other storage failure.
            TypeError: If the event cannot be serialized.
        """
        container = container_name_for(topic_name)
        event_id = str(uuid4())
        log = self._log.bind(
            topic_name=topic_name,
            container=container,
            event_type=type(event).__name__,
        )

        try:
            await self._store.create_container_if_not_exists(container)
            body = self._codec.encode(event)
            object_name = build_object_name(self._time.utcnow(), event_id)
            await self._store.upload(container, object_name, body, overwrite=False)
        except Exception as e:
            log.error("event_publish_failed", error=str(e), exc_info=True)
            raise

        log.info("event_published", event_id=event_id, object_name=object_name)
        return object_name
