"""Topic Catalog - the control plane for topic metadata.

The catalog owns topic creation and lookup. Topic metadata lives in an
explicit TopicDirectoryProtocol handed in by the composition root; every
successful creation is also recorded as a TopicCreated event in the
reserved configuration topic.

Ordering on create:
1. Topic.create() validates the request (ValidationError propagates)
2. directory.add_if_absent() registers the name atomically
   (DuplicateTopicError on conflict, nothing published)
3. publisher.publish() appends TopicCreated to "_configuration"

Registration happens before the publish. If the publish fails the topic
stays registered while the lifecycle log lacks its record; the storage
error is logged and re-raised to the caller, which owns retry.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from topic_store.domain.entities.topic import Topic
from topic_store.domain.errors.topic import DuplicateTopicError, NotFoundError
from topic_store.domain.events.topic_created import (
    CONFIGURATION_TOPIC,
    TOPIC_CREATED_EVENT_TYPE,
    TopicCreated,
)
from topic_store.infrastructure.observability import get_logger_for_service

if TYPE_CHECKING:
    from topic_store.application.ports.event_publisher import EventPublisherProtocol
    from topic_store.application.ports.time_authority import TimeAuthorityProtocol
    from topic_store.application.ports.topic_directory import TopicDirectoryProtocol
    from topic_store.domain.events.event_schema import EventSchema


class TopicCatalog:
    """Concurrency-safe name -> Topic catalog.

    Lookups are case-sensitive against the registered name, independent of
    the lowercased storage container name.

    Attributes:
        _directory: The topic directory (shared handle).
        _publisher: Publisher used for lifecycle events.
        _time: Time authority supplying creation timestamps.
    """

    def __init__(
        self,
        directory: TopicDirectoryProtocol,
        publisher: EventPublisherProtocol,
        time_authority: TimeAuthorityProtocol,
    ) -> None:
        """Initialize the catalog.

        Args:
            directory: Directory holding registered topics.
            publisher: Publisher for TopicCreated events.
            time_authority: Source of creation timestamps.
        """
        self._directory = directory
        self._publisher = publisher
        self._time = time_authority
        self._log = get_logger_for_service("TopicCatalog", component="control_plane")

    @property
    def topics(self) -> Mapping[str, Topic]:
        """Read-only snapshot of all registered topics."""
        return self._directory.snapshot()

    async def create_topic(
        self,
        name: str,
        description: str,
        event_schemas: Sequence[EventSchema],
    ) -> Topic:
        """Create and register a topic, then record its creation.

        Args:
            name: Topic name (case preserved).
            description: Topic description.
            event_schemas: Event schemas the topic declares.

        Returns:
            The registered Topic.

        Raises:
            ValidationError: If the request violates a Topic invariant.
            DuplicateTopicError: If the name is already registered.
            StorageError: If the lifecycle event could not be written. The
                topic remains registered in this case.
        """
        topic = Topic.create(
            name,
            description,
            event_schemas,
            created_at=self._time.utcnow(),
        )

        if not self._directory.add_if_absent(topic):
            self._log.warning("topic_create_rejected_duplicate", topic_name=name)
            raise DuplicateTopicError(name)

        log = self._log.bind(topic_name=topic.name)
        log.info("topic_registered", version=topic.version)

        lifecycle_event = TopicCreated.from_topic(topic)
        try:
            await self._publisher.publish(CONFIGURATION_TOPIC, lifecycle_event)
        except Exception as e:
            log.error(
                "topic_lifecycle_publish_failed",
                event_type=TOPIC_CREATED_EVENT_TYPE,
                configuration_topic=CONFIGURATION_TOPIC,
                error=str(e),
                message="Topic is registered but its creation is missing from the configuration log",
            )
            raise

        log.info(
            "topic_created",
            event_type=TOPIC_CREATED_EVENT_TYPE,
            schema_count=len(topic.event_schemas),
        )
        return topic

    def get_topic(self, name: str) -> Topic:
        """Get a registered topic.

        Raises:
            NotFoundError: If no topic is registered under ``name``.
        """
        topic = self._directory.get(name)
        if topic is None:
            raise NotFoundError(name)
        return topic

    def topic_exists(self, name: str) -> bool:
        """Return whether a topic is registered under ``name``."""
        return self._directory.contains(name)

    def try_get_topic(self, name: str) -> tuple[Topic | None, bool]:
        """Look up a topic without raising.

        Returns:
            (topic, True) if registered, otherwise (None, False).
        """
        topic = self._directory.get(name)
        return topic, topic is not None
