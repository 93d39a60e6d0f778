"""Handler applying TopicCreated lifecycle events to the directory.

Used when rebuilding the catalog from the configuration topic. Applying a
lifecycle event registers the topic directly in the directory and never
publishes, so replaying the log does not append to it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from topic_store.domain.entities.topic import Topic
from topic_store.domain.errors.topic import ValidationError
from topic_store.infrastructure.observability import get_logger_for_service

if TYPE_CHECKING:
    from topic_store.application.ports.topic_directory import TopicDirectoryProtocol
    from topic_store.domain.events.topic_created import TopicCreated


class TopicCreatedEventHandler:
    """Registers topics described by TopicCreated events."""

    def __init__(self, directory: TopicDirectoryProtocol) -> None:
        self._directory = directory
        self._log = get_logger_for_service(
            "TopicCreatedEventHandler", component="control_plane"
        )

    async def handle(self, event: TopicCreated) -> bool:
        """Apply one lifecycle event.

        The recorded creation time and version are kept as-is.

        Args:
            event: The lifecycle record to apply.

        Returns:
            True if the topic was registered, False if the name was
            already present.

        Raises:
            ValidationError: If the recorded topic violates an invariant.
        """
        log = self._log.bind(topic_name=event.topic_name)
        try:
            topic = Topic(
                name=event.topic_name,
                description=event.description,
                created_at=event.created_at,
                event_schemas=event.event_schemas,
                version=event.version,
            )
        except ValidationError as e:
            log.error("topic_created_event_invalid", field=e.field, error=str(e))
            raise

        if not self._directory.add_if_absent(topic):
            log.warning("topic_already_registered")
            return False

        log.info("topic_created_event_applied", version=topic.version)
        return True
