"""Configuration replay service.

Rebuilds the topic directory from the reserved configuration topic. The
catalog is in-memory only, so without a rebuild every restart starts
with an empty directory; this service is how a composition root opts in
to treating the lifecycle log as ground truth at startup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from topic_store.domain.errors.topic import ValidationError
from topic_store.domain.events.topic_created import CONFIGURATION_TOPIC, TopicCreated
from topic_store.infrastructure.observability import get_logger_for_service

if TYPE_CHECKING:
    from topic_store.application.ports.event_reader import EventReaderProtocol
    from topic_store.application.services.topic_created_handler import (
        TopicCreatedEventHandler,
    )


class ConfigurationReplayService:
    """Replays "_configuration" into the topic directory."""

    def __init__(
        self,
        reader: EventReaderProtocol,
        handler: TopicCreatedEventHandler,
    ) -> None:
        self._reader = reader
        self._handler = handler
        self._log = get_logger_for_service(
            "ConfigurationReplayService", component="control_plane"
        )

    async def rebuild(self) -> int:
        """Apply every readable TopicCreated record.

        Unreadable records are skipped by the reader. Records that fail
        topic validation and names registered more than once are logged
        and skipped.

        Returns:
            Number of topics registered by this rebuild.

        Raises:
            StorageError: If the configuration container cannot be listed.
        """
        restored = 0
        seen = 0
        async for event in self._reader.read_as(CONFIGURATION_TOPIC, TopicCreated):
            seen += 1
            try:
                if await self._handler.handle(event):
                    restored += 1
            except ValidationError:
                continue

        self._log.info(
            "catalog_rebuilt",
            configuration_topic=CONFIGURATION_TOPIC,
            records_read=seen,
            topics_restored=restored,
        )
        return restored
