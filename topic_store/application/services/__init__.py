"""Application services for Topic Store."""

from topic_store.application.services.configuration_replay_service import (
    ConfigurationReplayService,
)
from topic_store.application.services.topic_catalog_service import TopicCatalog
from topic_store.application.services.topic_created_handler import (
    TopicCreatedEventHandler,
)

__all__: list[str] = [
    "ConfigurationReplayService",
    "TopicCatalog",
    "TopicCreatedEventHandler",
]
