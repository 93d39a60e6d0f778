"""Application ports (abstract interfaces) for Topic Store."""

from topic_store.application.ports.event_publisher import EventPublisherProtocol
from topic_store.application.ports.event_reader import EventReaderProtocol
from topic_store.application.ports.object_store import ObjectStoreProtocol
from topic_store.application.ports.time_authority import TimeAuthorityProtocol
from topic_store.application.ports.topic_directory import TopicDirectoryProtocol

__all__: list[str] = [
    "EventPublisherProtocol",
    "EventReaderProtocol",
    "ObjectStoreProtocol",
    "TimeAuthorityProtocol",
    "TopicDirectoryProtocol",
]
