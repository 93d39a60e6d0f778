"""Event publisher and reader adapters over object storage."""

from topic_store.infrastructure.adapters.events.blob_event_publisher import (
    BlobEventPublisher,
)
from topic_store.infrastructure.adapters.events.blob_event_reader import (
    BlobEventReader,
)
from topic_store.infrastructure.adapters.events.event_json_codec import EventJsonCodec
from topic_store.infrastructure.adapters.events.naming import (
    build_object_name,
    container_name_for,
)

__all__: list[str] = [
    "BlobEventPublisher",
    "BlobEventReader",
    "EventJsonCodec",
    "build_object_name",
    "container_name_for",
]
