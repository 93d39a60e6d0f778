"""Domain events and event model values for Topic Store."""

from topic_store.domain.events.event_schema import EventSchema
from topic_store.domain.events.topic_created import (
    CONFIGURATION_TOPIC,
    TOPIC_CREATED_EVENT_TYPE,
    TopicCreated,
)

__all__: list[str] = [
    "CONFIGURATION_TOPIC",
    "TOPIC_CREATED_EVENT_TYPE",
    "EventSchema",
    "TopicCreated",
]
