"""Domain entities for Topic Store."""

from topic_store.domain.entities.topic import MAX_TOPIC_NAME_LENGTH, Topic

__all__: list[str] = ["MAX_TOPIC_NAME_LENGTH", "Topic"]
