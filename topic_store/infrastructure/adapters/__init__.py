"""Infrastructure adapters for Topic Store."""

from topic_store.infrastructure.adapters.in_memory_topic_directory import (
    InMemoryTopicDirectory,
)
from topic_store.infrastructure.adapters.system_time_authority import (
    SystemTimeAuthority,
)

__all__: list[str] = ["InMemoryTopicDirectory", "SystemTimeAuthority"]
