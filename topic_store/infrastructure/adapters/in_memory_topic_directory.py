"""In-memory topic directory.

Process-local name -> Topic map. Names are case-sensitive. The map is
guarded by a threading lock, so insert-if-absent stays atomic for
coroutines on one event loop as well as for worker threads.

There is no cross-process exclusion: two processes, each with its own
directory, can both register the same name.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from topic_store.application.ports.topic_directory import TopicDirectoryProtocol

if TYPE_CHECKING:
    from topic_store.domain.entities.topic import Topic


class InMemoryTopicDirectory(TopicDirectoryProtocol):
    """Lock-guarded dictionary of registered topics."""

    def __init__(self) -> None:
        self._topics: dict[str, Topic] = {}
        self._lock = threading.Lock()

    def add_if_absent(self, topic: Topic) -> bool:
        with self._lock:
            if topic.name in self._topics:
                return False
            self._topics[topic.name] = topic
            return True

    def get(self, name: str) -> Topic | None:
        with self._lock:
            return self._topics.get(name)

    def contains(self, name: str) -> bool:
        with self._lock:
            return name in self._topics

    def snapshot(self) -> Mapping[str, Topic]:
        with self._lock:
            return MappingProxyType(dict(self._topics))

    def __len__(self) -> int:
        with self._lock:
            return len(self._topics)
