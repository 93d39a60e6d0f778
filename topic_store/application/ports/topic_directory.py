"""Topic directory port definition.

The directory is the name -> Topic map behind the catalog. It is an
explicit object owned by the composition root and handed to the catalog;
nothing in the core keeps it in module-level state.

Keys are case-sensitive topic names.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from topic_store.domain.entities.topic import Topic


class TopicDirectoryProtocol(Protocol):
    """Protocol for the in-process topic directory.

    Implementations must guarantee that add_if_absent is atomic: among
    concurrent callers adding the same name exactly one succeeds.
    """

    def add_if_absent(self, topic: Topic) -> bool:
        """Insert a topic unless its name is already registered.

        Returns:
            True if inserted, False if the name was already taken (the
            directory is left unchanged).
        """
        ...

    def get(self, name: str) -> Topic | None:
        """Return the topic registered under ``name``, if any."""
        ...

    def contains(self, name: str) -> bool:
        """Return whether ``name`` is registered."""
        ...

    def snapshot(self) -> Mapping[str, Topic]:
        """Return a read-only copy of the directory."""
        ...

    def __len__(self) -> int: ...
