"""Event reader port definition.

The read side of the data plane: replay every stored event of a topic,
from the beginning, isolating unreadable objects.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from topic_store.domain.models.read_outcome import ReadOutcome

T = TypeVar("T")


class EventReaderProtocol(Protocol):
    """Protocol for replaying the events of a topic.

    Every call re-lists storage; results are never cached. A topic with no
    container yields an empty sequence rather than an error.
    """

    def read_outcomes(self, topic_name: str) -> AsyncIterator[ReadOutcome[Any]]:
        """Yield one KEPT or SKIPPED outcome per stored object."""
        ...

    def read(self, topic_name: str) -> AsyncIterator[Any]:
        """Yield decoded events, dropping unreadable objects."""
        ...

    def read_as(self, topic_name: str, target: type[T]) -> AsyncIterator[T]:
        """Yield events decoded into ``target``, dropping mismatches."""
        ...
