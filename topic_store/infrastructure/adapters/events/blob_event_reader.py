"""Event reader over object storage (data-plane read).

Replays a topic by listing its container and downloading every object.
Each object becomes a ReadOutcome: KEPT with the decoded event, or
SKIPPED when the download or decode fails. One corrupt object never
aborts or truncates the rest of the replay.

- A topic without a container replays as an empty sequence.
- Every call re-lists storage; nothing is cached.
- Cancellation is not intercepted. A cancelled consumer keeps the events
  already produced and no partially read item is yielded.
- Failures to check or list the container itself propagate as
  StorageError; only per-object failures are isolated.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from typing import TYPE_CHECKING, Any, TypeVar

from topic_store.application.ports.event_reader import EventReaderProtocol
from topic_store.domain.models.read_outcome import ReadOutcome
from topic_store.infrastructure.adapters.events.event_json_codec import EventJsonCodec
from topic_store.infrastructure.adapters.events.naming import container_name_for
from topic_store.infrastructure.observability import get_logger_for_service

if TYPE_CHECKING:
    from topic_store.application.ports.object_store import ObjectStoreProtocol

T = TypeVar("T")


class BlobEventReader(EventReaderProtocol):
    """Lazily replays the events stored for a topic."""

    def __init__(
        self,
        object_store: ObjectStoreProtocol,
        codec: EventJsonCodec | None = None,
    ) -> None:
        self._store = object_store
        self._codec = codec or EventJsonCodec()
        self._log = get_logger_for_service("BlobEventReader", component="data_plane")

    def read_outcomes(self, topic_name: str) -> AsyncIterator[ReadOutcome[Any]]:
        """Yield one outcome per stored object, in listing order."""
        return self._walk(topic_name, self._codec.decode, event_type="object")

    async def read(self, topic_name: str) -> AsyncIterator[Any]:
        """Yield every readable event as plain JSON values."""
        async for outcome in self.read_outcomes(topic_name):
            if outcome.is_kept:
                yield outcome.value

    async def read_as(self, topic_name: str, target: type[T]) -> AsyncIterator[T]:
        """Yield every readable event decoded into ``target``.

        Objects that do not fit ``target`` are skipped and logged.
        """
        outcomes = self._walk(
            topic_name,
            lambda data: self._codec.decode_as(data, target),
            event_type=getattr(target, "__name__", repr(target)),
        )
        async for outcome in outcomes:
            if outcome.is_kept:
                yield outcome.value

    async def _walk(
        self,
        topic_name: str,
        decode: Callable[[bytes], Any],
        *,
        event_type: str,
    ) -> AsyncIterator[ReadOutcome[Any]]:
        container = container_name_for(topic_name)
        log = self._log.bind(
            topic_name=topic_name,
            container=container,
            event_type=event_type,
        )

        if not await self._store.container_exists(container):
            log.warning("topic_container_missing")
            return

        kept = 0
        skipped = 0
        async for object_name in self._store.list_object_names(container):
            try:
                data = await self._store.download(container, object_name)
                value = decode(data)
            except Exception as e:
                skipped += 1
                log.error(
                    "event_read_skipped",
                    object_name=object_name,
                    error=str(e),
                    exc_info=True,
                )
                yield ReadOutcome.skipped(object_name, f"{type(e).__name__}: {e}")
                continue

            if value is None:
                skipped += 1
                log.error(
                    "event_read_skipped",
                    object_name=object_name,
                    error="event body is JSON null",
                )
                yield ReadOutcome.skipped(object_name, "event body is JSON null")
                continue

            kept += 1
            yield ReadOutcome.kept(object_name, value)

        log.debug("topic_replayed", events_kept=kept, events_skipped=skipped)
