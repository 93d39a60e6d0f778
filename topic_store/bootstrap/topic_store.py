"""Composition root for a Topic Store process.

Builds the object store, topic directory, clock, publisher, reader and
catalog once and hands them out through a TopicStoreContainer. The topic
directory is created here and shared by handle; no component keeps it in
module-level state.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from topic_store.application.ports.object_store import ObjectStoreProtocol
from topic_store.application.ports.time_authority import TimeAuthorityProtocol
from topic_store.application.services.configuration_replay_service import (
    ConfigurationReplayService,
)
from topic_store.application.services.topic_catalog_service import TopicCatalog
from topic_store.application.services.topic_created_handler import (
    TopicCreatedEventHandler,
)
from topic_store.config.topic_store_config import BACKEND_MEMORY, TopicStoreConfig
from topic_store.infrastructure.adapters.events import (
    BlobEventPublisher,
    BlobEventReader,
    EventJsonCodec,
)
from topic_store.infrastructure.adapters.in_memory_topic_directory import (
    InMemoryTopicDirectory,
)
from topic_store.infrastructure.adapters.storage import AzureBlobObjectStore
from topic_store.infrastructure.adapters.system_time_authority import (
    SystemTimeAuthority,
)
from topic_store.infrastructure.observability import get_logger_for_service
from topic_store.infrastructure.stubs.object_store_stub import ObjectStoreStub


@dataclass
class TopicStoreContainer:
    """Wired Topic Store components.

    Attributes:
        config: Configuration the container was built from.
        object_store: Backing object store.
        directory: The topic directory shared by the catalog.
        time_authority: Clock used for creation times and object keys.
        publisher: Data-plane writer.
        reader: Data-plane reader.
        catalog: Control-plane catalog.
        replay_service: Rebuilds the directory from "_configuration".
    """

    config: TopicStoreConfig
    object_store: ObjectStoreProtocol
    directory: InMemoryTopicDirectory
    time_authority: TimeAuthorityProtocol
    publisher: BlobEventPublisher
    reader: BlobEventReader
    catalog: TopicCatalog
    replay_service: ConfigurationReplayService

    async def aclose(self) -> None:
        """Release the object store's network resources."""
        await self.object_store.aclose()


def create_object_store(config: TopicStoreConfig) -> ObjectStoreProtocol:
    """Create the object store selected by ``config.backend``."""
    if config.backend == BACKEND_MEMORY:
        return ObjectStoreStub()
    return AzureBlobObjectStore.from_connection_string(config.connection_string)


def build_topic_store(
    config: TopicStoreConfig,
    *,
    object_store: ObjectStoreProtocol | None = None,
    time_authority: TimeAuthorityProtocol | None = None,
) -> TopicStoreContainer:
    """Wire all Topic Store components.

    Args:
        config: Process configuration.
        object_store: Override for the backing store (testing).
        time_authority: Override for the clock (testing).

    Returns:
        A container holding the wired components.
    """
    store = object_store if object_store is not None else create_object_store(config)
    clock = time_authority if time_authority is not None else SystemTimeAuthority()
    codec = EventJsonCodec()
    directory = InMemoryTopicDirectory()

    publisher = BlobEventPublisher(store, clock, codec)
    reader = BlobEventReader(store, codec)
    catalog = TopicCatalog(directory, publisher, clock)
    replay_service = ConfigurationReplayService(
        reader, TopicCreatedEventHandler(directory)
    )

    return TopicStoreContainer(
        config=config,
        object_store=store,
        directory=directory,
        time_authority=clock,
        publisher=publisher,
        reader=reader,
        catalog=catalog,
        replay_service=replay_service,
    )


@asynccontextmanager
async def open_topic_store(
    config: TopicStoreConfig,
    *,
    object_store: ObjectStoreProtocol | None = None,
    time_authority: TimeAuthorityProtocol | None = None,
) -> AsyncIterator[TopicStoreContainer]:
    """Build a container, optionally rebuild the catalog, and close on exit.

    Usage:
        async with open_topic_store(TopicStoreConfig.from_environment()) as store:
            await store.catalog.create_topic("payments", "Payments", schemas)
    """
    container = build_topic_store(
        config, object_store=object_store, time_authority=time_authority
    )
    log = get_logger_for_service("TopicStore", component="bootstrap").bind(
        backend=config.backend
    )
    try:
        if config.rebuild_catalog_on_startup:
            restored = await container.replay_service.rebuild()
            log.info("topic_store_opened", catalog_rebuilt=True, topics=restored)
        else:
            log.info("topic_store_opened", catalog_rebuilt=False)
        yield container
    finally:
        await container.aclose()
        log.info("topic_store_closed")
