"""In-memory object store stub for development and testing.

Implements ObjectStoreProtocol over nested dictionaries
(container -> key -> body). Every operation yields to the event loop
once, so concurrent callers interleave the way they would against real
storage.

Test controls:
- put_raw(): seed arbitrary bytes (e.g. corrupt JSON) under a key
- fail_uploads_with(): make every following upload raise an error
- fail_downloads_of(): make downloads of one key raise an error
- fail_container_checks_with(): make existence checks, container creation
  and listing raise
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator

from topic_store.application.ports.object_store import ObjectStoreProtocol
from topic_store.domain.errors.storage import (
    ContainerNotFoundError,
    ObjectAlreadyExistsError,
    StorageError,
)


class ObjectStoreStub(ObjectStoreProtocol):
    """In-memory object store.

    Attributes:
        _containers: Map of container name to its objects.
        upload_count: Number of successful uploads (for assertions).
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._containers: dict[str, dict[str, bytes]] = {}
        self._upload_error: StorageError | None = None
        self._download_errors: dict[tuple[str, str], StorageError] = {}
        self._container_error: StorageError | None = None
        self.upload_count = 0
        self.closed = False

    async def container_exists(self, container: str) -> bool:
        await asyncio.sleep(0)
        if self._container_error is not None:
            raise self._container_error
        return container in self._containers

    async def create_container_if_not_exists(self, container: str) -> bool:
        await asyncio.sleep(0)
        if self._container_error is not None:
            raise self._container_error
        if container in self._containers:
            return False
        self._containers[container] = {}
        return True

    async def upload(
        self,
        container: str,
        name: str,
        data: bytes,
        *,
        overwrite: bool = False,
    ) -> None:
        await asyncio.sleep(0)
        if self._upload_error is not None:
            raise self._upload_error
        objects = self._containers.get(container)
        if objects is None:
            raise ContainerNotFoundError(container)
        if name in objects and not overwrite:
            raise ObjectAlreadyExistsError(container, name)
        objects[name] = bytes(data)
        self.upload_count += 1

    async def list_object_names(self, container: str) -> AsyncIterator[str]:
        await asyncio.sleep(0)
        if self._container_error is not None:
            raise self._container_error
        objects = self._containers.get(container)
        if objects is None:
            raise ContainerNotFoundError(container)
        # Listing is a snapshot taken when enumeration starts
        for name in sorted(objects):
            yield name

    async def download(self, container: str, name: str) -> bytes:
        await asyncio.sleep(0)
        error = self._download_errors.get((container, name))
        if error is not None:
            raise error
        objects = self._containers.get(container)
        if objects is None:
            raise ContainerNotFoundError(container)
        if name not in objects:
            raise StorageError(f"Object '{name}' not found in container '{container}'")
        return objects[name]

    async def aclose(self) -> None:
        self.closed = True

    # =========================================================================
    # Test Helpers
    # =========================================================================

    def put_raw(self, container: str, name: str, data: bytes) -> None:
        """Store raw bytes under a key, creating the container if needed."""
        self._containers.setdefault(container, {})[name] = data

    def fail_uploads_with(self, error: StorageError | None) -> None:
        """Make every following upload raise ``error`` (None to stop)."""
        self._upload_error = error

    def fail_downloads_of(self, container: str, name: str, error: StorageError) -> None:
        """Make downloads of one object raise ``error``."""
        self._download_errors[(container, name)] = error

    def fail_container_checks_with(self, error: StorageError | None) -> None:
        """Make existence checks, creation and listing raise ``error``."""
        self._container_error = error

    def container_names(self) -> list[str]:
        """Return all container names, sorted."""
        return sorted(self._containers)

    def object_names(self, container: str) -> list[str]:
        """Return the keys stored in a container, sorted."""
        return sorted(self._containers.get(container, {}))

    def get_object(self, container: str, name: str) -> bytes:
        """Return a stored body (KeyError if absent)."""
        return self._containers[container][name]

    def clear(self) -> None:
        """Remove all containers and injected failures."""
        self._containers.clear()
        self._download_errors.clear()
        self._upload_error = None
        self._container_error = None
        self.upload_count = 0
