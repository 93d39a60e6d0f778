"""Object store port definition.

Defines the storage primitives the data plane is built on: one container
per topic, immutable objects addressed by key. Infrastructure adapters
(Azure Blob Storage, the in-memory stub) implement this protocol.

There is no delete primitive: event objects are append-only.

Exceptions:
- StorageError (and subclasses): for any transport, auth or server failure
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator


class ObjectStoreProtocol(ABC):
    """Abstract protocol for container/object storage.

    Every method is a network call in production implementations and
    suspends the calling task for its duration.
    """

    @abstractmethod
    async def container_exists(self, container: str) -> bool:
        """Check whether a container exists.

        Raises:
            StorageError: For storage-related failures.
        """
        ...

    @abstractmethod
    async def create_container_if_not_exists(self, container: str) -> bool:
        """Create a container unless it already exists.

        Returns:
            True if the container was created, False if it already existed.

        Raises:
            StorageError: For storage-related failures.
        """
        ...

    @abstractmethod
    async def upload(
        self,
        container: str,
        name: str,
        data: bytes,
        *,
        overwrite: bool = False,
    ) -> None:
        """Upload an object.

        Args:
            container: Target container (must exist).
            name: Object key.
            data: Object body.
            overwrite: Whether an existing object may be replaced.

        Raises:
            ObjectAlreadyExistsError: If the key exists and overwrite is False.
            StorageError: For storage-related failures.
        """
        ...

    @abstractmethod
    def list_object_names(self, container: str) -> AsyncIterator[str]:
        """List object keys in a container, in lexicographic order.

        Raises:
            StorageError: For storage-related failures.
        """
        ...

    @abstractmethod
    async def download(self, container: str, name: str) -> bytes:
        """Download an object body.

        Raises:
            StorageError: For storage-related failures, including a missing
                object.
        """
        ...

    async def aclose(self) -> None:
        """Release any network resources held by the store."""
        return None
