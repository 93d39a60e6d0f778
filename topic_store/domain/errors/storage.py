"""Object storage errors for Topic Store.

These exceptions are raised by ObjectStoreProtocol implementations when
the backing store fails. Adapters translate provider-specific exceptions
into this hierarchy and chain the original cause.

On the write path a StorageError reaches the caller, which owns any
retry policy. On the read path per-item storage errors are isolated by
the event reader and never abort a replay.
"""

from topic_store.domain.exceptions import TopicStoreError


class StorageError(TopicStoreError):
    """Base exception for object storage operations.

    Covers transport, authentication and server failures.

    Usage:
        raise StorageError("Failed to upload object: server busy")
    """

    pass


class StorageConnectionError(StorageError):
    """Raised when the object store cannot be reached."""

    pass


class ContainerNotFoundError(StorageError):
    """Raised when an operation targets a container that does not exist.

    Attributes:
        container: Name of the missing container.
    """

    def __init__(self, container: str) -> None:
        self.container = container
        super().__init__(f"Container '{container}' does not exist")


class ObjectAlreadyExistsError(StorageError):
    """Raised when an overwrite-disabled upload hits an existing object.

    Objects are never overwritten, so a name collision surfaces as a
    write failure instead of silently replacing stored data.

    Attributes:
        container: Container holding the existing object.
        name: Key of the existing object.
    """

    def __init__(self, container: str, name: str) -> None:
        self.container = container
        self.name = name
        super().__init__(f"Object '{name}' already exists in container '{container}'")
