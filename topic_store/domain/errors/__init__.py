"""Domain errors for Topic Store.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from TopicStoreError.
"""

from topic_store.domain.errors.storage import (
    ContainerNotFoundError,
    ObjectAlreadyExistsError,
    StorageConnectionError,
    StorageError,
)
from topic_store.domain.errors.topic import (
    DuplicateTopicError,
    NotFoundError,
    ValidationError,
)

__all__: list[str] = [
    "ContainerNotFoundError",
    "DuplicateTopicError",
    "NotFoundError",
    "ObjectAlreadyExistsError",
    "StorageConnectionError",
    "StorageError",
    "ValidationError",
]
