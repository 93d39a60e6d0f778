"""Object storage adapters."""

from topic_store.infrastructure.adapters.storage.azure_blob_object_store import (
    AzureBlobObjectStore,
)

__all__: list[str] = ["AzureBlobObjectStore"]
