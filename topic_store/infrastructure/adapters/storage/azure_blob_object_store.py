"""Azure Blob Storage implementation of ObjectStoreProtocol.

Maps the object store primitives onto the async Azure SDK:
- container_exists                -> ContainerClient.exists()
- create_container_if_not_exists  -> ContainerClient.create_container()
- upload                          -> ContainerClient.upload_blob(overwrite=...)
- list_object_names               -> ContainerClient.list_blobs()
- download                        -> ContainerClient.download_blob().readall()

Azure exceptions are translated into the domain StorageError hierarchy
with the original exception chained as the cause.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from azure.core.exceptions import (
    AzureError,
    ResourceExistsError,
    ResourceNotFoundError,
    ServiceRequestError,
)
from azure.storage.blob import ContentSettings
from azure.storage.blob.aio import BlobServiceClient

from topic_store.application.ports.object_store import ObjectStoreProtocol
from topic_store.domain.errors.storage import (
    ContainerNotFoundError,
    ObjectAlreadyExistsError,
    StorageConnectionError,
    StorageError,
)
from topic_store.infrastructure.observability import get_logger_for_service

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def _translate(
    error: AzureError,
    operation: str,
    container: str,
    name: str | None = None,
) -> StorageError:
    target = f"{container}/{name}" if name else container
    if isinstance(error, ServiceRequestError):
        return StorageConnectionError(
            f"Failed to reach blob storage during {operation} on '{target}': {error}"
        )
    return StorageError(f"Blob storage {operation} failed on '{target}': {error}")


class AzureBlobObjectStore(ObjectStoreProtocol):
    """Object store backed by an async BlobServiceClient.

    The store owns the client: aclose() closes it.

    Example:
        >>> store = AzureBlobObjectStore.from_connection_string(conn_str)
        >>> await store.create_container_if_not_exists("payments")
        >>> await store.aclose()
    """

    def __init__(self, service_client: BlobServiceClient) -> None:
        self._client = service_client
        self._log = get_logger_for_service("AzureBlobObjectStore", component="storage")

    @classmethod
    def from_connection_string(cls, connection_string: str) -> AzureBlobObjectStore:
        """Create a store from an Azure Storage connection string."""
        return cls(BlobServiceClient.from_connection_string(connection_string))

    async def container_exists(self, container: str) -> bool:
        try:
            return await self._client.get_container_client(container).exists()
        except AzureError as e:
            raise _translate(e, "container_exists", container) from e

    async def create_container_if_not_exists(self, container: str) -> bool:
        try:
            await self._client.get_container_client(container).create_container()
        except ResourceExistsError:
            return False
        except AzureError as e:
            raise _translate(e, "create_container", container) from e

        self._log.info("container_created", container=container)
        return True

    async def upload(
        self,
        container: str,
        name: str,
        data: bytes,
        *,
        overwrite: bool = False,
    ) -> None:
        container_client = self._client.get_container_client(container)
        try:
            await container_client.upload_blob(
                name=name,
                data=data,
                overwrite=overwrite,
                content_settings=ContentSettings(content_type=JSON_CONTENT_TYPE),
            )
        except ResourceExistsError as e:
            raise ObjectAlreadyExistsError(container, name) from e
        except ResourceNotFoundError as e:
            raise ContainerNotFoundError(container) from e
        except AzureError as e:
            raise _translate(e, "upload", container, name) from e

    async def list_object_names(self, container: str) -> AsyncIterator[str]:
        container_client = self._client.get_container_client(container)
        try:
            async for blob in container_client.list_blobs():
                yield blob.name
        except ResourceNotFoundError as e:
            raise ContainerNotFoundError(container) from e
        except AzureError as e:
            raise _translate(e, "list_blobs", container) from e

    async def download(self, container: str, name: str) -> bytes:
        container_client = self._client.get_container_client(container)
        try:
            downloader = await container_client.download_blob(name)
            return await downloader.readall()
        except AzureError as e:
            raise _translate(e, "download", container, name) from e

    async def aclose(self) -> None:
        await self._client.close()
