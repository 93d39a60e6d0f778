"""Topic Store configuration.

Configuration for the storage backend, log output and catalog startup
behavior, with environment variable overrides.

Environment Variables:
- TOPIC_STORE_BACKEND: "azure" or "memory" (default: azure)
- AZURE_STORAGE_CONNECTION_STRING: Azure Storage connection string
  (default: the local Azurite emulator)
- TOPIC_STORE_ENVIRONMENT: "production" (JSON logs) or "development"
  (console logs) (default: production)
- TOPIC_STORE_REBUILD_CATALOG: rebuild the topic catalog from the
  "_configuration" topic at startup (default: false)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

BACKEND_AZURE = "azure"
BACKEND_MEMORY = "memory"
SUPPORTED_BACKENDS = frozenset({BACKEND_AZURE, BACKEND_MEMORY})
SUPPORTED_ENVIRONMENTS = frozenset({"production", "development"})

# Well-known development account of the Azurite storage emulator
AZURITE_CONNECTION_STRING = (
    "DefaultEndpointsProtocol=http;"
    "AccountName=devstoreaccount1;"
    "AccountKey=Eby8vdM02xNOcqFlqUwJPLlmEtlCDXJ1OUzFT50uSRZ6IFsuFq2UVErCz4I6tq/"
    "K1SZFPTOtr/KBHBeksoGMGw==;"
    "BlobEndpoint=http://127.0.0.1:10000/devstoreaccount1;"
)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_str_env(key: str, default: str) -> str:
    """Get string environment variable with default (blank counts as unset)."""
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or unrecognized.

    Returns:
        Parsed boolean value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class TopicStoreConfig:
    """Configuration for a Topic Store process.

    Attributes:
        backend: Object store backend ("azure" or "memory").
        connection_string: Azure Storage connection string (azure backend).
        environment: Log output mode ("production" or "development").
        rebuild_catalog_on_startup: Replay "_configuration" into the topic
            directory when the store is opened. Off by default: the
            catalog is in-memory and starts empty.
    """

    backend: str = BACKEND_AZURE
    connection_string: str = AZURITE_CONNECTION_STRING
    environment: str = "production"
    rebuild_catalog_on_startup: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.backend not in SUPPORTED_BACKENDS:
            raise ValueError(
                f"backend must be one of {sorted(SUPPORTED_BACKENDS)}, got {self.backend!r}"
            )
        if self.environment not in SUPPORTED_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(SUPPORTED_ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )
        if self.backend == BACKEND_AZURE and not self.connection_string.strip():
            raise ValueError("connection_string is required for the azure backend")

    @classmethod
    def from_environment(cls) -> TopicStoreConfig:
        """Create config from environment variables with defaults."""
        return cls(
            backend=_get_str_env("TOPIC_STORE_BACKEND", BACKEND_AZURE).lower(),
            connection_string=_get_str_env(
                "AZURE_STORAGE_CONNECTION_STRING", AZURITE_CONNECTION_STRING
            ),
            environment=_get_str_env("TOPIC_STORE_ENVIRONMENT", "production").lower(),
            rebuild_catalog_on_startup=_get_bool_env("TOPIC_STORE_REBUILD_CATALOG", False),
        )


# In-memory config for tests and local experiments
TEST_TOPIC_STORE_CONFIG = TopicStoreConfig(
    backend=BACKEND_MEMORY,
    environment="development",
)
