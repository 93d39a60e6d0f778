"""Configuration module for Topic Store.

Available Configurations:
- TopicStoreConfig: storage backend, logging mode, catalog startup
"""

from topic_store.config.topic_store_config import (
    AZURITE_CONNECTION_STRING,
    BACKEND_AZURE,
    BACKEND_MEMORY,
    TEST_TOPIC_STORE_CONFIG,
    TopicStoreConfig,
)

__all__ = [
    "AZURITE_CONNECTION_STRING",
    "BACKEND_AZURE",
    "BACKEND_MEMORY",
    "TEST_TOPIC_STORE_CONFIG",
    "TopicStoreConfig",
]
