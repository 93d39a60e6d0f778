"""Composition root for wiring dependencies.

This package centralizes infrastructure-aware wiring so application
services depend on ports without importing infrastructure directly.
"""

from topic_store.bootstrap.topic_store import (
    TopicStoreContainer,
    build_topic_store,
    create_object_store,
    open_topic_store,
)

__all__ = [
    "TopicStoreContainer",
    "build_topic_store",
    "create_object_store",
    "open_topic_store",
]
