"""Stub implementations of ports for development and testing."""

from topic_store.infrastructure.stubs.object_store_stub import ObjectStoreStub

__all__: list[str] = ["ObjectStoreStub"]
