"""
Pytest configuration and shared fixtures for Topic Store tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async port doubles
- Use FakeTimeAuthority for anything time-dependent
- Unit tests go in tests/unit/
- Integration tests (in-memory object store, full wiring) go in tests/integration/
"""

from collections.abc import Iterator
from datetime import datetime, timezone

import pytest
import structlog

from tests.helpers.fake_time_authority import FakeTimeAuthority
from topic_store.domain.events.event_schema import EventSchema
from topic_store.infrastructure.stubs.object_store_stub import ObjectStoreStub


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults so configure_structlog() never leaks between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Time authority frozen at 2026-01-15T10:30:00Z."""
    return FakeTimeAuthority(
        frozen_at=datetime(2026, 1, 15, 10, 30, 0, tzinfo=timezone.utc)
    )


@pytest.fixture
def object_store() -> ObjectStoreStub:
    """Fresh in-memory object store."""
    return ObjectStoreStub()


@pytest.fixture
def deposit_schema() -> EventSchema:
    """A minimal event schema declaration."""
    return EventSchema(event_type="Deposit", schema={})
