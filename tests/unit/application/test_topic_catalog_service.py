"""Unit tests for TopicCatalog (control plane).

Tests cover:
- Topic creation and lifecycle publication
- Duplicate rejection, including concurrent creates of one name
- Validation failures leaving the catalog untouched
- Publish failure after registration
- Case-sensitive lookups
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import pytest
from structlog.testing import capture_logs

from tests.helpers.fake_time_authority import FakeTimeAuthority
from topic_store.application.services.topic_catalog_service import TopicCatalog
from topic_store.domain.errors.storage import StorageError
from topic_store.domain.errors.topic import (
    DuplicateTopicError,
    NotFoundError,
    ValidationError,
)
from topic_store.domain.events.event_schema import EventSchema
from topic_store.domain.events.topic_created import CONFIGURATION_TOPIC, TopicCreated
from topic_store.infrastructure.adapters.in_memory_topic_directory import (
    InMemoryTopicDirectory,
)


@pytest.fixture
def directory() -> InMemoryTopicDirectory:
    return InMemoryTopicDirectory()


@pytest.fixture
def publisher() -> AsyncMock:
    mock = AsyncMock()
    mock.publish.return_value = "2026/01/15/10/30/event.json"
    return mock


@pytest.fixture
def catalog(
    directory: InMemoryTopicDirectory,
    publisher: AsyncMock,
    fake_time_authority: FakeTimeAuthority,
) -> TopicCatalog:
    return TopicCatalog(directory, publisher, fake_time_authority)


class TestCreateTopic:
    """Tests for TopicCatalog.create_topic()."""

    @pytest.mark.asyncio
    async def test_registers_topic(
        self, catalog: TopicCatalog, deposit_schema: EventSchema
    ) -> None:
        topic = await catalog.create_topic("payments", "Payment events", [deposit_schema])

        assert topic.name == "payments"
        assert topic.version == 1
        assert catalog.topic_exists("payments")
        assert catalog.get_topic("payments") is topic

    @pytest.mark.asyncio
    async def test_created_at_comes_from_time_authority(
        self,
        catalog: TopicCatalog,
        deposit_schema: EventSchema,
        fake_time_authority: FakeTimeAuthority,
    ) -> None:
        topic = await catalog.create_topic("payments", "Payment events", [deposit_schema])
        assert topic.created_at == fake_time_authority.utcnow()

    @pytest.mark.asyncio
    async def test_publishes_topic_created_to_configuration_topic(
        self,
        catalog: TopicCatalog,
        publisher: AsyncMock,
        deposit_schema: EventSchema,
    ) -> None:
        topic = await catalog.create_topic("Payments", "Payment events", [deposit_schema])

        publisher.publish.assert_awaited_once()
        topic_name, event = publisher.publish.await_args.args
        assert topic_name == CONFIGURATION_TOPIC
        assert event == TopicCreated.from_topic(topic)
        assert event.topic_name == "Payments"

    @pytest.mark.asyncio
    async def test_duplicate_name_rejected_without_publishing(
        self,
        catalog: TopicCatalog,
        publisher: AsyncMock,
        deposit_schema: EventSchema,
    ) -> None:
        first = await catalog.create_topic("payments", "Payment events", [deposit_schema])
        publisher.publish.reset_mock()

        with pytest.raises(DuplicateTopicError, match="payments"):
            await catalog.create_topic("payments", "Other description", [deposit_schema])

        publisher.publish.assert_not_awaited()
        assert catalog.get_topic("payments") is first

    @pytest.mark.asyncio
    async def test_duplicate_is_logged(
        self, catalog: TopicCatalog, deposit_schema: EventSchema
    ) -> None:
        await catalog.create_topic("payments", "Payment events", [deposit_schema])

        with capture_logs() as logs, pytest.raises(DuplicateTopicError):
            await catalog.create_topic("payments", "Payment events", [deposit_schema])

        assert any(
            entry["event"] == "topic_create_rejected_duplicate"
            and entry["log_level"] == "warning"
            for entry in logs
        )

    @pytest.mark.asyncio
    async def test_invalid_request_leaves_catalog_unchanged(
        self, catalog: TopicCatalog, publisher: AsyncMock
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            await catalog.create_topic("payments", "Payment events", [])

        assert exc_info.value.field == "event_schemas"
        assert len(catalog.topics) == 0
        publisher.publish.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_publish_failure_keeps_topic_registered(
        self,
        catalog: TopicCatalog,
        publisher: AsyncMock,
        deposit_schema: EventSchema,
    ) -> None:
        publisher.publish.side_effect = StorageError("storage unavailable")

        with capture_logs() as logs, pytest.raises(StorageError, match="unavailable"):
            await catalog.create_topic("payments", "Payment events", [deposit_schema])

        assert catalog.topic_exists("payments")
        assert [e["event"] for e in logs if e["log_level"] == "error"] == [
            "topic_lifecycle_publish_failed"
        ]

    @pytest.mark.asyncio
    async def test_concurrent_creates_of_one_name_admit_exactly_one(
        self,
        catalog: TopicCatalog,
        publisher: AsyncMock,
        deposit_schema: EventSchema,
    ) -> None:
        results = await asyncio.gather(
            *(
                catalog.create_topic("payments", f"attempt {i}", [deposit_schema])
                for i in range(10)
            ),
            return_exceptions=True,
        )

        created = [r for r in results if not isinstance(r, BaseException)]
        duplicates = [r for r in results if isinstance(r, DuplicateTopicError)]
        assert len(created) == 1
        assert len(duplicates) == 9
        assert publisher.publish.await_count == 1
        assert len(catalog.topics) == 1


class TestLookups:
    """Tests for get_topic, topic_exists, try_get_topic and topics."""

    @pytest.mark.asyncio
    async def test_lookups_are_case_sensitive(
        self, catalog: TopicCatalog, deposit_schema: EventSchema
    ) -> None:
        await catalog.create_topic("payments", "Payment events", [deposit_schema])

        assert catalog.topic_exists("payments")
        assert not catalog.topic_exists("Payments")
        assert catalog.try_get_topic("Payments") == (None, False)

    def test_get_missing_topic_raises(self, catalog: TopicCatalog) -> None:
        with pytest.raises(NotFoundError, match="missing"):
            catalog.get_topic("missing")

    @pytest.mark.asyncio
    async def test_try_get_topic_returns_registered_topic(
        self, catalog: TopicCatalog, deposit_schema: EventSchema
    ) -> None:
        topic = await catalog.create_topic("payments", "Payment events", [deposit_schema])
        assert catalog.try_get_topic("payments") == (topic, True)

    @pytest.mark.asyncio
    async def test_topics_is_a_read_only_snapshot(
        self, catalog: TopicCatalog, deposit_schema: EventSchema
    ) -> None:
        await catalog.create_topic("payments", "Payment events", [deposit_schema])
        snapshot = catalog.topics

        await catalog.create_topic("orders", "Order events", [deposit_schema])

        assert list(snapshot) == ["payments"]
        assert sorted(catalog.topics) == ["orders", "payments"]
        with pytest.raises(TypeError):
            snapshot["x"] = snapshot["payments"]  # type: ignore[index]

    @pytest.mark.asyncio
    async def test_catalogs_with_separate_directories_are_independent(
        self,
        publisher: AsyncMock,
        fake_time_authority: FakeTimeAuthority,
    ) -> None:
        first = TopicCatalog(InMemoryTopicDirectory(), publisher, fake_time_authority)
        second = TopicCatalog(InMemoryTopicDirectory(), publisher, fake_time_authority)

        await first.create_topic(
            "payments", "Payment events", [EventSchema("Deposit", {})]
        )

        assert first.topic_exists("payments")
        assert not second.topic_exists("payments")
