"""Unit tests for ConfigurationReplayService."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from structlog.testing import capture_logs

from topic_store.application.services.configuration_replay_service import (
    ConfigurationReplayService,
)
from topic_store.application.services.topic_created_handler import (
    TopicCreatedEventHandler,
)
from topic_store.domain.events.event_schema import EventSchema
from topic_store.domain.events.topic_created import CONFIGURATION_TOPIC, TopicCreated
from topic_store.infrastructure.adapters.in_memory_topic_directory import (
    InMemoryTopicDirectory,
)

RECORDED_AT = datetime(2025, 12, 1, 8, 0, 0, tzinfo=timezone.utc)


def _record(name: str, schemas: tuple[EventSchema, ...] | None = None) -> TopicCreated:
    return TopicCreated(
        topic_name=name,
        description=f"{name} events",
        created_at=RECORDED_AT,
        event_schemas=schemas if schemas is not None else (EventSchema("Created", {}),),
    )


class FakeReader:
    """Reader double replaying a fixed list of records."""

    def __init__(self, records: list[TopicCreated]) -> None:
        self.records = records
        self.requests: list[tuple[str, type]] = []

    async def read_as(self, topic_name, target):  # type: ignore[no-untyped-def]
        self.requests.append((topic_name, target))
        for record in self.records:
            yield record


class TestConfigurationReplayService:
    @pytest.mark.asyncio
    async def test_rebuild_registers_every_recorded_topic(self) -> None:
        directory = InMemoryTopicDirectory()
        reader = FakeReader([_record("payments"), _record("orders")])
        service = ConfigurationReplayService(reader, TopicCreatedEventHandler(directory))

        restored = await service.rebuild()

        assert restored == 2
        assert sorted(directory.snapshot()) == ["orders", "payments"]
        assert reader.requests == [(CONFIGURATION_TOPIC, TopicCreated)]

    @pytest.mark.asyncio
    async def test_rebuild_skips_duplicates_and_invalid_records(self) -> None:
        directory = InMemoryTopicDirectory()
        reader = FakeReader(
            [_record("payments"), _record("payments"), _record("broken", schemas=())]
        )
        service = ConfigurationReplayService(reader, TopicCreatedEventHandler(directory))

        with capture_logs() as logs:
            restored = await service.rebuild()

        assert restored == 1
        assert list(directory.snapshot()) == ["payments"]
        summary = next(e for e in logs if e["event"] == "catalog_rebuilt")
        assert summary["records_read"] == 3
        assert summary["topics_restored"] == 1

    @pytest.mark.asyncio
    async def test_rebuild_of_empty_log_restores_nothing(self) -> None:
        directory = InMemoryTopicDirectory()
        service = ConfigurationReplayService(
            FakeReader([]), TopicCreatedEventHandler(directory)
        )

        assert await service.rebuild() == 0
        assert len(directory) == 0
