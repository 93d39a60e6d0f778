"""Unit tests for ReadOutcome."""

from __future__ import annotations

from topic_store.domain.models.read_outcome import ReadOutcome, ReadStatus


class TestReadOutcome:
    def test_kept_outcome_carries_value(self) -> None:
        outcome = ReadOutcome.kept("2026/01/01/00/00/a.json", {"amount": 10})

        assert outcome.status is ReadStatus.KEPT
        assert outcome.is_kept
        assert outcome.value == {"amount": 10}
        assert outcome.reason is None

    def test_skipped_outcome_carries_reason(self) -> None:
        outcome = ReadOutcome.skipped("2026/01/01/00/00/b.json", "JSONDecodeError: bad")

        assert outcome.status is ReadStatus.SKIPPED
        assert not outcome.is_kept
        assert outcome.value is None
        assert outcome.reason == "JSONDecodeError: bad"
        assert outcome.object_name == "2026/01/01/00/00/b.json"
