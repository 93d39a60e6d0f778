"""Domain models for Topic Store."""

from topic_store.domain.models.read_outcome import ReadOutcome, ReadStatus

__all__: list[str] = ["ReadOutcome", "ReadStatus"]
