"""Read outcome model for topic replay.

Replaying a topic walks every stored object. Each object produces one
ReadOutcome: KEPT with the decoded value, or SKIPPED with the reason the
object could not be read. Keeping the skip explicit lets callers decide
whether to drop, count, or surface unreadable records; the plain
``read()`` path drops them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ReadStatus(Enum):
    """Whether a stored object made it into the replay."""

    KEPT = "kept"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ReadOutcome(Generic[T]):
    """Result of reading one stored object.

    Attributes:
        status: KEPT or SKIPPED.
        object_name: Storage key of the object.
        value: Decoded event (KEPT only).
        reason: Why the object was skipped (SKIPPED only).
    """

    status: ReadStatus
    object_name: str
    value: T | None = None
    reason: str | None = None

    @classmethod
    def kept(cls, object_name: str, value: T) -> ReadOutcome[T]:
        return cls(status=ReadStatus.KEPT, object_name=object_name, value=value)

    @classmethod
    def skipped(cls, object_name: str, reason: str) -> ReadOutcome[Any]:
        return cls(status=ReadStatus.SKIPPED, object_name=object_name, reason=reason)

    @property
    def is_kept(self) -> bool:
        return self.status is ReadStatus.KEPT
