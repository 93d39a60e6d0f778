"""Storage naming for topic event logs.

Layout:
- one container per topic, named after the lowercased topic name
- one object per event, keyed ``{yyyy}/{MM}/{dd}/{HH}/{mm}/{uuid}.json``

Listing keys lexicographically orders events by minute. Events written in
the same minute sort by their random UUID, so their relative order is
not preserved.
"""

from datetime import datetime, timezone

OBJECT_KEY_TIME_FORMAT = "%Y/%m/%d/%H/%M"
OBJECT_KEY_SUFFIX = ".json"


def container_name_for(topic_name: str) -> str:
    """Return the storage container name for a topic."""
    return topic_name.lower()


def build_object_name(timestamp: datetime, event_id: str) -> str:
    """Build the storage key for one event.

    Args:
        timestamp: Write time; converted to UTC (naive values are taken
            as UTC).
        event_id: Unique event identifier (a UUID string).

    Returns:
        Key of the form ``2026/01/15/10/30/<event_id>.json``.
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    prefix = timestamp.astimezone(timezone.utc).strftime(OBJECT_KEY_TIME_FORMAT)
    return f"{prefix}/{event_id}{OBJECT_KEY_SUFFIX}"
