"""
Domain layer - Pure business logic for Topic Store.

This layer contains:
- Domain entities (Topic)
- Domain events (EventSchema, TopicCreated)
- Domain models (ReadOutcome)
- Domain exceptions

CRITICAL: This layer must NOT import from any outer topic_store layer.
Only stdlib and typing imports are allowed.
"""

from topic_store.domain.exceptions import TopicStoreError

__all__: list[str] = ["TopicStoreError"]
