"""Topic-related error classes for the control plane.

This module defines the errors raised while creating and looking up
topics in the catalog. All of them are local and final: nothing in the
core retries a validation, duplicate, or lookup failure.
"""

from topic_store.domain.exceptions import TopicStoreError


class ValidationError(TopicStoreError):
    """Raised when a Topic field violates an invariant.

    Attributes:
        field: Name of the offending field ("name", "description",
            or "event_schemas").
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize the error.

        Args:
            field: Name of the offending field.
            message: Human-readable description of the violation.
        """
        self.field = field
        super().__init__(f"Invalid topic {field}: {message}")


class DuplicateTopicError(TopicStoreError):
    """Raised when a topic with the same name is already registered.

    The directory is left unchanged and no lifecycle event is published.

    Attributes:
        topic_name: The name that was already taken.
    """

    def __init__(self, topic_name: str) -> None:
        self.topic_name = topic_name
        super().__init__(f"Topic with name '{topic_name}' already exists")


class NotFoundError(TopicStoreError):
    """Raised when a topic is looked up but not registered.

    Attributes:
        topic_name: The name that was looked up.
    """

    def __init__(self, topic_name: str) -> None:
        self.topic_name = topic_name
        super().__init__(f"Topic '{topic_name}' not found")
