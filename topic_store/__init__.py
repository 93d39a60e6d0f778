"""
Topic Store - durable, named event topics on object storage.

Each topic is an append-only log of JSON events kept in its own storage
container. A small in-memory catalog tracks topic metadata and records
every topic creation in the reserved "_configuration" topic.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
