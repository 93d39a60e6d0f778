"""
Application layer - Use cases and ports for Topic Store.

This layer contains:
- Ports (abstract interfaces for storage, publishing, reading, time)
- Services (topic catalog, configuration replay)

Import rules: may import from domain only (observability is allowed as a
cross-cutting concern).
"""
