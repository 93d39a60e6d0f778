"""
Infrastructure layer - Adapters for Topic Store.

This layer contains:
- Storage adapters (Azure Blob Storage)
- Event publisher and reader over object storage
- In-memory topic directory and system clock
- Stubs for development and testing
- Observability (structlog configuration)

Import rules: may import from domain and application.
"""
