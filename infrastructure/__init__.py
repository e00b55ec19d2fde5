"""
Infrastructure Package
======================

Provides abstraction layers for external dependencies.

Modules:
    - database: MongoDB connection and document helpers
    - storage: Product image storage (local filesystem)
    - observability: OpenTelemetry tracing
    - container: Service locator wiring the above into domain services

This package enables:
    - Easy testing with mongomock databases and temporary image directories
    - Loose coupling between business logic and infrastructure
"""
