"""
Infrastructure Layer

Concrete implementations of the archive repository interface defined in
the domain layer.

Components:
- repositories/: In-memory archive store
- adapters/: Retry and timeout wrapper for any archive store
"""
