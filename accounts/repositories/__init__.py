"""
Persistence adapters.

Services depend on the ``UserRepository`` protocol rather than on a concrete
backend: ``SQLUserRepository`` for real deployments and
``MemoryUserRepository`` for tests and local tooling.
"""

from .base import (
    DuplicateRecordError,
    RecordNotFoundError,
    RepositoryError,
    UserRepository,
    UserSummary,
)

__all__ = [
    "DuplicateRecordError",
    "RecordNotFoundError",
    "RepositoryError",
    "UserRepository",
    "UserSummary",
]
