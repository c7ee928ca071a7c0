"""Infrastructure error hierarchy.

Business rejections (validation, duplicate email, missing record) are
not exceptions; they travel as ``ServiceResult`` values from
``services.results``.  The classes here cover failures of the
collaborators the service depends on, which the HTTP layer turns into
a generic 5xx response.
"""

from __future__ import annotations


class InfrastructureError(Exception):
    """Base error for failures outside the business rules."""


class StorageError(InfrastructureError):
    """The storage backend is unreachable or rejected an operation.

    Attributes:
        operation: Name of the storage port method that failed.
    """

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} failed: {message}")
