"""
Outcome values returned by the record service.

Expected business rejections are returned, not raised: a
``ServiceResult`` holds either a value or a ``ServiceFailure`` whose
``kind`` tells the HTTP layer which status code to answer with.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class FailureKind(str, Enum):
    """Kinds of business failure."""

    VALIDATION = "validation_failure"
    DUPLICATE_EMAIL = "duplicate_email"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ServiceFailure:
    """A recoverable rejection.

    Attributes:
        kind: What went wrong.
        message: Human readable explanation, safe to return to clients.
        field: Offending input field for validation failures.
    """

    kind: FailureKind
    message: str
    field: Optional[str] = None


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    value: Optional[T] = None
    failure: Optional[ServiceFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "ServiceResult[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: FailureKind, message: str, field: Optional[str] = None) -> "ServiceResult[T]":
        return cls(failure=ServiceFailure(kind=kind, message=message, field=field))
