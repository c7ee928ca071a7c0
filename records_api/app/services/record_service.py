"""
Business logic for user records.

``RecordService`` validates candidates, enforces email uniqueness when
creating, checks existence before updating or deleting, and delegates
persistence to the ``RecordStorage`` it is constructed with.

Business rejections come back as ``ServiceResult`` failures.  Storage
failures are not caught here: ``StorageError`` propagates to the HTTP
layer.

The duplicate-email check is a read followed by a write and is not
atomic; two concurrent creates with the same address can both pass.
Updates do not re-check uniqueness at all.
"""

import logging
from typing import List, Optional

from email_validator import EmailNotValidError, validate_email

from ..schemas.record import Record
from ..storage.base import RecordStorage
from .results import FailureKind, ServiceFailure, ServiceResult

logger = logging.getLogger(__name__)


def email_problem(email: Optional[str]) -> Optional[str]:
    """Return why ``email`` is rejected, or ``None`` if it is acceptable.

    The address is stored exactly as sent, so any whitespace (including
    a trailing newline) is refused outright rather than normalised away.
    Syntax, including the dot required in the domain, is checked by
    ``email-validator`` without DNS lookups.
    """
    if not email:
        return "email must not be blank"
    if any(char.isspace() for char in email):
        return "email must not contain whitespace"
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as exc:
        return str(exc)
    return None


def is_valid_email(email: Optional[str]) -> bool:
    return email_problem(email) is None


def validate_record(candidate: Record) -> Optional[ServiceFailure]:
    """Check the content rules shared by create and update.

    Returns the first failure found (name before email), or ``None``.
    """
    if not candidate.name or not candidate.name.strip():
        return ServiceFailure(FailureKind.VALIDATION, "name must not be blank", field="name")
    problem = email_problem(candidate.email)
    if problem:
        return ServiceFailure(
            FailureKind.VALIDATION,
            f"email {candidate.email!r} is not a valid email address: {problem}",
            field="email",
        )
    return None


class RecordService:
    """Сервис для работы с записями пользователей.

    Holds no state besides the storage adapter; every call goes
    straight to storage.
    """

    def __init__(self, storage: RecordStorage) -> None:
        self.storage = storage

    def list_records(self) -> List[Record]:
        """Return all persisted records in storage order."""
        return self.storage.find_all()

    def get_record(self, record_id: int) -> Optional[Record]:
        """Return the record with ``record_id`` or ``None`` if absent."""
        return self.storage.find_by_id(record_id)

    def create_record(self, candidate: Record) -> ServiceResult[Record]:
        """Validate, enforce email uniqueness and persist a new record.

        Any ``id`` on the candidate is discarded so storage always
        assigns a fresh one.
        """
        candidate = candidate.model_copy(update={"id": None})
        failure = validate_record(candidate)
        if failure:
            logger.info("Rejected new record: %s", failure.message)
            return ServiceResult(failure=failure)
        if self.storage.find_by_email(candidate.email) is not None:
            logger.info("Rejected new record: email %s already registered", candidate.email)
            return ServiceResult.fail(
                FailureKind.DUPLICATE_EMAIL,
                f"email {candidate.email} is already registered",
                field="email",
            )
        created = self.storage.save(candidate)
        logger.info("Created record %s", created.id)
        return ServiceResult.success(created)

    def update_record(self, record_id: int, candidate: Record) -> ServiceResult[Record]:
        """Replace name and email of an existing record.

        Existence is checked before validation, so an unknown id is
        reported as not found even when the body is also invalid.
        """
        if not self.storage.exists_by_id(record_id):
            return ServiceResult.fail(FailureKind.NOT_FOUND, f"Record {record_id} not found")
        failure = validate_record(candidate)
        if failure:
            logger.info("Rejected update of record %s: %s", record_id, failure.message)
            return ServiceResult(failure=failure)
        updated = self.storage.save(candidate.model_copy(update={"id": record_id}))
        logger.info("Updated record %s", record_id)
        return ServiceResult.success(updated)

    def delete_record(self, record_id: int) -> ServiceResult[None]:
        """Remove a record permanently."""
        if not self.storage.exists_by_id(record_id):
            return ServiceResult.fail(FailureKind.NOT_FOUND, f"Record {record_id} not found")
        self.storage.delete_by_id(record_id)
        logger.info("Deleted record %s", record_id)
        return ServiceResult.success()
