"""
Record endpoints for API v1.

These routes expose the CRUD API for user records.  Each handler
delegates to the ``RecordService`` stored on ``app.state`` by
``create_app`` and translates business failures into HTTP status
codes: validation and duplicate email are 400, unknown ids are 404.
Storage failures are left to the application-level exception handler.
"""

from typing import List, NoReturn

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from records_api.app.schemas.record import Record
from records_api.app.services.record_service import RecordService
from records_api.app.services.results import FailureKind, ServiceFailure

router = APIRouter()

FAILURE_STATUS = {
    FailureKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    FailureKind.DUPLICATE_EMAIL: status.HTTP_400_BAD_REQUEST,
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def get_record_service(request: Request) -> RecordService:
    """Return the service bound to the running application."""
    return request.app.state.record_service


def raise_for_failure(failure: ServiceFailure) -> NoReturn:
    raise HTTPException(status_code=FAILURE_STATUS[failure.kind], detail=failure.message)


@router.get("", response_model=List[Record])
def list_records(service: RecordService = Depends(get_record_service)) -> List[Record]:
    """Получить список всех записей.

    Returns every record in storage order.  No pagination.
    """
    return service.list_records()


@router.get("/{record_id}", response_model=Record)
def get_record(record_id: int, service: RecordService = Depends(get_record_service)) -> Record:
    """Retrieve a single record by ID.

    Returns HTTP 404 if the record is not found.
    """
    record = service.get_record(record_id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Record not found")
    return record


@router.post("", response_model=Record, status_code=status.HTTP_200_OK)
def create_record(record_in: Record, service: RecordService = Depends(get_record_service)) -> Record:
    """Create a new record.

    Any ``id`` in the body is ignored.  Answers 400 when the name is
    blank, the email is malformed or the email is already registered.
    """
    result = service.create_record(record_in)
    if not result.ok:
        raise_for_failure(result.failure)
    return result.value


@router.put("/{record_id}", response_model=Record)
def update_record(
    record_id: int,
    record_in: Record,
    service: RecordService = Depends(get_record_service),
) -> Record:
    """Replace name and email of an existing record.

    The path ``record_id`` wins over any ``id`` in the body.
    """
    result = service.update_record(record_id, record_in)
    if not result.ok:
        raise_for_failure(result.failure)
    return result.value


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_record(record_id: int, service: RecordService = Depends(get_record_service)) -> Response:
    """Удалить запись по ID."""
    result = service.delete_record(record_id)
    if not result.ok:
        raise_for_failure(result.failure)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
