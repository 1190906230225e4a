"""
Attendance record endpoints.

These routes expose the record set stored in the JSON data file:
list every check-in, add a check-in for a name and delete check-ins
by their timestamp.  No authentication is required.  Errors raised by
the service are converted to ``{"error": ...}`` responses by the
handlers registered in ``main``.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request, status

from attendance_api.app.core.storage import RecordStore, get_store
from attendance_api.app.schemas.record import ErrorResponse, MessageResponse, RecordCreate, RecordRead
from attendance_api.app.services.record_service import RecordService

router = APIRouter()


def get_record_service(request: Request, store: RecordStore = Depends(get_store)) -> RecordService:
    """Build a ``RecordService`` bound to the application's store."""
    return RecordService(store, tz_name=request.app.state.settings.timezone)


@router.get(
    "",
    response_model=List[Dict[str, Any]],
    responses={500: {"model": ErrorResponse}},
)
async def list_records(service: RecordService = Depends(get_record_service)) -> List[Dict[str, Any]]:
    """Return every record in insertion order."""
    return await service.list_records()


@router.post(
    "",
    response_model=RecordRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_record(
    record_in: RecordCreate,
    service: RecordService = Depends(get_record_service),
) -> RecordRead:
    """Check in the given name.

    The name is trimmed; a missing or blank name is rejected with 400.
    """
    return await service.create_record(record_in.name)


@router.delete(
    "/{timestamp}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def delete_record(
    timestamp: str,
    service: RecordService = Depends(get_record_service),
) -> Dict[str, Any]:
    """Delete the record(s) carrying ``timestamp``."""
    return await service.delete_record(timestamp)
