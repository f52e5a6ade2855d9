"""
Recordbook: Record Route Handlers
====================================

What:  The five /users endpoints: create, list, get one, update, delete.
How:   Parse path/form input, validate, delegate to the RecordStore, return
       a RecordResponse. Failures are raised as application exceptions and
       turned into HTTP responses by the global handlers in main.py.

Input handling:
    Request bodies are form-encoded. `id` (path) and `age` (form) arrive as
    strings and are parsed here so that a malformed number is a 400 with a
    readable message. A missing form field reads as an empty string: a
    missing name fails validation as empty, a missing age fails parsing.

Status codes:
    POST   /users        200 record | 400 | 500
    GET    /users        200 [record, ...] | 500
    GET    /users/{id}   200 record | 400 | 500 (404 with get_one_missing_as_not_found)
    PUT    /users/{id}   200 record | 400 | 404 | 500
    DELETE /users/{id}   204        | 400 | 404 | 500
"""

import logging
import re
from typing import List

from fastapi import APIRouter, Depends, Form, Response

from recordbook.config import Settings
from recordbook.dependencies import get_record_store, get_settings
from recordbook.exceptions import DatabaseError, NotFoundError, ValidationError
from recordbook.schemas.record import ErrorResponse, RecordResponse
from recordbook.services.record_store import RecordStore
from recordbook.services.validator import validate_record

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# ASCII digits only: int() alone also takes whitespace, "_" and non-ASCII digits
_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_int(value: str, field: str) -> int:
    """
    Parse a base-10 integer that fits a signed 64-bit SQLite column.

    Raises:
        ValidationError: not an integer, or outside the 64-bit range
    """
    if not _INTEGER.fullmatch(value):
        raise ValidationError(
            message=f"invalid integer for '{field}': {value!r}",
            field=field,
        )
    parsed = int(value)
    if not INT64_MIN <= parsed <= INT64_MAX:
        raise ValidationError(
            message=f"integer out of range for '{field}': {value!r}",
            field=field,
        )
    return parsed


@router.post(
    "",
    response_model=RecordResponse,
    responses={
        400: {"description": "Malformed or out-of-bounds input", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Create a record",
)
async def create_record(
    name: str = Form(default=""),
    age: str = Form(default=""),
    store: RecordStore = Depends(get_record_store),
) -> RecordResponse:
    parsed_age = parse_int(age, "age")
    validate_record(name, parsed_age)
    return await store.create(name, parsed_age)


@router.get(
    "",
    response_model=List[RecordResponse],
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="List all records",
)
async def list_records(
    store: RecordStore = Depends(get_record_store),
) -> List[RecordResponse]:
    return await store.get_all()


@router.get(
    "/{record_id}",
    response_model=RecordResponse,
    responses={
        400: {"description": "Malformed id", "model": ErrorResponse},
        404: {"description": "Record not found (opt-in)", "model": ErrorResponse},
        500: {"description": "Database error or record not found", "model": ErrorResponse},
    },
    summary="Get a single record by id",
)
async def get_record(
    record_id: str,
    store: RecordStore = Depends(get_record_store),
    config: Settings = Depends(get_settings),
) -> RecordResponse:
    """
    Fetch one record.

    A missing row is reported as a server error (500) unless
    `get_one_missing_as_not_found` is set, matching the behavior existing
    clients of this endpoint rely on.
    """
    parsed_id = parse_int(record_id, "id")
    try:
        return await store.get_one(parsed_id)
    except NotFoundError as e:
        if config.get_one_missing_as_not_found:
            raise
        logger.debug("Record %d missing; answering as server error", parsed_id)
        raise DatabaseError(message=e.message, context=dict(e.context)) from e


@router.put(
    "/{record_id}",
    response_model=RecordResponse,
    responses={
        400: {"description": "Malformed or out-of-bounds input", "model": ErrorResponse},
        404: {"description": "Record not found", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Replace name and age of a record",
)
async def update_record(
    record_id: str,
    name: str = Form(default=""),
    age: str = Form(default=""),
    store: RecordStore = Depends(get_record_store),
) -> RecordResponse:
    parsed_id = parse_int(record_id, "id")
    parsed_age = parse_int(age, "age")
    validate_record(name, parsed_age)
    return await store.update(parsed_id, name, parsed_age)


@router.delete(
    "/{record_id}",
    status_code=204,
    response_class=Response,
    responses={
        400: {"description": "Malformed id", "model": ErrorResponse},
        404: {"description": "Record not found", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Delete a record",
)
async def delete_record(
    record_id: str,
    store: RecordStore = Depends(get_record_store),
) -> Response:
    parsed_id = parse_int(record_id, "id")
    await store.delete(parsed_id)
    return Response(status_code=204)
