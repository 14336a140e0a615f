"""Interface layer errors and their mapping to API responses.

Every failure is rendered in the same envelope as a success, with a
response code from the forum API:

    0 OK, 1 not found, 3 bad request, 4 unknown error, 5 already exists
"""

from enum import IntEnum

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from forum.domain.error import BusinessRuleViolationError, DomainError, NotFoundError
from forum.persistence.error import DuplicateKeyError, StorageError


class ResponseCode(IntEnum):
    """Response codes carried in the ``code`` field of every reply."""

    OK = 0
    NOT_FOUND = 1
    BAD_REQUEST = 3
    UNKNOWN = 4
    ALREADY_EXISTS = 5


def error_response(http_status: int, code: ResponseCode, message: str) -> JSONResponse:
    """Build an error reply in the response envelope."""
    return JSONResponse(
        status_code=http_status,
        content={"code": int(code), "response": message},
    )


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    logfire.warn(
        "Resource not found",
        path=request.url.path,
        resource=exc.resource,
        identifier=exc.identifier,
    )
    return error_response(status.HTTP_404_NOT_FOUND, ResponseCode.NOT_FOUND, str(exc))


async def handle_bad_request(request: Request, exc: Exception) -> JSONResponse:
    logfire.warn("Bad request", path=request.url.path, error=str(exc))
    return error_response(
        status.HTTP_400_BAD_REQUEST, ResponseCode.BAD_REQUEST, str(exc)
    )


async def handle_invalid_request(
    request: Request, exc: RequestValidationError | ValidationError
) -> JSONResponse:
    logfire.warn("Invalid request", path=request.url.path, errors=str(exc.errors()))
    return error_response(
        status.HTTP_400_BAD_REQUEST, ResponseCode.BAD_REQUEST, "Invalid request"
    )


async def handle_duplicate_key(
    request: Request, exc: DuplicateKeyError
) -> JSONResponse:
    logfire.warn("Duplicate key", path=request.url.path, error=str(exc))
    return error_response(
        status.HTTP_409_CONFLICT, ResponseCode.ALREADY_EXISTS, "Already exists"
    )


async def handle_storage_error(request: Request, exc: StorageError) -> JSONResponse:
    logfire.error("Storage failure", path=request.url.path, error=str(exc))
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, ResponseCode.UNKNOWN, "Unknown error"
    )


def register_error_handlers(app: FastAPI) -> None:
    """Map domain, storage and validation errors to enveloped replies.

    Handlers are looked up along the exception's MRO, so subclasses such as
    ``ParentNotFoundError`` reuse their base's handler.
    """
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(BusinessRuleViolationError, handle_bad_request)
    app.add_exception_handler(DomainError, handle_bad_request)
    app.add_exception_handler(RequestValidationError, handle_invalid_request)
    app.add_exception_handler(ValidationError, handle_invalid_request)
    app.add_exception_handler(DuplicateKeyError, handle_duplicate_key)
    app.add_exception_handler(StorageError, handle_storage_error)
