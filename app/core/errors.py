"""
Error taxonomy and FastAPI exception handlers.

Every error body has the same shape: {"message": ..., "error": ...optional}.

- ResourceNotFoundError -> 404. Raised both when a record does not exist and
  when it belongs to another user; the two cases are indistinguishable.
- RecordValidationError -> 500. Validation failures are reported like any other
  server error, the way the web client has always received them.
- PyMongoError / unparseable request bodies -> 500, logged.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ResourceNotFoundError(Exception):
    """Record is absent or not owned by the caller."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"{label} not found")


class RecordValidationError(Exception):
    """A payload violated a record schema. `field` names the offending field."""

    def __init__(self, label: str, field: str, reason: str):
        self.label = label
        self.field = field
        self.reason = reason
        super().__init__(f"{label} validation failed: {field}: {reason}")


def _server_error(exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Server error", "error": str(exc)},
    )


async def not_found_handler(request: Request, exc: ResourceNotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": str(exc)})


async def record_validation_handler(request: Request, exc: RecordValidationError):
    logger.error("%s %s: %s", request.method, request.url.path, exc)
    return _server_error(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.error("%s %s: invalid request: %s", request.method, request.url.path, exc.errors())
    return _server_error(exc)


async def store_error_handler(request: Request, exc: PyMongoError):
    logger.exception("%s %s: database error", request.method, request.url.path)
    return _server_error(exc)


async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ResourceNotFoundError, not_found_handler)
    app.add_exception_handler(RecordValidationError, record_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PyMongoError, store_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
