"""
Error taxonomy shared by the service layer and the HTTP layer.

Services raise these exceptions; ``register_exception_handlers`` turns
them into ``{"error": <message>}`` JSON responses with the status code
carried by each class.  Duplicate provider ids are reported as 400,
the same status the public API has always used for them.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from insureconnect_api.app.schemas.provider import describe_provider_errors

logger = logging.getLogger(__name__)


class InsureConnectError(Exception):
    """Base class for errors reported to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(InsureConnectError):
    """Malformed, missing or inconsistent input."""

    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateError(InsureConnectError):
    """A provider with the same ``provider_id`` already exists."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(InsureConnectError):
    """No provider matches the requested id."""

    status_code = status.HTTP_404_NOT_FOUND


class StoreError(InsureConnectError):
    """The database is unavailable or an operation on it failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _handle_insureconnect_error(request: Request, exc: InsureConnectError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message)


async def _handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # FastAPI reports body/query problems as 422 with a list of details;
    # clients of this API expect a single 400 message instead.
    errors = exc.errors()
    body_errors = [err for err in errors if tuple(err.get("loc", ()))[:1] == ("body",)]
    if body_errors:
        # The only request body the API accepts is a provider record.
        stripped = [dict(err, loc=tuple(err["loc"][1:])) for err in body_errors]
        return error_response(status.HTTP_400_BAD_REQUEST, describe_provider_errors(stripped))
    message = "Invalid request"
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    return error_response(status.HTTP_400_BAD_REQUEST, message)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to ``app``."""
    app.add_exception_handler(InsureConnectError, _handle_insureconnect_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation_error)
