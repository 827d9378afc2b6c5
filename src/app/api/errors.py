"""Translation of errors into HTTP status codes and the error envelope."""
from http import HTTPStatus
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.app.logging import get_logger
from src.client.schemas import ErrorResponse, FieldErrorResponse
from src.shared.exceptions import DomainError, ErrorKind, FieldIssue, InvalidInput, field_issues

logger = get_logger(__name__)

# One entry per ErrorKind; tests assert the table stays exhaustive.
ERROR_STATUS: dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.VALIDATION: (status.HTTP_400_BAD_REQUEST, "Validation Error"),
    ErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Not Found"),
    ErrorKind.CONFLICT: (status.HTTP_409_CONFLICT, "Conflict"),
}

VALIDATION_MESSAGE = "Request validation failed"
UNEXPECTED_MESSAGE = "An unexpected error occurred"


def error_response(
    status_code: int,
    error: str,
    message: str,
    details: Optional[list[FieldIssue]] = None,
) -> JSONResponse:
    """Build the JSON error envelope."""
    body = ErrorResponse(
        error=error,
        message=message,
        details=[FieldErrorResponse(field=d.field, message=d.message) for d in details] if details else None,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _validation_response(details: list[FieldIssue]) -> JSONResponse:
    status_code, label = ERROR_STATUS[ErrorKind.VALIDATION]
    return error_response(status_code, label, VALIDATION_MESSAGE, details)


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code, label = ERROR_STATUS[exc.kind]
    logger.warning("%s %s -> %d: %s", request.method, request.url.path, status_code, exc)
    if isinstance(exc, InvalidInput):
        return _validation_response(exc.details)
    return error_response(status_code, label, str(exc))


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = field_issues(list(exc.errors()))
    logger.warning("%s %s -> 400: %d invalid field(s)", request.method, request.url.path, len(details))
    return _validation_response(details)


async def handle_pydantic_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return _validation_response(field_issues(exc.errors()))


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    phrase = HTTPStatus(exc.status_code).phrase
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = "The requested resource was not found"
    else:
        message = exc.detail if isinstance(exc.detail, str) else phrase
    return error_response(exc.status_code, phrase, message)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    # Detail stays in the server log; the caller only sees a generic message
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", UNEXPECTED_MESSAGE
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the error translator on the application."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(ValidationError, handle_pydantic_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
