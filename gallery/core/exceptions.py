"""Application errors and their HTTP translation."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException


class AppError(Exception):
    """Base error surfaced to API clients as ``{"error": message}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed or missing request input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."


class NotFoundError(AppError):
    """A referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class ServiceUnavailableError(AppError):
    """A feature depends on configuration that is not present."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = "Service unavailable."


class InternalError(AppError):
    """Storage layer failure. Details stay in the server log."""


# Messages for request fields, keyed by the field name in the error location
FIELD_MESSAGES = {
    "url": "Image URL is required and must be a string.",
    "content": "Content is required and must be a string.",
    "image_id": "Invalid image ID.",
}


def validation_message(exc: RequestValidationError) -> str:
    """Build a human readable message from the first validation error."""
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        for part in reversed(loc):
            if part in FIELD_MESSAGES:
                return FIELD_MESSAGES[part]
        if error.get("type") == "json_invalid":
            return "Request body must be valid JSON."
        if loc == ["body"]:
            return "Request body must be a JSON object."
        return error.get("msg") or ValidationError.default_message
    return ValidationError.default_message


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render an AppError as JSON."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Translate FastAPI request validation failures into a 400 ValidationError."""
    error = ValidationError(validation_message(exc))
    logger.debug(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return await app_error_handler(request, error)


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render framework HTTP errors (unknown route, bad method) in the same shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler."""
    logger.opt(exception=exc).error(
        f"Unhandled exception on {request.method} {request.url.path}"
    )
    return await app_error_handler(request, InternalError())


def register_exception_handlers(app: FastAPI) -> None:
    """Attach error handlers to the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
