"""
Global Exception Handlers for the composer and renderer hosts

Error Response Format:
{
    "error": {
        "status_code": 400,
        "error_code": "DSL_INVALID_PAGE",
        "message": "Invalid page",
        "type": "Bad Request",
        "details": {"violations": [{"path": "/version", "message": "Field required", "type": "missing"}]},
        "path": "/v1/render"
    }
}

Render and registry failures are reported as a generic render failure;
5xx responses never carry internal details.
"""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cms_sdk.exceptions import CMSError, ErrorCode, PluginRegistryError, RenderError, ValidationError

logger = logging.getLogger(__name__)

GENERIC_INTERNAL_MESSAGE = "An unexpected error occurred. Please try again later."


def create_error_response(
    status_code: int,
    message: str,
    error_code: str | ErrorCode | None = None,
    details: dict[str, Any] | None = None,
    path: str | None = None,
) -> JSONResponse:
    """
    Create a standardized error response.

    Args:
        status_code: HTTP status code
        message: Human-readable error message
        error_code: Machine-readable error code
        details: Additional error details
        path: Request path that caused the error

    Returns:
        JSONResponse with standardized error format
    """
    error_response: dict[str, Any] = {
        "error": {
            "status_code": status_code,
            "message": message,
            "type": get_error_type(status_code),
        }
    }

    if error_code:
        error_response["error"]["error_code"] = error_code.value if isinstance(error_code, ErrorCode) else error_code

    if details:
        error_response["error"]["details"] = details

    if path:
        error_response["error"]["path"] = path

    return JSONResponse(status_code=status_code, content=error_response)


def get_error_type(status_code: int) -> str:
    """Get a human-readable error type based on status code."""
    error_types = {
        400: "Bad Request",
        404: "Not Found",
        405: "Method Not Allowed",
        422: "Validation Error",
        500: "Internal Server Error",
    }
    return error_types.get(status_code, "Error")


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Invalid DSL input: 400 with the structured violation list."""
    logger.warning(
        f"DSL validation failed: {exc.message}",
        extra={"path": request.url.path, "error_code": exc.error_code.value},
    )
    return create_error_response(
        status_code=status.HTTP_400_BAD_REQUEST,
        message=exc.message,
        error_code=exc.error_code,
        details={"violations": exc.details},
        path=request.url.path,
    )


async def render_error_handler(request: Request, exc: CMSError) -> JSONResponse:
    """Disallowed/unknown plugins and bad params: generic 400 render failure."""
    logger.warning(
        f"Render failed: {exc.message}",
        extra={"path": request.url.path, "error_code": exc.error_code.value},
    )
    details = exc.details if isinstance(exc.details, dict) else {"violations": exc.details}
    return create_error_response(
        status_code=status.HTTP_400_BAD_REQUEST,
        message="Render failed",
        error_code=exc.error_code,
        details=details or None,
        path=request.url.path,
    )


async def cms_exception_handler(request: Request, exc: CMSError) -> JSONResponse:
    """Any other CMSError: its own status; 5xx responses are stripped of detail."""
    if exc.status_code >= 500:
        logger.error(
            f"CMSError: {exc.message}",
            exc_info=exc,
            extra={"path": request.url.path, "error_code": exc.error_code.value},
        )
        return create_error_response(
            status_code=exc.status_code,
            message=GENERIC_INTERNAL_MESSAGE,
            error_code=ErrorCode.INTERNAL_ERROR,
            path=request.url.path,
        )

    logger.warning(
        f"CMSError: {exc.message}",
        extra={"path": request.url.path, "error_code": exc.error_code.value},
    )
    return create_error_response(
        status_code=exc.status_code,
        message=exc.message,
        error_code=exc.error_code,
        details=exc.details if isinstance(exc.details, dict) and exc.details else None,
        path=request.url.path,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.warning(f"HTTPException: {exc.detail}", extra={"status_code": exc.status_code, "path": request.url.path})
    return create_error_response(
        status_code=exc.status_code,
        message=str(exc.detail),
        error_code=ErrorCode.RESOURCE_NOT_FOUND if exc.status_code == 404 else ErrorCode.BAD_REQUEST,
        path=request.url.path,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request envelopes (e.g. a non-object body)."""
    errors = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"] if loc != "body")
        errors.append({"field": field, "message": error["msg"], "type": error["type"]})

    logger.warning(f"Request validation error on {request.url.path}", extra={"path": request.url.path})

    return create_error_response(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        message="Validation error",
        error_code=ErrorCode.BAD_REQUEST,
        details={"validation_errors": errors},
        path=request.url.path,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Unexpected failures: 500, internal details are not exposed."""
    logger.error(
        f"Unhandled exception: {exc}",
        exc_info=exc,
        extra={"path": request.url.path, "method": request.method},
    )
    return create_error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message=GENERIC_INTERNAL_MESSAGE,
        error_code=ErrorCode.INTERNAL_ERROR,
        path=request.url.path,
    )


def register_exception_handlers(app) -> None:
    """
    Register all exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RenderError, render_error_handler)
    app.add_exception_handler(PluginRegistryError, render_error_handler)
    app.add_exception_handler(CMSError, cms_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    logger.info("Exception handlers registered successfully")
