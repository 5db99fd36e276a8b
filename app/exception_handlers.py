"""
Translates domain errors and request validation failures into JSON responses.

Every error body carries status, message and timestamp. Validation failures
add an ``errors`` map of field name -> message.
"""
import logging
from datetime import datetime
from typing import Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.constants import ErrorMessages
from app.exceptions import TeamManagementError
from app.schemas import ErrorResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = ("body", "query", "path")


def field_errors(exc: RequestValidationError) -> Dict[str, str]:
    """
    Flattens pydantic errors into field -> first message.

    ("body", "teamIds", 0) becomes "teamIds.0"; an error on the whole body
    is reported under "request".
    """
    errors = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in _LOCATION_PREFIXES]
        field = ".".join(loc) or "request"
        errors.setdefault(field, error.get("msg", "Invalid value"))
    return errors


def _error_response(status_code: int, message: str) -> JSONResponse:
    body = ErrorResponse(status=status_code, message=message, timestamp=datetime.now())
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def register_error_handlers(app: FastAPI) -> None:
    """
    Register global error handlers on the app.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(TeamManagementError)
    async def domain_error_handler(request: Request, exc: TeamManagementError) -> JSONResponse:
        logger.warning(
            "%s %d: %s | path=%s",
            type(exc).__name__,
            exc.status_code,
            exc.message,
            request.url.path
        )
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = field_errors(exc)
        logger.info("Validation failed | path=%s | fields=%s", request.url.path, sorted(errors))
        body = ValidationErrorResponse(
            status=400,
            message=ErrorMessages.VALIDATION_FAILED,
            errors=errors,
            timestamp=datetime.now()
        )
        return JSONResponse(status_code=400, content=body.model_dump(mode="json"))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled exception | path=%s | type=%s",
            request.url.path,
            type(exc).__name__
        )
        return _error_response(500, ErrorMessages.UNEXPECTED_ERROR.format(exc))
