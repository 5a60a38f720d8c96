import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException

from quicknotes.core.modules.note.validators import describe_error

logger = logging.getLogger(__name__)

# Request parts FastAPI prefixes to error locations
_REQUEST_PARTS = {"body", "query", "path", "header", "cookie"}


def create_json_error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message}, headers=headers)


async def user_error_handler(_: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses (400)."""
    return create_json_error_response(status_code=400, message=str(exc))


async def http_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle HTTP errors raised by the framework (unreadable body, unknown route, wrong method)."""
    if not isinstance(exc, HTTPException):
        return create_json_error_response(status_code=500, message="An unexpected error occurred.")
    return create_json_error_response(status_code=exc.status_code, message=str(exc.detail), headers=exc.headers)


async def request_validation_error_handler(_: Request, exc: Exception) -> Response:
    """Handle malformed or mistyped request data rejected by FastAPI before reaching a route."""
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    if not errors:
        return create_json_error_response(status_code=400, message="Invalid request")

    first = dict(errors[0])
    loc = tuple(first.get("loc", ()))
    if loc and loc[0] in _REQUEST_PARTS:
        loc = loc[1:]
    first["loc"] = loc
    return create_json_error_response(status_code=400, message=describe_error(first))


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.exception("Unexpected error: %s", exc)
    return create_json_error_response(status_code=500, message="An unexpected error occurred.")
