"""
Service-layer exceptions

Services raise these; the handlers below (registered by resort.main) turn them
into JSON error responses with the matching HTTP status code.
"""
import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ResortError(ValueError):
    """Base class for expected business errors"""
    status_code = status.HTTP_400_BAD_REQUEST


class ValidationError(ResortError):
    """Missing or invalid input"""
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(ResortError):
    """Invalid credentials or session"""
    status_code = status.HTTP_401_UNAUTHORIZED


class AccountDisabledError(ResortError):
    """Account exists but is deactivated"""
    status_code = status.HTTP_403_FORBIDDEN


class PermissionDeniedError(ResortError):
    """Authenticated, but the role lacks the permission"""
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(ResortError):
    """Record does not exist"""
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ResortError):
    """Unique field already taken"""
    status_code = status.HTTP_409_CONFLICT


async def resort_error_handler(request: Request, exc: ResortError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed request bodies with 400 and the first readable message"""
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg", message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": message, "errors": jsonable_errors(errors)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception in {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error", "error_type": type(exc).__name__},
    )


def jsonable_errors(errors) -> list:
    return [
        {"loc": [str(part) for part in e.get("loc", ())], "msg": e.get("msg"), "type": e.get("type")}
        for e in errors
    ]


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ResortError, resort_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
