"""
Translate domain exceptions into JSON error responses.

Body shape for every mapped error: ``{"error": <message>, "code": <code>}``.
"""
import logging

from fastapi import FastAPI, status
from starlette.requests import Request
from starlette.responses import JSONResponse

from storefront.errors import (
    AuthenticationError,
    DatabaseError,
    DomainError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Map exception types to HTTP status codes
ERROR_STATUS_CODES: dict[type, int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    DatabaseError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _status_for(exc: DomainError) -> int | None:
    # Nearest mapped ancestor wins so subclasses inherit their parent's status
    for klass in type(exc).__mro__:
        if klass in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[klass]
    return None


def error_response(exc: DomainError) -> JSONResponse:
    status_code = _status_for(exc)
    if status_code is None:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE, "code": "INTERNAL_ERROR"},
        )
    # Driver messages stay in the logs
    message = INTERNAL_ERROR_MESSAGE if isinstance(exc, DatabaseError) else exc.message
    return JSONResponse(status_code=status_code, content={"error": message, "code": exc.code})


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.warning(
        "Request error: message=%s code=%s method=%s url=%s",
        exc.message,
        exc.code,
        request.method,
        request.url,
    )
    return error_response(exc)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
