"""Error envelope and the handlers that produce it.

Domain failures, request validation errors and framework HTTP errors
are all answered with:

    {
        "status": false,
        "statusCode": 409,
        "correlationId": "...",
        "timestamp": "...",
        "path": "/auth/signup",
        "error": {"code": "EMAIL_ALREADY_EXISTS", "message": "..."}
    }

``ERROR_CODE_TO_STATUS`` is the only place an error code becomes an HTTP
status. ``details`` on a DomainException are logged, never returned.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from warden.domain.shared.exceptions import (
    DomainException,
    DuplicateOperationError,
    ErrorCode,
)
from warden.domain.shared.time import utc_now
from warden.infrastructure.observability.context import get_correlation_id

logger = logging.getLogger(__name__)


ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEAK_PASSWORD: status.HTTP_400_BAD_REQUEST,
    # 401
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    # 403
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    # 404
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.AUTH_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.USER_CREATION_FAILED: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_OPERATION: status.HTTP_409_CONFLICT,
    ErrorCode.IDEMPOTENCY_KEY_REQUIRED: status.HTTP_409_CONFLICT,
    # 500
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_HTTP_STATUS_TO_CODE: dict[int, ErrorCode] = {
    status.HTTP_400_BAD_REQUEST: ErrorCode.VALIDATION_ERROR,
    status.HTTP_401_UNAUTHORIZED: ErrorCode.UNAUTHORIZED,
    status.HTTP_403_FORBIDDEN: ErrorCode.FORBIDDEN,
    status.HTTP_404_NOT_FOUND: ErrorCode.NOT_FOUND,
    status.HTTP_422_UNPROCESSABLE_ENTITY: ErrorCode.VALIDATION_ERROR,
}


def status_for_code(code: ErrorCode) -> int:
    """Map an error code to its HTTP status; unknown codes are 400."""
    return ERROR_CODE_TO_STATUS.get(code, status.HTTP_400_BAD_REQUEST)


def build_error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    extra: dict[str, Any] | None = None,
) -> JSONResponse:
    """Build the error envelope; ``extra`` keys are merged into ``error``."""
    correlation_id = get_correlation_id() or getattr(
        request.state,
        "correlation_id",
        "",
    )
    error: dict[str, Any] = {"code": code, "message": message}
    if extra:
        error.update(extra)
    return JSONResponse(
        status_code=status_code,
        content={
            "status": False,
            "statusCode": status_code,
            "correlationId": correlation_id,
            "timestamp": utc_now().isoformat(),
            "path": request.url.path,
            "error": error,
        },
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def setup_exception_handlers(app: FastAPI) -> None:
    """Install the DomainException, validation and HTTP error handlers.

    Unexpected exceptions are not handled here; the request pipeline's
    error boundary turns them into a 500 envelope.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        status_code = status_for_code(exc.code)
        request.state.error_code = exc.code.value

        log = logger.error if status_code >= 500 else logger.warning
        log(
            "%s %s failed with %s: %s (details=%s)",
            request.method,
            request.url.path,
            exc.code.value,
            exc.message,
            exc.details,
        )

        extra = None
        if isinstance(exc, DuplicateOperationError):
            extra = {"previousResult": exc.previous_result}

        return build_error_response(
            request,
            status_code=status_code,
            code=exc.code.value,
            message=exc.message,
            extra=extra,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        request.state.error_code = ErrorCode.VALIDATION_ERROR.value
        message = _format_validation_errors(exc)
        logger.info(
            "Validation failed on %s %s: %s",
            request.method,
            request.url.path,
            message,
        )
        return build_error_response(
            request,
            status_code=status.HTTP_400_BAD_REQUEST,
            code=ErrorCode.VALIDATION_ERROR.value,
            message=message,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        default = (
            ErrorCode.INTERNAL_ERROR
            if exc.status_code >= 500
            else ErrorCode.VALIDATION_ERROR
        )
        code = _HTTP_STATUS_TO_CODE.get(exc.status_code, default)
        request.state.error_code = code.value
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        response = build_error_response(
            request,
            status_code=exc.status_code,
            code=code.value,
            message=message,
        )
        if exc.headers:
            response.headers.update(exc.headers)
        return response
