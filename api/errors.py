"""
API Error Handling

Standardized error handling for the API.
"""

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from api.models.responses import ErrorResponse, ErrorDetail
from core.schemas.errors import AllowlistException, ErrorCodes


# Status codes for domain errors; anything unlisted is a 400
ERROR_STATUS_CODES: dict[str, int] = {
    ErrorCodes.NOT_A_MEMBER: 404,
    ErrorCodes.ALLOWLIST_SOURCE_ERROR: 500,
    ErrorCodes.CONFIG_ERROR: 500,
}


class APIError(Exception):
    """Base API error with structured response."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            ok=False,
            error=ErrorDetail(
                code=self.code,
                message=self.message,
                details=self.details,
            ),
        )


class AllowlistNotConfiguredError(APIError):
    """No allowlist file or proof book is configured on this server."""

    def __init__(self, message: str = "No allowlist is configured on this server"):
        super().__init__(
            code="ALLOWLIST_NOT_CONFIGURED",
            message=message,
            status_code=404,
        )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handle APIError exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(),
    )


async def allowlist_error_handler(request: Request, exc: AllowlistException) -> JSONResponse:
    """Handle domain exceptions raised by core."""
    return JSONResponse(
        status_code=ERROR_STATUS_CODES.get(exc.code, 400),
        content=ErrorResponse(
            ok=False,
            error=ErrorDetail(
                code=exc.code,
                message=exc.message,
                details=exc.details,
            ),
        ).model_dump(),
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            ok=False,
            error=ErrorDetail(
                code="INTERNAL_ERROR",
                message="An unexpected error occurred",
                details={"type": type(exc).__name__},
            ),
        ).model_dump(),
    )
