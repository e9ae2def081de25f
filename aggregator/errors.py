from fastapi import Request
from fastapi.responses import JSONResponse

from .schemas import ErrorDetail, ErrorEnvelope

BAD_REQUEST = "BAD_REQUEST"
UPSTREAM_ERROR = "UPSTREAM_ERROR"
UPSTREAM_INVALID_RESPONSE = "UPSTREAM_INVALID_RESPONSE"


class ApiError(Exception):
    """Client-visible failure, rendered as an error envelope."""

    def __init__(self, status_code: int, code: str, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message


class UpstreamError(Exception):
    """Transport failure, timeout or non-success status from a third-party API."""

    def __init__(self, message: str, status: int | None = None, body=None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body


class InvalidUpstreamResponse(Exception):
    """Upstream answered 2xx but the payload lacks required fields."""


def bad_request(message: str) -> ApiError:
    return ApiError(400, BAD_REQUEST, message)


def upstream_error(exc: UpstreamError, fallback: str) -> ApiError:
    return ApiError(502, UPSTREAM_ERROR, exc.message or fallback)


def invalid_response(message: str) -> ApiError:
    return ApiError(502, UPSTREAM_INVALID_RESPONSE, message)


async def api_error_handler(request: Request, exc: ApiError):
    body = ErrorEnvelope(error=ErrorDetail(code=exc.code, message=exc.message))
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())
