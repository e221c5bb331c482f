import time

from fastapi import Request

from responses import PrettyJSONResponse


class ApiError(Exception):
    """Request-level failure reported as {"error", "timestamp"}."""

    status_code = 404

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFound(ApiError):
    pass


class InvalidLevel(ApiError):
    pass


class BadUsage(ApiError):
    pass


def error_body(message: str) -> dict:
    return {"error": message, "timestamp": int(time.time())}


async def api_error_handler(request: Request, exc: ApiError):
    return PrettyJSONResponse(status_code=exc.status_code, content=error_body(exc.message))
