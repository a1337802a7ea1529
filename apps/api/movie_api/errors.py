"""Application exception types."""

from movie_api.schemas.error import ErrorResponse


class ApiError(Exception):
    """Structured API error that maps directly to contract error payloads."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: dict | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self.payload = ErrorResponse(code=code, message=message, details=details)
        self.headers = headers
        super().__init__(message)


class StoreUnavailableError(Exception):
    """Raised by the document store when the backend cannot serve a request."""


__all__ = ["ApiError", "StoreUnavailableError"]
