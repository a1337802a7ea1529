"""API error response schemas."""

from typing import Any
from typing import Literal

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: dict[str, Any] | None = None


class NoLeakNotFoundError(BaseModel):
    code: Literal["RESOURCE_NOT_FOUND"]
    message: str


class UnauthorizedError(BaseModel):
    code: Literal["INVALID_CREDENTIALS", "NO_TOKEN", "TOKEN_INVALID", "TOKEN_EXPIRED", "UNAUTHORIZED"]
    message: str


class ValidationErrorDetails(BaseModel):
    errors: list[dict[str, Any]]


class RequestValidationErrorResponse(BaseModel):
    code: Literal["VALIDATION_ERROR"]
    message: str
    details: ValidationErrorDetails


class StoreUnavailableErrorResponse(BaseModel):
    code: Literal["STORE_UNAVAILABLE"]
    message: str
