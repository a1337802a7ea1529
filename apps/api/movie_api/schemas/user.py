"""User API schemas."""

from datetime import date

from pydantic import BaseModel, EmailStr, Field, field_validator


def _check_alphanumeric(value: str) -> str:
    if not value.isalnum() or not value.isascii():
        raise ValueError("Username contains non alphanumeric characters - not allowed.")
    return value


class CreateUserRequest(BaseModel):
    username: str = Field(min_length=5)
    password: str = Field(min_length=1)
    email: EmailStr
    birthday: date | None = None

    @field_validator("username")
    @classmethod
    def username_is_alphanumeric(cls, value: str) -> str:
        return _check_alphanumeric(value)


class UpdateUserRequest(BaseModel):
    """Replacement profile for the caller's own account.

    ``password`` is optional; the stored hash is only replaced when a new
    password is supplied.
    """

    username: str = Field(min_length=1)
    password: str | None = None
    email: EmailStr
    birthday: date | None = None

    @field_validator("username")
    @classmethod
    def username_is_alphanumeric(cls, value: str) -> str:
        return _check_alphanumeric(value)


class User(BaseModel):
    id: str
    username: str
    email: str
    birthday: date | None = None
    favorites: list[str] = Field(default_factory=list)


class AvailabilityResponse(BaseModel):
    message: str


class DeleteUserResponse(BaseModel):
    message: str
