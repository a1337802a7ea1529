"""Authentication schemas."""

from datetime import date

from pydantic import BaseModel, Field

from movie_api.schemas.user import User


class AuthPrincipal(BaseModel):
    """Normalized authenticated principal used by business services."""

    user_id: str = Field(min_length=1)
    username: str = Field(min_length=1)
    email: str
    birthday: date | None = None
    favorites: list[str] = Field(default_factory=list)

    def to_user(self) -> User:
        return User(
            id=self.user_id,
            username=self.username,
            email=self.email,
            birthday=self.birthday,
            favorites=list(self.favorites),
        )


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    user: User
    token: str
