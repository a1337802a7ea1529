"""User account service layer."""

from __future__ import annotations

from movie_api.adapters.auth import hash_password
from movie_api.errors import ApiError
from movie_api.repositories.memory import InMemoryStore, UserRecord
from movie_api.schemas.user import (
    AvailabilityResponse,
    CreateUserRequest,
    DeleteUserResponse,
    UpdateUserRequest,
    User,
)


def _not_found() -> ApiError:
    return ApiError(status_code=404, code="RESOURCE_NOT_FOUND", message="Resource not found")


def _username_taken() -> ApiError:
    return ApiError(status_code=409, code="USERNAME_TAKEN", message="Username already exists")


class UserService:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def register(self, payload: CreateUserRequest) -> User:
        if self._store.find_user_by_username(payload.username) is not None:
            raise _username_taken()

        record = self._store.create_user(
            username=payload.username,
            password_hash=hash_password(payload.password),
            email=payload.email,
            birthday=payload.birthday,
        )
        return self._to_user(record)

    def check_username(self, username: str) -> tuple[bool, AvailabilityResponse]:
        if self._store.find_user_by_username(username) is not None:
            return False, AvailabilityResponse(message="Username already exists")
        return True, AvailabilityResponse(message="Username available")

    def check_email(self, email: str) -> tuple[bool, AvailabilityResponse]:
        if self._store.find_user_by_email(email) is not None:
            return False, AvailabilityResponse(message="Email already exists")
        return True, AvailabilityResponse(message="Email available")

    def list_users(self) -> list[User]:
        return [self._to_user(record) for record in self._store.list_users()]

    def get_user(self, username: str) -> User:
        return self._to_user(self._require(username))

    def update_user(self, *, username: str, payload: UpdateUserRequest) -> User:
        record = self._require(username)
        if payload.username != record.username:
            if self._store.find_user_by_username(payload.username) is not None:
                raise _username_taken()

        password_hash = hash_password(payload.password) if payload.password else None
        updated = self._store.update_user(
            user=record,
            username=payload.username,
            email=payload.email,
            birthday=payload.birthday,
            password_hash=password_hash,
        )
        return self._to_user(updated)

    def add_favorite(self, *, username: str, movie_id: str) -> User:
        record = self._require(username)
        if self._store.get_movie(movie_id) is None:
            raise _not_found()
        return self._to_user(self._store.add_favorite(user=record, movie_id=movie_id))

    def remove_favorite(self, *, username: str, movie_id: str) -> User:
        record = self._require(username)
        return self._to_user(self._store.remove_favorite(user=record, movie_id=movie_id))

    def delete_user(self, username: str) -> DeleteUserResponse:
        if self._store.delete_user(username) is None:
            raise _not_found()
        return DeleteUserResponse(message=f"{username} was deleted.")

    def _require(self, username: str) -> UserRecord:
        record = self._store.find_user_by_username(username)
        if record is None:
            raise _not_found()
        return record

    @staticmethod
    def _to_user(record: UserRecord) -> User:
        return User(
            id=record.id,
            username=record.username,
            email=record.email,
            birthday=record.birthday,
            favorites=list(record.favorites),
        )
