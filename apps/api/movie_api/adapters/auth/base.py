"""Authentication strategy interfaces."""

from typing import Protocol

from movie_api.repositories.memory import UserRecord
from movie_api.schemas.auth import AuthPrincipal


class CredentialStore(Protocol):
    """Read access to stored credential records.

    Implementations raise ``StoreUnavailableError`` when the backend is down;
    strategies let it propagate.
    """

    def find_user_by_username(self, username: str) -> UserRecord | None: ...

    def find_user_by_id(self, user_id: str) -> UserRecord | None: ...


class AuthStrategy:
    """One of the closed set of strategies the route layer selects explicitly."""

    def __init__(self, store: CredentialStore) -> None:
        self._store = store


def principal_from_record(record: UserRecord) -> AuthPrincipal:
    """Build the request principal from a stored record, dropping the hash."""
    return AuthPrincipal(
        user_id=record.id,
        username=record.username,
        email=record.email,
        birthday=record.birthday,
        favorites=list(record.favorites),
    )


__all__ = ["AuthStrategy", "CredentialStore", "principal_from_record"]
