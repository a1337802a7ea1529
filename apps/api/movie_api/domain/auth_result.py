"""Authentication outcomes shared by the login and bearer strategies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from movie_api.schemas.auth import AuthPrincipal


class AuthFailureKind(StrEnum):
    INVALID_CREDENTIALS = "invalid-credentials"
    USER_NOT_FOUND = "user-not-found"
    TOKEN_INVALID = "token-invalid"
    TOKEN_EXPIRED = "token-expired"
    NO_TOKEN = "no-token"


@dataclass(frozen=True, slots=True)
class AuthFailure:
    """Tagged reason an authentication or verification step did not succeed.

    ``detail`` is for server-side logs only and is never sent to callers.
    """

    kind: AuthFailureKind
    detail: str | None = None


AuthResult = AuthPrincipal | AuthFailure


__all__ = ["AuthFailure", "AuthFailureKind", "AuthResult"]
