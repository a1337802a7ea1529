"""HS256 bearer token issuance and decoding."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from movie_api.schemas.auth import AuthPrincipal

JWT_ALGORITHM = "HS256"
DEFAULT_TOKEN_LIFETIME = timedelta(days=7)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TokenIssuer:
    """Signs time-limited bearer tokens for authenticated principals."""

    def __init__(
        self,
        secret: str,
        *,
        expires_in: timedelta = DEFAULT_TOKEN_LIFETIME,
        clock: Clock = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("jwt_secret_blank")
        self._secret = secret
        self._expires_in = expires_in
        self._clock = clock

    def issue(self, principal: AuthPrincipal) -> str:
        now = self._clock()
        payload: dict[str, Any] = {
            "sub": principal.username,
            "user_id": principal.user_id,
            "username": principal.username,
            "iat": int(now.timestamp()),
            "exp": int((now + self._expires_in).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)


class TokenDecoder:
    """Validates signature and expiry of bearer tokens.

    Raises ``jwt.ExpiredSignatureError`` for expired tokens and
    ``jwt.InvalidTokenError`` for anything else that fails validation.
    """

    def __init__(self, secret: str) -> None:
        if not secret:
            raise ValueError("jwt_secret_blank")
        self._secret = secret

    def decode(self, token: str) -> dict[str, Any]:
        return jwt.decode(
            token,
            self._secret,
            algorithms=[JWT_ALGORITHM],
            options={"require": ["exp", "iat", "sub"]},
        )


__all__ = ["DEFAULT_TOKEN_LIFETIME", "JWT_ALGORITHM", "TokenDecoder", "TokenIssuer"]
