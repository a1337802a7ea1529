"""Bearer token strategy."""

from __future__ import annotations

import logging

import jwt

from movie_api.adapters.auth.base import AuthStrategy, CredentialStore, principal_from_record
from movie_api.adapters.auth.tokens import TokenDecoder
from movie_api.core.logging_safety import safe_log_identifier
from movie_api.domain.auth_result import AuthFailure, AuthFailureKind, AuthResult

logger = logging.getLogger(__name__)


class BearerTokenStrategy(AuthStrategy):
    """Resolves a bearer token back to a live principal.

    Checks run in order: presence, signature, expiry, claims, then a store
    lookup so that tokens of deleted users stop working.
    """

    def __init__(self, store: CredentialStore, decoder: TokenDecoder) -> None:
        super().__init__(store)
        self._decoder = decoder

    def verify(self, token: str | None) -> AuthResult:
        if token is None or not token.strip():
            return AuthFailure(AuthFailureKind.NO_TOKEN)

        try:
            claims = self._decoder.decode(token.strip())
        except jwt.ExpiredSignatureError:
            return AuthFailure(AuthFailureKind.TOKEN_EXPIRED)
        except jwt.InvalidTokenError as exc:
            return AuthFailure(AuthFailureKind.TOKEN_INVALID, detail=type(exc).__name__)

        user_id = str(claims.get("user_id") or "").strip()
        if not user_id or not str(claims.get("sub") or "").strip():
            return AuthFailure(AuthFailureKind.TOKEN_INVALID, detail="missing_identity_claim")

        record = self._store.find_user_by_id(user_id)
        if record is None:
            logger.info(
                "auth.user_missing principal_id=%s",
                safe_log_identifier(user_id, prefix="pid"),
            )
            return AuthFailure(AuthFailureKind.USER_NOT_FOUND)

        return principal_from_record(record)


__all__ = ["BearerTokenStrategy"]
