"""Username/password login strategy."""

from __future__ import annotations

import logging
from collections.abc import Callable

from movie_api.adapters.auth.base import AuthStrategy, CredentialStore, principal_from_record
from movie_api.adapters.auth.passwords import hash_password, verify_password
from movie_api.core.logging_safety import safe_log_identifier
from movie_api.domain.auth_result import AuthFailure, AuthFailureKind, AuthResult

logger = logging.getLogger(__name__)

# Checked against on unknown usernames so both rejections cost one hash verification.
_UNKNOWN_USER_HASH = hash_password("unknown-user-placeholder")


class LocalStrategy(AuthStrategy):
    """Checks a username and password against the credential store.

    Unknown usernames and wrong passwords produce the same
    ``invalid-credentials`` failure; only the server log tells them apart.
    """

    def __init__(
        self,
        store: CredentialStore,
        password_verifier: Callable[[str, str], bool] = verify_password,
    ) -> None:
        super().__init__(store)
        self._verify_password = password_verifier

    def authenticate(self, username: str, password: str) -> AuthResult:
        safe_username = safe_log_identifier(username, prefix="uname")
        record = self._store.find_user_by_username(username)
        if record is None:
            self._verify_password(password, _UNKNOWN_USER_HASH)
            logger.info("login.rejected username=%s reason=user_not_found", safe_username)
            return AuthFailure(AuthFailureKind.INVALID_CREDENTIALS, detail="user_not_found")

        if not self._verify_password(password, record.password_hash):
            logger.info("login.rejected username=%s reason=password_mismatch", safe_username)
            return AuthFailure(AuthFailureKind.INVALID_CREDENTIALS, detail="password_mismatch")

        return principal_from_record(record)


__all__ = ["LocalStrategy"]
