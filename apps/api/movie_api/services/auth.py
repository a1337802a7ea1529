"""Login service layer."""

from __future__ import annotations

import logging

from movie_api.adapters.auth import LocalStrategy, TokenIssuer
from movie_api.core.logging_safety import safe_log_identifier
from movie_api.domain.auth_result import AuthFailure
from movie_api.errors import ApiError
from movie_api.schemas.auth import LoginResponse

logger = logging.getLogger(__name__)

LOGIN_FAILED_MESSAGE = "Incorrect username or password."


class AuthService:
    def __init__(self, strategy: LocalStrategy, issuer: TokenIssuer) -> None:
        self._strategy = strategy
        self._issuer = issuer

    def login(self, *, username: str, password: str) -> LoginResponse:
        result = self._strategy.authenticate(username, password)
        if isinstance(result, AuthFailure):
            raise ApiError(
                status_code=401,
                code="INVALID_CREDENTIALS",
                message=LOGIN_FAILED_MESSAGE,
                headers={"WWW-Authenticate": "Bearer"},
            )

        token = self._issuer.issue(result)
        logger.info(
            "login.accepted principal_id=%s",
            safe_log_identifier(result.user_id, prefix="pid"),
        )
        return LoginResponse(user=result.to_user(), token=token)
