"""Dependency wiring for routes."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Annotated
from uuid import uuid4

from fastapi import Depends, Path, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from movie_api.adapters.auth import BearerTokenStrategy, LocalStrategy, TokenDecoder, TokenIssuer
from movie_api.core.config import Settings, get_settings
from movie_api.core.logging_safety import safe_log_identifier
from movie_api.domain.auth_result import AuthFailure, AuthFailureKind
from movie_api.errors import ApiError
from movie_api.repositories.memory import InMemoryStore
from movie_api.schemas.auth import AuthPrincipal
from movie_api.services.auth import AuthService
from movie_api.services.movies import MovieService
from movie_api.services.users import UserService

bearer_scheme = HTTPBearer(auto_error=False, scheme_name="bearerAuth")
logger = logging.getLogger(__name__)

_FAILURE_CODES: dict[AuthFailureKind, str] = {
    AuthFailureKind.NO_TOKEN: "NO_TOKEN",
    AuthFailureKind.TOKEN_INVALID: "TOKEN_INVALID",
    AuthFailureKind.TOKEN_EXPIRED: "TOKEN_EXPIRED",
    AuthFailureKind.USER_NOT_FOUND: "UNAUTHORIZED",
    AuthFailureKind.INVALID_CREDENTIALS: "UNAUTHORIZED",
}


def _auth_error(failure: AuthFailure) -> ApiError:
    return ApiError(
        status_code=401,
        code=_FAILURE_CODES[failure.kind],
        message="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


def _request_correlation_id(request: Request) -> str:
    existing = getattr(request.state, "correlation_id", None)
    if isinstance(existing, str) and existing:
        return existing

    correlation_id = request.headers.get("X-Correlation-Id")
    if correlation_id:
        request.state.correlation_id = correlation_id
        return correlation_id

    generated = f"req-{uuid4()}"
    request.state.correlation_id = generated
    return generated


def get_request_correlation_id(request: Request) -> str:
    return _request_correlation_id(request)


def get_store(request: Request) -> InMemoryStore:
    return request.app.state.store


def get_token_issuer(settings: Annotated[Settings, Depends(get_settings)]) -> TokenIssuer:
    return TokenIssuer(
        settings.jwt_secret.get_secret_value(),
        expires_in=timedelta(days=settings.jwt_expires_days),
    )


def get_token_decoder(settings: Annotated[Settings, Depends(get_settings)]) -> TokenDecoder:
    return TokenDecoder(settings.jwt_secret.get_secret_value())


def get_local_strategy(store: Annotated[InMemoryStore, Depends(get_store)]) -> LocalStrategy:
    return LocalStrategy(store)


def get_bearer_strategy(
    store: Annotated[InMemoryStore, Depends(get_store)],
    decoder: Annotated[TokenDecoder, Depends(get_token_decoder)],
) -> BearerTokenStrategy:
    return BearerTokenStrategy(store, decoder)


async def get_authenticated_principal(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Security(bearer_scheme)],
    strategy: Annotated[BearerTokenStrategy, Depends(get_bearer_strategy)],
) -> AuthPrincipal:
    """Validate bearer token and attach normalized principal to request context."""
    correlation_id = _request_correlation_id(request)
    safe_correlation_id = safe_log_identifier(correlation_id, prefix="cid")
    token = credentials.credentials if credentials is not None else None

    result = strategy.verify(token)
    if isinstance(result, AuthFailure):
        logger.warning(
            "auth.rejected correlation_id=%s method=%s path=%s reason=%s",
            safe_correlation_id,
            request.method,
            request.url.path,
            result.kind.value,
        )
        raise _auth_error(result)

    logger.info(
        "auth.accepted correlation_id=%s method=%s path=%s principal_id=%s",
        safe_correlation_id,
        request.method,
        request.url.path,
        safe_log_identifier(result.user_id, prefix="pid"),
    )
    request.state.auth_principal = result
    return result


async def require_same_user(
    username: Annotated[str, Path()],
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
) -> AuthPrincipal:
    """Allow the request only when the path names the caller's own account."""
    if principal.username != username:
        logger.warning(
            "auth.forbidden principal_id=%s reason=username_mismatch",
            safe_log_identifier(principal.user_id, prefix="pid"),
        )
        raise ApiError(status_code=403, code="PERMISSION_DENIED", message="Permission denied")
    return principal


def get_auth_service(
    strategy: Annotated[LocalStrategy, Depends(get_local_strategy)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> AuthService:
    return AuthService(strategy, issuer)


def get_user_service(store: Annotated[InMemoryStore, Depends(get_store)]) -> UserService:
    return UserService(store)


def get_movie_service(store: Annotated[InMemoryStore, Depends(get_store)]) -> MovieService:
    return MovieService(store)
