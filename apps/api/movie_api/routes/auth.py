"""Login route."""

from typing import Annotated

from fastapi import APIRouter, Depends

from movie_api.routes.dependencies import get_auth_service
from movie_api.schemas.auth import LoginRequest, LoginResponse
from movie_api.schemas.error import (
    RequestValidationErrorResponse,
    StoreUnavailableErrorResponse,
    UnauthorizedError,
)
from movie_api.services.auth import AuthService

router = APIRouter(tags=["Auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        401: {"model": UnauthorizedError},
        422: {"model": RequestValidationErrorResponse},
        503: {"model": StoreUnavailableErrorResponse},
    },
)
async def login(
    payload: LoginRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> LoginResponse:
    return service.login(username=payload.username, password=payload.password)
