"""User account routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from movie_api.routes.dependencies import (
    get_authenticated_principal,
    get_user_service,
    require_same_user,
)
from movie_api.schemas.auth import AuthPrincipal
from movie_api.schemas.error import (
    ErrorResponse,
    NoLeakNotFoundError,
    RequestValidationErrorResponse,
    UnauthorizedError,
)
from movie_api.schemas.user import (
    AvailabilityResponse,
    CreateUserRequest,
    DeleteUserResponse,
    UpdateUserRequest,
    User,
)
from movie_api.services.users import UserService

router = APIRouter(prefix="/users", tags=["Users"])

_PROTECTED_RESPONSES = {401: {"model": UnauthorizedError}}
_OWNER_RESPONSES = {
    401: {"model": UnauthorizedError},
    403: {"model": ErrorResponse},
    404: {"model": NoLeakNotFoundError},
}


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}, 422: {"model": RequestValidationErrorResponse}},
)
async def register_user(
    payload: CreateUserRequest,
    service: Annotated[UserService, Depends(get_user_service)],
) -> User:
    return service.register(payload)


@router.get(
    "/check-username/{username}",
    response_model=AvailabilityResponse,
    responses={400: {"model": AvailabilityResponse}},
)
async def check_username(
    username: str,
    service: Annotated[UserService, Depends(get_user_service)],
) -> JSONResponse:
    available, payload = service.check_username(username)
    status_code = status.HTTP_200_OK if available else status.HTTP_400_BAD_REQUEST
    return JSONResponse(status_code=status_code, content=payload.model_dump())


@router.get(
    "/check-email/{email}",
    response_model=AvailabilityResponse,
    responses={400: {"model": AvailabilityResponse}},
)
async def check_email(
    email: str,
    service: Annotated[UserService, Depends(get_user_service)],
) -> JSONResponse:
    available, payload = service.check_email(email)
    status_code = status.HTTP_200_OK if available else status.HTTP_400_BAD_REQUEST
    return JSONResponse(status_code=status_code, content=payload.model_dump())


@router.get("", response_model=list[User], responses=_PROTECTED_RESPONSES)
async def list_users(
    _: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> list[User]:
    return service.list_users()


@router.get(
    "/{username}",
    response_model=User,
    responses={**_PROTECTED_RESPONSES, 404: {"model": NoLeakNotFoundError}},
)
async def get_user(
    username: str,
    _: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> User:
    return service.get_user(username)


@router.put(
    "/{username}",
    response_model=User,
    responses={
        **_OWNER_RESPONSES,
        409: {"model": ErrorResponse},
        422: {"model": RequestValidationErrorResponse},
    },
)
async def update_user(
    username: str,
    payload: UpdateUserRequest,
    _: Annotated[AuthPrincipal, Depends(require_same_user)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> User:
    return service.update_user(username=username, payload=payload)


@router.post("/{username}/movies/{movieId}", response_model=User, responses=_OWNER_RESPONSES)
async def add_favorite(
    username: str,
    movieId: str,
    _: Annotated[AuthPrincipal, Depends(require_same_user)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> User:
    return service.add_favorite(username=username, movie_id=movieId)


@router.delete("/{username}/movies/{movieId}", response_model=User, responses=_OWNER_RESPONSES)
async def remove_favorite(
    username: str,
    movieId: str,
    _: Annotated[AuthPrincipal, Depends(require_same_user)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> User:
    return service.remove_favorite(username=username, movie_id=movieId)


@router.delete("/{username}", response_model=DeleteUserResponse, responses=_OWNER_RESPONSES)
async def delete_user(
    username: str,
    _: Annotated[AuthPrincipal, Depends(require_same_user)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> DeleteUserResponse:
    return service.delete_user(username)
