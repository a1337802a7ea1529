"""Movie routes."""

from typing import Annotated

from fastapi import APIRouter, Depends

from movie_api.routes.dependencies import get_authenticated_principal, get_movie_service
from movie_api.schemas.error import NoLeakNotFoundError, UnauthorizedError
from movie_api.schemas.movie import Genre, Movie
from movie_api.services.movies import MovieService

router = APIRouter(
    prefix="/movies",
    tags=["Movies"],
    dependencies=[Depends(get_authenticated_principal)],
    responses={401: {"model": UnauthorizedError}},
)


@router.get(
    "",
    response_model=list[Movie],
    responses={404: {"model": NoLeakNotFoundError}},
)
async def list_movies(
    service: Annotated[MovieService, Depends(get_movie_service)],
) -> list[Movie]:
    return service.list_movies()


@router.get(
    "/genre/{title}",
    response_model=Genre,
    responses={404: {"model": NoLeakNotFoundError}},
)
async def get_genre(
    title: str,
    service: Annotated[MovieService, Depends(get_movie_service)],
) -> Genre:
    return service.get_genre(title)


@router.get("/director/{name}", response_model=list[Movie])
async def list_movies_by_director(
    name: str,
    service: Annotated[MovieService, Depends(get_movie_service)],
) -> list[Movie]:
    return service.list_movies_by_director(name)


@router.get(
    "/{title}",
    response_model=Movie,
    responses={404: {"model": NoLeakNotFoundError}},
)
async def get_movie(
    title: str,
    service: Annotated[MovieService, Depends(get_movie_service)],
) -> Movie:
    return service.get_movie(title)
