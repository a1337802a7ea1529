"""Movie catalogue service layer."""

from movie_api.errors import ApiError
from movie_api.repositories.memory import InMemoryStore, MovieRecord
from movie_api.schemas.movie import Director, Genre, Movie


class MovieService:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def list_movies(self) -> list[Movie]:
        movies = self._store.list_movies()
        if not movies:
            raise ApiError(status_code=404, code="RESOURCE_NOT_FOUND", message="No movies found")
        return [self._to_movie(record) for record in movies]

    def get_movie(self, title: str) -> Movie:
        return self._to_movie(self._require(title))

    def get_genre(self, title: str) -> Genre:
        record = self._require(title)
        return Genre(name=record.genre.name, description=record.genre.description)

    def list_movies_by_director(self, name: str) -> list[Movie]:
        return [self._to_movie(record) for record in self._store.find_movies_by_director(name)]

    def _require(self, title: str) -> MovieRecord:
        record = self._store.find_movie_by_title(title)
        if record is None:
            raise ApiError(status_code=404, code="RESOURCE_NOT_FOUND", message="Resource not found")
        return record

    @staticmethod
    def _to_movie(record: MovieRecord) -> Movie:
        return Movie(
            id=record.id,
            title=record.title,
            description=record.description,
            genre=Genre(name=record.genre.name, description=record.genre.description),
            director=Director(
                name=record.director.name,
                bio=record.director.bio,
                birth=record.director.birth,
                death=record.director.death,
            ),
            image_path=record.image_path,
            featured=record.featured,
        )
