"""In-memory document store used by the API and tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import uuid4

from movie_api.errors import StoreUnavailableError


@dataclass(slots=True)
class GenreRecord:
    name: str
    description: str | None = None


@dataclass(slots=True)
class DirectorRecord:
    name: str
    bio: str | None = None
    birth: str | None = None
    death: str | None = None


@dataclass(slots=True)
class MovieRecord:
    id: str
    title: str
    genre: GenreRecord
    director: DirectorRecord
    description: str | None = None
    image_path: str | None = None
    featured: bool = False


@dataclass(slots=True)
class UserRecord:
    id: str
    username: str
    password_hash: str
    email: str
    created_at: datetime
    birthday: date | None = None
    favorites: list[str] = field(default_factory=list)


@dataclass(slots=True)
class InMemoryStore:
    """Simple, deterministic document store for local runs and tests.

    ``unavailable_message`` simulates a backend outage: while it is set every
    read and write raises ``StoreUnavailableError``.
    """

    users: dict[str, UserRecord] = field(default_factory=dict)
    movies: dict[str, MovieRecord] = field(default_factory=dict)
    user_write_count: int = 0
    unavailable_message: str | None = None

    def _ensure_available(self) -> None:
        if self.unavailable_message is not None:
            raise StoreUnavailableError(self.unavailable_message)

    # Users

    def find_user_by_username(self, username: str) -> UserRecord | None:
        self._ensure_available()
        for record in self.users.values():
            if record.username == username:
                return record
        return None

    def find_user_by_id(self, user_id: str) -> UserRecord | None:
        self._ensure_available()
        return self.users.get(user_id)

    def find_user_by_email(self, email: str) -> UserRecord | None:
        self._ensure_available()
        for record in self.users.values():
            if record.email == email:
                return record
        return None

    def list_users(self) -> list[UserRecord]:
        self._ensure_available()
        users = list(self.users.values())
        users.sort(key=lambda record: record.created_at)
        return users

    def create_user(
        self,
        *,
        username: str,
        password_hash: str,
        email: str,
        birthday: date | None = None,
    ) -> UserRecord:
        self._ensure_available()
        user = UserRecord(
            id=str(uuid4()),
            username=username,
            password_hash=password_hash,
            email=email,
            birthday=birthday,
            created_at=datetime.now(UTC),
        )
        self.users[user.id] = user
        self.user_write_count += 1
        return user

    def update_user(
        self,
        *,
        user: UserRecord,
        username: str,
        email: str,
        birthday: date | None,
        password_hash: str | None = None,
    ) -> UserRecord:
        """Replace profile fields; the password hash only changes when given."""
        self._ensure_available()
        user.username = username
        user.email = email
        user.birthday = birthday
        if password_hash is not None:
            user.password_hash = password_hash
        self.user_write_count += 1
        return user

    def add_favorite(self, *, user: UserRecord, movie_id: str) -> UserRecord:
        self._ensure_available()
        if movie_id not in user.favorites:
            user.favorites.append(movie_id)
            self.user_write_count += 1
        return user

    def remove_favorite(self, *, user: UserRecord, movie_id: str) -> UserRecord:
        self._ensure_available()
        if movie_id in user.favorites:
            user.favorites.remove(movie_id)
            self.user_write_count += 1
        return user

    def delete_user(self, username: str) -> UserRecord | None:
        self._ensure_available()
        user = self.find_user_by_username(username)
        if user is None:
            return None
        del self.users[user.id]
        self.user_write_count += 1
        return user

    # Movies

    def add_movie(
        self,
        *,
        title: str,
        genre: GenreRecord,
        director: DirectorRecord,
        description: str | None = None,
        image_path: str | None = None,
        featured: bool = False,
    ) -> MovieRecord:
        self._ensure_available()
        movie = MovieRecord(
            id=str(uuid4()),
            title=title,
            genre=genre,
            director=director,
            description=description,
            image_path=image_path,
            featured=featured,
        )
        self.movies[movie.id] = movie
        return movie

    def list_movies(self) -> list[MovieRecord]:
        self._ensure_available()
        return list(self.movies.values())

    def get_movie(self, movie_id: str) -> MovieRecord | None:
        self._ensure_available()
        return self.movies.get(movie_id)

    def find_movie_by_title(self, title: str) -> MovieRecord | None:
        self._ensure_available()
        for record in self.movies.values():
            if record.title == title:
                return record
        return None

    def find_movies_by_director(self, name: str) -> list[MovieRecord]:
        self._ensure_available()
        return [record for record in self.movies.values() if record.director.name == name]
