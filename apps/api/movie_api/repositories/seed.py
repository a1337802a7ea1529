"""Demo catalogue loaded when ``MOVIE_API_SEED_MOVIES`` is enabled."""

from __future__ import annotations

from movie_api.repositories.memory import DirectorRecord, GenreRecord, InMemoryStore

_THRILLER = GenreRecord(
    name="Thriller",
    description="Suspenseful stories that keep the audience on edge.",
)
_DRAMA = GenreRecord(
    name="Drama",
    description="Character-driven stories with emotional stakes.",
)
_NOLAN = DirectorRecord(
    name="Christopher Nolan",
    bio="British-American director known for non-linear storytelling.",
    birth="1970",
)
_FINCHER = DirectorRecord(
    name="David Fincher",
    bio="American director known for meticulous dark thrillers.",
    birth="1962",
)

_MOVIES = (
    ("Inception", "A thief enters dreams to plant an idea.", _THRILLER, _NOLAN, True),
    ("Memento", "A man with short-term memory loss hunts a killer.", _THRILLER, _NOLAN, False),
    ("Se7en", "Two detectives chase a killer inspired by the seven sins.", _THRILLER, _FINCHER, True),
    ("The Social Network", "The founding of a social network and its lawsuits.", _DRAMA, _FINCHER, False),
)


def seed_movies(store: InMemoryStore) -> int:
    """Insert the demo catalogue, skipping titles that already exist."""
    added = 0
    for title, description, genre, director, featured in _MOVIES:
        if store.find_movie_by_title(title) is not None:
            continue
        store.add_movie(
            title=title,
            description=description,
            genre=GenreRecord(name=genre.name, description=genre.description),
            director=DirectorRecord(
                name=director.name,
                bio=director.bio,
                birth=director.birth,
                death=director.death,
            ),
            featured=featured,
        )
        added += 1
    return added
