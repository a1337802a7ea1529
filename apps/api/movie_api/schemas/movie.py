"""Movie API schemas."""

from pydantic import BaseModel


class Genre(BaseModel):
    name: str
    description: str | None = None


class Director(BaseModel):
    name: str
    bio: str | None = None
    birth: str | None = None
    death: str | None = None


class Movie(BaseModel):
    id: str
    title: str
    description: str | None = None
    genre: Genre
    director: Director
    image_path: str | None = None
    featured: bool = False
