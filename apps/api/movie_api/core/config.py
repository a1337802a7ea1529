"""Application configuration."""

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables.

    The instance is frozen: the signing secret is read once at startup and
    shared read-only by the token issuer and the bearer strategy.
    """

    jwt_secret: SecretStr
    jwt_expires_days: int = Field(default=7, ge=1)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    public_dir: str | None = None
    access_log_path: str | None = None
    seed_movies: bool = False
    host: str = "0.0.0.0"
    port: int = 8080

    model_config = SettingsConfigDict(
        env_prefix="MOVIE_API_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
