"""Serve the API with uvicorn (``python -m movie_api``)."""

import uvicorn

from movie_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "movie_api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
