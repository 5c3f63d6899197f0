"""Serve the API with uvicorn: ``python -m devhouse`` or the ``devhouse-api`` script."""

import uvicorn

from devhouse.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "devhouse.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
