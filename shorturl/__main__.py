"""
Process entry point: ``python -m shorturl`` or the ``shorturl`` script.

Loads settings (a missing DATABASE_URL stops the process here) and serves
the application with uvicorn on HOST:PORT.
"""

import uvicorn

from shorturl.core.setting import get_settings
from shorturl.main import create_app


def main() -> None:
    settings = get_settings()

    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
