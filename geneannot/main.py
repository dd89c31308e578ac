"""
Application entry point.

This module serves as the main entry point for running the
gene annotation API server using uvicorn.
"""

from uvicorn import run

from geneannot.core.config import settings


def main():
    run(
        "geneannot.api.app:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
