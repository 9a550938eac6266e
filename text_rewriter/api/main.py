"""
Server entrypoint for the text rewriter HTTP API.

Startup:
- `.env` is loaded by `text_rewriter.llm.provider_config` at import.
- Logging is configured from `LOG_LEVEL` (default `INFO`).
- uvicorn serves `text_rewriter.api.http_api:app` on `HOST:PORT`
  (default `127.0.0.1:8080`).
"""

import logging
import os

import uvicorn

from text_rewriter.llm.provider_config import load_settings


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_log_level(name: str | None) -> int:
    """Map a level name to its numeric value; unknown names fall back to INFO."""
    level = logging.getLevelName((name or "INFO").strip().upper())
    if isinstance(level, int):
        return level
    return logging.INFO


def configure_logging() -> None:
    logging.basicConfig(level=resolve_log_level(os.getenv("LOG_LEVEL")), format=LOG_FORMAT)


def main():
    configure_logging()
    settings = load_settings()

    logging.getLogger(__name__).info(
        "Starting server at http://%s:%d", settings.host, settings.port
    )

    uvicorn.run(
        "text_rewriter.api.http_api:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    main()
