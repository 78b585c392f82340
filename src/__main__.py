"""
Server launcher.

Run with: python -m src
"""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from src.config.logging_config import configure_logging
from src.config.settings import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Resolve settings and serve the API on host:port."""
    configure_logging()

    try:
        settings = get_settings()
    except ValidationError as exc:
        logger.error("Invalid configuration:\n%s", exc)
        sys.exit(1)

    configure_logging(settings.log_level)
    logger.info("Listening on %s:%d", settings.host, settings.port)

    uvicorn.run(
        "src.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
