"""Standard library logging setup.

Application events go through logfire; this only sets levels and the
console format for records emitted by libraries.
"""

import logging
import sys

from hackers.config import Settings

# Libraries that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "hpack")


def setup_logging(settings: Settings) -> None:
    """Configure root logging from settings.

    Args:
        settings: Application settings; ``debug`` selects DEBUG level
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
