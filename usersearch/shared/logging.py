"""
Logging setup for the search service.

One line per record on stdout. Access tokens and user record bodies are
never logged; dataset failures are logged with their path and cause,
which the 500 response body leaves out.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that report every request or every limit hit.
QUIET_LOGGERS = ("uvicorn.access", "httpx", "slowapi")


def configure_logging(level: str = "INFO") -> None:
    """Install the root handler at ``level``.

    Unknown level names fall back to INFO. ``QUIET_LOGGERS`` are held at
    WARNING whatever the level.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
