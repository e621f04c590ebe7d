"""
Logging configuration for the Postboard service.

One stdout handler on the root logger, with a pipe-separated format.
Logging must not change program behavior.
Never logs sensitive data (request bodies, bearer tokens, raw payloads).
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error")


def configure_logging(level: str = "INFO", force: bool = False) -> None:
    """Install the service's root handler.

    create_app runs this on every call, and tests build an app per test.
    With ``force`` off, a root logger that already has handlers is left
    alone: pytest's caplog handler and whatever an embedding process set
    up keep receiving records, and repeated calls never stack handlers.
    The CLI passes ``force=True`` because it owns the process.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        force: Replace existing root handlers instead of keeping them.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=force,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
