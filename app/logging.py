"""Application-wide logging configuration.

Every module asks for its own named logger through :func:`get_logger`;
the root logger is configured once, from ``main.py``, with the level
taken from settings.
"""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging settings.

    Args:
        level (str): "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL".
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    logging.getLogger(__name__).info("Logging initialized with level %s", level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger instance to be used in any module."""
    return logging.getLogger(name)
