"""Logging configuration for URL shortener."""

import logging
import sys
from typing import List, Optional

LOGGER_NAME = "url_shortener"

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(threadName)s) - %(message)s"
PLAIN_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
    '"logger": "%(name)s", "thread": "%(threadName)s", "message": "%(message)s"}'
)


def build_formatter(json_format: bool = False) -> logging.Formatter:
    """Build the record formatter.

    Records carry the thread name because requests are served from a
    thread pool.
    """
    if json_format:
        return logging.Formatter(JSON_FORMAT)
    return logging.Formatter(PLAIN_FORMAT, datefmt=PLAIN_DATE_FORMAT)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> logging.Logger:
    """Configure the service logger.

    Calling this again replaces (and closes) the handlers from the
    previous call.

    Args:
        level: Logging level name; unknown names fall back to INFO
        log_file: Optional file to log to besides stdout
        json_format: Emit one JSON object per line

    Returns:
        The configured ``url_shortener`` logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    formatter = build_formatter(json_format)
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return a logger, the service logger by default."""
    return logging.getLogger(name)
