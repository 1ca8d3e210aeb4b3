"""
Logging module - access log stream setup
"""
import logging
from typing import Union

ACCESS_LOGGER_NAME = "prettylog.access"
DEFAULT_FORMAT = "%(message)s"


def setup_logging(level: Union[int, str] = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    Configure the access logger with a single stream handler.

    Calling it again only updates level and format. Lines carry their own
    timestamp, so the default format is the bare message.
    """
    logger = logging.getLogger(ACCESS_LOGGER_NAME)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    logger.propagate = False

    handler = next(
        (h for h in logger.handlers if getattr(h, "name", None) == ACCESS_LOGGER_NAME),
        None
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(ACCESS_LOGGER_NAME)
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(fmt))

    return logger
