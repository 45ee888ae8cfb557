"""Logging for the codec and store client.

Every module logs through get_logger(__name__), so all codec loggers live
under the 'fieldcodec' namespace. Nothing is configured on import;
applications that want the codec's logs call setup_logging().
"""

import logging
import sys

from fieldcodec.core.config import get_settings

ROOT_LOGGER_NAME = "fieldcodec"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HANDLER_NAME = "fieldcodec.stdout"

# Log every HTTP request at INFO; kept at WARNING unless debugging.
_HTTP_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: int | None = None) -> logging.Logger:
    """Send fieldcodec logs to stdout.

    Level is DEBUG when settings.debug is True, otherwise INFO, unless an
    explicit level is given. Calling it again only updates levels; the
    stdout handler is added once.

    Returns:
        The 'fieldcodec' package logger.
    """
    if level is None:
        level = logging.DEBUG if get_settings().debug else logging.INFO
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    http_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in _HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the 'fieldcodec' namespace.

    Args:
        name: Usually __name__ of the calling module. Names outside the
            package are nested under 'fieldcodec.'.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
