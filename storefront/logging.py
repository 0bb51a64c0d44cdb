"""
Logging setup for the storefront.

Modules take a logger with get_logger(__name__); the app factory calls
configure_logging() once with the LOG_LEVEL from settings. Values that come
from shoppers (product ids from requests, checkout emails) go through
log_value() or mask_email() before they reach a log line.
"""

import logging
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"

# Loggers of the Upstash REST transport; one line per cart save otherwise
_NOISY_LOGGERS = ("httpx", "httpcore", "urllib3")

_CONTROL_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": None})


def configure_logging(level: str = "INFO") -> None:
    """
    Send storefront logs to stdout at the given level.

    A root handler installed by the host (uvicorn, pytest) is left alone;
    only the level is applied.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root = logging.getLogger()
    root.setLevel(numeric_level)

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_value(value: object, max_length: int = 40) -> str:
    """
    Make a client-supplied value safe to interpolate into a log line.

    Control characters are escaped so a value cannot start a forged entry,
    and long values are cut to max_length followed by "...".
    """
    if value is None or value == "":
        return "N/A"
    text = str(value).translate(_CONTROL_CHARS)
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def mask_email(email: str | None) -> str:
    """jane.doe@example.com -> j***@example.com"""
    if not email or "@" not in email:
        return log_value(email)
    local, _, domain = email.rpartition("@")
    return log_value(f"{local[:1]}***@{domain}")
