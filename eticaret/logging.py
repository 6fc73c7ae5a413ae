"""
Logging for the eticaret storefront.

    from eticaret.logging import get_logger
    logger = get_logger(__name__)
"""

import logging
import os
import sys
from functools import cache

_FORMATS = {
    "local": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    # Vercel stamps each line itself
    "vercel": "%(levelname)s - %(name)s - %(message)s",
}

# Control characters that would let user input start a fake log line
_LOG_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": None})


def _setup() -> None:
    root = logging.getLogger()
    if root.handlers:
        return

    level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)
    style = "vercel" if os.environ.get("VERCEL") == "1" else "local"

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMATS[style]))
    root.addHandler(handler)
    root.setLevel(level)

    # supabase-py request lines
    for name in ("httpx", "httpcore", "hpack"):
        logging.getLogger(name).setLevel(logging.WARNING)


_setup()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """Escape control characters and cap free text (product names, queries) at ``max_length``."""
    if not value:
        return "N/A"
    text = str(value).translate(_LOG_ESCAPES)
    return text if len(text) <= max_length else text[:max_length] + "..."


def sanitize_id_for_logging(id_value: str | None) -> str:
    """First 8 characters of an id; line-item ids embed product ids."""
    if not id_value:
        return "N/A"
    return str(id_value).translate(_LOG_ESCAPES)[:8]
