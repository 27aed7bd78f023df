"""
Logging helpers for shopcart.

Modules log through `get_logger(__name__)`. Product ids and notifier
messages come from the UI layer, so they pass through the sanitizers
before reaching a log line.
"""

import logging
import os
from functools import cache


def _configure_root_logger() -> None:
    root = logging.getLogger()
    # Embedding apps own the root logger once they configure it
    if root.handlers:
        return

    logging.basicConfig(
        level=getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # Catalog requests are noisy at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _escape(value: str) -> str:
    # CWE-117: a raw newline would let input forge a log entry
    return (
        value.replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )


def sanitize_id_for_logging(id_value: int | str | None) -> str:
    """Escaped id cut to 8 chars, or "N/A" when missing."""
    if id_value is None or id_value == "":
        return "N/A"
    return _escape(str(id_value))[:8]


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """Escaped text cut to `max_length` (with "..."), or "N/A" when empty."""
    if not value:
        return "N/A"
    safe_value = _escape(str(value))
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."
