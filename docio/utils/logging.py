from __future__ import annotations

import logging
import os

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULT_DATEFMT = "%H:%M:%S"
LEVEL_ENV_VAR = "DOCIO_LOG_LEVEL"


def coerce_level(value: str | int | None, fallback: int = logging.INFO) -> int:
    if isinstance(value, int):
        return value
    if not value or not value.strip():
        return fallback
    text = value.strip()
    if text.isdigit():
        return int(text)
    candidate = getattr(logging, text.upper(), None)
    return candidate if isinstance(candidate, int) else fallback


def configure_root(default_level: int | str = logging.INFO) -> int:
    """
    Configure the root logger with a compact format and return the effective level.

    DOCIO_LOG_LEVEL (name or number) overrides default_level.
    """
    fallback = coerce_level(default_level)
    effective = coerce_level(os.getenv(LEVEL_ENV_VAR), fallback)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)
    root.setLevel(effective)
    return effective
