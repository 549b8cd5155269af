"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    MAX_RECENTS,
    RECENTS_SEPARATOR,
    SETTINGS_RECENTS,
    TEXT_FILTER,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "SETTINGS_RECENTS",
    "RECENTS_SEPARATOR",
    "MAX_RECENTS",
    "TEXT_FILTER",
]
