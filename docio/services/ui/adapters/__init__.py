from __future__ import annotations

from .qt_prompts import QtUserPrompt

__all__ = [
    "QtUserPrompt",
]
