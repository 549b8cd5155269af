from __future__ import annotations

from .prompts import IUserPrompt

__all__ = [
    "IUserPrompt",
]
