from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

FILENAME_PLACEHOLDER = "%filename%"


class SaveChangesAnswer(Enum):
    """Answer to "the document was modified, save it first?"."""

    CONFIRM = auto()
    DECLINE = auto()
    CANCEL = auto()


class OverwriteAnswer(Enum):
    YES = auto()
    NO = auto()


class Outcome(Enum):
    """Result of a controller workflow. CANCELLED means the user backed out."""

    SUCCEEDED = auto()
    FAILED = auto()
    CANCELLED = auto()

    @property
    def ok(self) -> bool:
        return self is Outcome.SUCCEEDED


@dataclass
class MessageTemplates:
    """
    Texts shown by the confirmation prompts.
    Messages may contain %filename%, which is replaced before display.
    """

    overwrite_message: str = (
        "File:\n    %filename%\nalready exists!\n\nDo you want to overwrite it?"
    )
    overwrite_title: str = "Overwrite file"
    modified_message: str = (
        "File:\n    %filename%\nhas been modified!\n\nDo you want to save changes?"
    )
    modified_title: str = "File modified"

    def render_overwrite(self, path: Path) -> str:
        return self.overwrite_message.replace(FILENAME_PLACEHOLDER, str(path.absolute()))

    def render_modified(self, title: str) -> str:
        return self.modified_message.replace(FILENAME_PLACEHOLDER, title)


@dataclass
class Document:
    path: Path | None
    text: str
    modified: bool = False
