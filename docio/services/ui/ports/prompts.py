from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from docio.domain.models import OverwriteAnswer, SaveChangesAnswer


@runtime_checkable
class IUserPrompt(Protocol):
    """
    Abstract UI port for the modal prompts raised by the document workflows.
    Keeps the controller decoupled from Qt; tests drive it with scripted fakes.
    """

    def confirm_overwrite(self, path: Path, *, title: str, text: str) -> OverwriteAnswer:
        """Ask whether an existing file may be replaced."""
        ...

    def confirm_save_changes(
        self, document_title: str, *, title: str, text: str
    ) -> SaveChangesAnswer:
        """Ask whether to save, discard or keep editing a modified document."""
        ...

    def pick_open_path(
        self,
        start_dir: Path | None,
        filter_str: str,
        accessory: Any | None = None,
    ) -> Path | None:
        """Return the file to open, or None if cancelled."""
        ...

    def pick_save_path(self, start_dir: Path | None, filter_str: str) -> Path | None:
        """Return the destination path, or None if cancelled."""
        ...
