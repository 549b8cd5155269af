from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from docio.domain.interfaces import IFileService


class FileService(IFileService):
    """
    Text file access for the host window.

    Writes go through QSaveFile so an interrupted save never leaves a
    truncated document behind.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding=self.encoding)

    def write_text_atomic(self, path: Path, text: str) -> None:
        target = QSaveFile(str(path))
        if not target.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path} ({target.errorString()})")
        target.write(text.encode(self.encoding))
        if not target.commit():
            raise OSError(f"Commit failed for: {path} ({target.errorString()})")
