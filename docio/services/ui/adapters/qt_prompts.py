from __future__ import annotations

from pathlib import Path
from typing import Any

from PyQt6.QtWidgets import QDialog, QFileDialog, QMessageBox, QWidget

from docio.domain.models import OverwriteAnswer, SaveChangesAnswer
from docio.services.ui.ports.prompts import IUserPrompt


def _start(start_dir: Path | None) -> str:
    return str(start_dir) if start_dir else ""


class QtUserPrompt(IUserPrompt):
    """Qt-backed implementation of the document workflow prompts."""

    def __init__(self, parent: QWidget | None = None) -> None:
        self.parent = parent

    def confirm_overwrite(self, path: Path, *, title: str, text: str) -> OverwriteAnswer:
        resp = QMessageBox.warning(
            self.parent,
            title,
            text,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        return OverwriteAnswer.YES if resp == QMessageBox.StandardButton.Yes else OverwriteAnswer.NO

    def confirm_save_changes(
        self, document_title: str, *, title: str, text: str
    ) -> SaveChangesAnswer:
        resp = QMessageBox.question(
            self.parent,
            title,
            text,
            QMessageBox.StandardButton.Save
            | QMessageBox.StandardButton.Discard
            | QMessageBox.StandardButton.Cancel,
            QMessageBox.StandardButton.Save,
        )
        if resp == QMessageBox.StandardButton.Save:
            return SaveChangesAnswer.CONFIRM
        if resp == QMessageBox.StandardButton.Discard:
            return SaveChangesAnswer.DECLINE
        # Cancel, Escape and closing the box all keep the document
        return SaveChangesAnswer.CANCEL

    def pick_open_path(
        self,
        start_dir: Path | None,
        filter_str: str,
        accessory: Any | None = None,
    ) -> Path | None:
        if accessory is None:
            path_str, _ = QFileDialog.getOpenFileName(
                self.parent, "Open", _start(start_dir), filter_str
            )
            return Path(path_str) if path_str else None
        return self._open_with_accessory(start_dir, filter_str, accessory)

    def pick_save_path(self, start_dir: Path | None, filter_str: str) -> Path | None:
        # The controller asks about overwriting itself
        path_str, _ = QFileDialog.getSaveFileName(
            self.parent,
            "Save As",
            _start(start_dir),
            filter_str,
            options=QFileDialog.Option.DontConfirmOverwrite,
        )
        return Path(path_str) if path_str else None

    # ---------- Internals ----------

    def _open_with_accessory(
        self, start_dir: Path | None, filter_str: str, accessory: QWidget
    ) -> Path | None:
        """
        Accessory widgets (e.g. a preview pane) need a widget-based dialog,
        so the native one is disabled here. Accessories exposing preview(path)
        follow the current selection.
        """
        dlg = QFileDialog(self.parent, "Open", _start(start_dir), filter_str)
        dlg.setFileMode(QFileDialog.FileMode.ExistingFile)
        dlg.setOption(QFileDialog.Option.DontUseNativeDialog, True)

        layout = dlg.layout()
        if layout is not None:
            layout.addWidget(accessory)
        preview = getattr(accessory, "preview", None)
        if callable(preview):
            dlg.currentChanged.connect(lambda p: preview(Path(p)) if p else None)

        try:
            if dlg.exec() != QDialog.DialogCode.Accepted.value:
                return None
            files = dlg.selectedFiles()
            return Path(files[0]) if files else None
        finally:
            # Hand the accessory back so the dialog's teardown doesn't delete it
            accessory.setParent(None)
            # Detach from the window, otherwise every call leaves a hidden child dialog
            dlg.setParent(None)
            dlg.deleteLater()
