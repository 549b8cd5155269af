from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QMainWindow,
    QMenu,
    QMessageBox,
    QStatusBar,
    QTextEdit,
)

from docio.domain.interfaces import IFileService
from docio.domain.models import Document, Outcome
from docio.services.recent_files import RecentFilesTracker
from docio.services.session_controller import DocumentSessionController
from docio.services.ui.adapters import QtUserPrompt
from docio.services.ui.ports.prompts import IUserPrompt
from docio.utils.constants import TEXT_FILTER

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Plain-text host window. It is the document session the controller works
    against: the File menu only forwards to the controller, and the
    save/open/create_new callbacks below do the actual I/O.
    """

    def __init__(
        self,
        file_service: IFileService,
        recent_files: RecentFilesTracker | None = None,
        *,
        prompt: IUserPrompt | None = None,
        filter_str: str = TEXT_FILTER,
        app_title: str = "docio",
    ) -> None:
        super().__init__()
        self.resize(900, 650)
        self.app_title = app_title
        self.file_service = file_service
        self.filter_str = filter_str

        self.doc = Document(path=None, text="", modified=False)
        self._is_new = True
        self._loading = False

        self.editor = QTextEdit(self)
        self.editor.setAcceptRichText(False)
        self.setCentralWidget(self.editor)
        self.editor.textChanged.connect(self._on_text_changed)

        self.controller = DocumentSessionController(
            self, prompt or QtUserPrompt(self), recent_files
        )

        self._build_actions()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))

        if recent_files is not None:
            recent_files.set_listener(self.recent_files_changed)
        self.recent_files_changed(recent_files.list() if recent_files is not None else [])
        self._update_title()

        self.setAcceptDrops(True)

    # ---------- IDocumentSession ----------

    @property
    def is_modified(self) -> bool:
        return self.doc.modified

    @property
    def is_new(self) -> bool:
        return self._is_new

    @property
    def current_path(self) -> Path | None:
        return self.doc.path

    @property
    def title(self) -> str:
        return str(self.doc.path) if self.doc.path else "Untitled"

    def save(self, path: Path) -> bool:
        try:
            self.file_service.write_text_atomic(path, self.editor.toPlainText())
        except OSError as e:
            log.error("Failed to save %s: %s", path, e)
            QMessageBox.critical(self, "Save Error", f"Failed to save file:\n{e}")
            return False
        self.doc.path = path
        self.doc.modified = False
        self._is_new = False
        self._update_title()
        self.statusBar().showMessage(f"Saved: {path}", 3000)
        return True

    def open(self, path: Path) -> bool:
        try:
            text = self.file_service.read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            log.error("Failed to open %s: %s", path, e)
            QMessageBox.critical(self, "Open Error", f"Failed to open file:\n{e}")
            return False
        self._replace_document(Document(path=path, text=text, modified=False), is_new=False)
        return True

    def create_new(self) -> bool:
        self._replace_document(Document(path=None, text="", modified=False), is_new=True)
        return True

    def recent_files_changed(self, entries: list[Path]) -> None:
        self.recent_menu.clear()
        if not entries:
            na = QAction("(empty)", self)
            na.setEnabled(False)
            self.recent_menu.addAction(na)
            return
        for p in entries:
            self.recent_menu.addAction(
                QAction(str(p), self, triggered=lambda chk=False, x=p: self.open_recent(x))
            )

    # ---------- UI creation ----------

    def _build_actions(self):
        self.act_new = QAction(
            "New", self, shortcut=QKeySequence.StandardKey.New, triggered=self.new_file
        )
        self.act_open = QAction(
            "Open…", self, shortcut=QKeySequence.StandardKey.Open, triggered=self.open_dialog
        )
        self.act_save = QAction(
            "Save", self, shortcut=QKeySequence.StandardKey.Save, triggered=self.save_file
        )
        self.act_save_as = QAction(
            "Save As…",
            self,
            shortcut=QKeySequence.StandardKey.SaveAs,
            triggered=self.save_file_as,
        )
        self.act_exit = QAction("&Exit", self, shortcut="Ctrl+Q", triggered=self.close)
        self.recent_menu = QMenu("Open Recent", self)

    def _build_menu(self):
        filem = self.menuBar().addMenu("&File")
        filem.addAction(self.act_new)
        filem.addAction(self.act_open)
        filem.addMenu(self.recent_menu)
        filem.addSeparator()
        filem.addAction(self.act_save)
        filem.addAction(self.act_save_as)
        filem.addSeparator()
        filem.addAction(self.act_exit)

    # ---------- Actions ----------

    def new_file(self) -> Outcome:
        return self.controller.create_new(self.filter_str)

    def open_dialog(self) -> Outcome:
        return self.controller.open(self.filter_str)

    def open_recent(self, path: Path) -> Outcome:
        return self.controller.open_path(path, self.filter_str)

    def save_file(self) -> Outcome:
        return self.controller.save(self.filter_str)

    def save_file_as(self) -> Outcome:
        return self.controller.save_as(self.filter_str)

    # ---------- Helpers ----------

    def _replace_document(self, doc: Document, *, is_new: bool) -> None:
        self._loading = True
        try:
            self.editor.setPlainText(doc.text)
        finally:
            self._loading = False
        self.doc = doc
        self._is_new = is_new
        self._update_title()

    def _on_text_changed(self):
        if self._loading:
            return
        self.doc.modified = True
        self._update_title()

    def _update_title(self):
        name = self.doc.path.name if self.doc.path else "Untitled"
        star = " •" if self.doc.modified else ""
        self.setWindowTitle(f"{name}{star} — {self.app_title}")

    # ---------- DnD ----------

    def dragEnterEvent(self, e):
        if e.mimeData().hasUrls():
            e.acceptProposedAction()

    def dropEvent(self, e):
        urls = e.mimeData().urls()
        if not urls:
            return
        local = urls[0].toLocalFile()
        if local:
            self.open_recent(Path(local))

    # ---------- Close ----------

    def closeEvent(self, event):
        if self.controller.confirm_close(self.filter_str):
            event.accept()
        else:
            event.ignore()
