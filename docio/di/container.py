from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QSettings

from docio.domain.interfaces import IAppConfig, IFileService, IKeyValueStore
from docio.services.config.app_config import build_app_config
from docio.services.file_service import FileService
from docio.services.recent_files import RecentFilesTracker
from docio.services.settings_service import SettingsService
from docio.services.ui.main_window import MainWindow
from docio.services.ui.ports.prompts import IUserPrompt

log = logging.getLogger(__name__)


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the recent-files tracker from the configured capacity
      - Builds the host window with the controller's prompt texts taken from config
    """

    def __init__(
        self,
        config: IAppConfig | None = None,
        files: IFileService | None = None,
        store: IKeyValueStore | None = None,
        qsettings: QSettings | None = None,
        prompt: IUserPrompt | None = None,
    ) -> None:
        self.config: IAppConfig = config or build_app_config()
        self.file_service: IFileService = files or FileService()
        self.store: IKeyValueStore = store or SettingsService(
            qsettings or QSettings(self.config.organization(), self.config.application())
        )
        self.prompt = prompt
        self.recent_files = RecentFilesTracker(
            self.store, capacity=self.config.recent_capacity()
        )
        log.debug(
            "Container ready (recent capacity=%d, %d entries restored)",
            self.recent_files.capacity,
            len(self.recent_files),
        )

    @staticmethod
    def default(qsettings: QSettings | None = None, *, config_path: Path | None = None) -> Container:
        return Container(config=build_app_config(explicit_ini=config_path), qsettings=qsettings)

    # ---------- UI factories ----------

    def build_main_window(self, *, start_path: Path | None = None, app_title: str = "docio") -> MainWindow:
        """Create the host window wired to the shared tracker and configured prompt texts."""
        window = MainWindow(
            file_service=self.file_service,
            recent_files=self.recent_files,
            prompt=self.prompt,
            app_title=app_title,
        )
        window.controller.templates = self.config.message_templates()
        if start_path is not None:
            window.open_recent(start_path)
        return window
