from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from docio.di.container import Container
from docio.services.config.app_config import build_app_config
from docio.utils.constants import APP_NAME
from docio.utils.logging import configure_root

log = logging.getLogger(__name__)


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the application via the DI container,
    and launches the host window.
    """
    config = build_app_config()
    configure_root(config.log_level())

    QApplication.setOrganizationName(config.organization())
    QApplication.setApplicationName(config.application())
    app = QApplication(list(argv))

    if config.loaded_from is not None:
        log.info("Using configuration from %s", config.loaded_from)
    container = Container(config=config)

    # Optional file path to open passed as first CLI argument
    start_path = Path(argv[1]) if len(argv) > 1 else None

    win = container.build_main_window(start_path=start_path, app_title=APP_NAME)
    win.show()

    return app.exec()
