from __future__ import annotations

import os
from pathlib import Path

import pytest

# Headless CI: must be set before the first QApplication exists
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtCore import QSettings  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402

from docio.services.file_service import FileService  # noqa: E402
from docio.services.settings_service import SettingsService  # noqa: E402


class MemoryStore:
    """In-memory IKeyValueStore; can be told to fail on read or write."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})
        self.fail_get = False
        self.fail_put = False
        self.puts: list[tuple[str, str]] = []

    def get(self, key: str, default: str = "") -> str:
        if self.fail_get:
            raise OSError("store unavailable")
        return self.data.get(key, default)

    def put(self, key: str, value: str) -> None:
        if self.fail_put:
            raise OSError("store unavailable")
        self.puts.append((key, value))
        self.data[key] = value


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Other common fixtures ---


@pytest.fixture()
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def make_files(tmp_path: Path):
    """Create empty files under tmp_path and return their paths."""

    def _make(*names: str) -> list[Path]:
        out = []
        for name in names:
            p = tmp_path / name
            p.write_text("", encoding="utf-8")
            out.append(p)
        return out

    return _make
