from __future__ import annotations

from PyQt6.QtCore import QSettings

from docio.domain.interfaces import IKeyValueStore


class SettingsService(IKeyValueStore):
    """String key-value store over QSettings (organization/application scoped)."""

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    def get(self, key: str, default: str = "") -> str:
        v = self._s.value(key, default)
        if v is None:
            return default
        # INI backends hand back a list when the stored value contains commas
        if isinstance(v, list):
            return ",".join(str(x) for x in v)
        return str(v)

    def put(self, key: str, value: str) -> None:
        self._s.setValue(key, str(value))
        self._s.sync()
