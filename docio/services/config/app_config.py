from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path

from docio.domain.interfaces import IAppConfig
from docio.domain.models import MessageTemplates
from docio.services.config.ini_config_service import IniConfigService
from docio.utils.constants import APP_NAME, APP_ORG, MAX_RECENTS


def _project_root_fallback() -> Path:
    """
    Best-effort project root resolution that also works in PyInstaller:
      - PyInstaller onefile/onedir uses sys._MEIPASS as bundle root
      - dev mode uses this file location to walk upward
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)
    # docio/services/config/app_config.py -> repository root
    return Path(__file__).resolve().parents[3]


def _unescape(text: str) -> str:
    # INI values are single-line; allow "\n" in message templates
    return text.replace("\\n", "\n")


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Typed view over IniConfigService.

    Recognised keys:
      [app]      organization, application
      [recent]   max_entries
      [messages] overwrite_message, overwrite_title, modified_message, modified_title
      [logging]  level
    """

    ini: IniConfigService

    def organization(self) -> str:
        return self.get("app", "organization", APP_ORG) or APP_ORG

    def application(self) -> str:
        return self.get("app", "application", APP_NAME) or APP_NAME

    def recent_capacity(self) -> int:
        value = self.get_int("recent", "max_entries", MAX_RECENTS)
        if value is None or value < 0:
            return MAX_RECENTS
        return value

    def message_templates(self) -> MessageTemplates:
        overrides = {}
        for f in fields(MessageTemplates):
            raw = self.get("messages", f.name, None)
            if raw:
                overrides[f.name] = _unescape(raw)
        return MessageTemplates(**overrides)

    def log_level(self) -> str:
        return (self.get("logging", "level", "INFO") or "INFO").strip().upper()

    # ---- delegate IniConfigService methods ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        return self.ini.get_int(section, key, default)

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        return self.ini.get_bool(section, key, default)

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return self.ini.as_dict()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    return AppConfig(ini=IniConfigService(explicit_path=explicit_ini, project_root=root))
