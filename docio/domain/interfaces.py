from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable

from docio.domain.models import MessageTemplates


@runtime_checkable
class IDocumentSession(Protocol):
    """
    The document currently open in the host application.

    The controller only reads the flags and invokes the actions; the host
    owns the state and updates it in response.
    """

    @property
    def is_modified(self) -> bool: ...

    @property
    def is_new(self) -> bool:
        """True when the document was created (not opened) and never saved."""
        ...

    @property
    def current_path(self) -> Path | None: ...

    @property
    def title(self) -> str: ...

    def save(self, path: Path) -> bool: ...
    def open(self, path: Path) -> bool: ...
    def create_new(self) -> bool: ...


class IKeyValueStore(Protocol):
    """String key-value persistence scoped to one application namespace."""

    def get(self, key: str, default: str = "") -> str: ...
    def put(self, key: str, value: str) -> None: ...


class IFileService(Protocol):
    """Read/write text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


class IConfigService(Protocol):
    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...


class IAppConfig(IConfigService, Protocol):
    def organization(self) -> str: ...
    def application(self) -> str: ...
    def recent_capacity(self) -> int: ...
    def message_templates(self) -> MessageTemplates: ...
    def log_level(self) -> str: ...
