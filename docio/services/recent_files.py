from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from pathlib import Path

from docio.domain.interfaces import IKeyValueStore
from docio.utils.constants import MAX_RECENTS, RECENTS_SEPARATOR, SETTINGS_RECENTS

log = logging.getLogger(__name__)


class RecentFilesTracker:
    """
    Bounded most-recently-used list of document paths.

    Entries are kept most recent first without duplicates. Re-adding a path
    moves it to the front; when the list is full the least recently used
    entry is dropped. The list is written back to the store after every
    change as absolute paths joined by ";".

    Store failures are logged and otherwise ignored: the in-memory list is
    always the source of truth for the running session.
    """

    def __init__(
        self,
        store: IKeyValueStore,
        *,
        capacity: int = MAX_RECENTS,
        key: str = SETTINGS_RECENTS,
        on_changed: Callable[[list[Path]], None] | None = None,
    ) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._store = store
        self._key = key
        self._on_changed = on_changed
        # maxlen makes appendleft() drop the tail once the deque is full
        self._entries: deque[Path] = deque(maxlen=capacity)
        self.load()

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        return Path(path).absolute() in self._entries

    def set_listener(self, on_changed: Callable[[list[Path]], None] | None) -> None:
        self._on_changed = on_changed

    def load(self) -> None:
        """Replace the in-memory list with the stored one, skipping missing files."""
        self._entries.clear()
        try:
            raw = self._store.get(self._key, "")
        except Exception:
            log.warning("Could not read recent files from store", exc_info=True)
            raw = ""

        for segment in (raw or "").split(RECENTS_SEPARATOR):
            segment = segment.strip()
            if not segment:
                continue
            path = Path(segment).absolute()
            if not path.exists():
                log.debug("Dropping missing recent file %s", path)
                continue
            if path in self._entries:
                continue
            if len(self._entries) == self.capacity:
                break
            self._entries.append(path)

        self._notify()

    def add(self, path: Path | str) -> None:
        p = Path(path).absolute()
        if p in self._entries:
            self._entries.remove(p)
        self._entries.appendleft(p)
        self._persist()
        self._notify()

    def list(self) -> list[Path]:
        """Snapshot of the entries, most recent first."""
        return list(self._entries)

    def serialize(self) -> str:
        return RECENTS_SEPARATOR.join(str(p) for p in self._entries)

    # ---------- Internals ----------

    def _persist(self) -> None:
        try:
            self._store.put(self._key, self.serialize())
        except Exception:
            log.warning("Could not write recent files to store", exc_info=True)

    def _notify(self) -> None:
        if self._on_changed is not None:
            self._on_changed(self.list())
