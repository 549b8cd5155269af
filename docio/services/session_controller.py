from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from docio.domain.interfaces import IDocumentSession
from docio.domain.models import MessageTemplates, Outcome, OverwriteAnswer, SaveChangesAnswer
from docio.services.recent_files import RecentFilesTracker
from docio.services.ui.ports.prompts import IUserPrompt

log = logging.getLogger(__name__)


class DocumentSessionController:
    """
    Runs the open / save / save-as / new / close workflows for one document session.

    The controller keeps no document state of its own: it reads the session
    flags, raises prompts when needed and only then invokes the session's
    actions. Every mutating step happens after all confirmations resolved
    affirmatively; a Cancel anywhere aborts the whole workflow.

    Only the last directories used in the file pickers and the prompt texts
    live on the instance.
    """

    def __init__(
        self,
        session: IDocumentSession,
        prompt: IUserPrompt,
        recent_files: RecentFilesTracker | None = None,
        *,
        templates: MessageTemplates | None = None,
    ) -> None:
        self.session = session
        self.prompt = prompt
        self._recent = recent_files
        self.templates = templates or MessageTemplates()
        self.last_open_dir: Path | None = None
        self.last_save_dir: Path | None = None

    @property
    def recent_files(self) -> RecentFilesTracker | None:
        return self._recent

    # ---------- Save ----------

    def save(self, filter_str: str = "") -> Outcome:
        """Save to the current path, falling back to Save As for new/pathless documents."""
        if self.session.is_new:
            return self.save_as(filter_str)

        path = self.session.current_path
        if path is None:
            log.debug("Document is not new but has no path; asking for one")
            return self.save_as(filter_str)

        if not self.session.save(path):
            log.warning("Saving %s failed", path)
            return Outcome.FAILED
        self._remember(path)
        return Outcome.SUCCEEDED

    def save_as(self, filter_str: str = "") -> Outcome:
        while True:
            path = self.prompt.pick_save_path(self.last_save_dir, filter_str)
            if path is None:
                return Outcome.CANCELLED
            if not path.exists():
                break
            answer = self.prompt.confirm_overwrite(
                path,
                title=self.templates.overwrite_title,
                text=self.templates.render_overwrite(path),
            )
            if answer is OverwriteAnswer.YES:
                break
            # declined: let the user pick another location

        if not self.session.save(path):
            log.warning("Saving as %s failed", path)
            return Outcome.FAILED
        self._remember(path)
        self.last_save_dir = path.parent
        return Outcome.SUCCEEDED

    # ---------- Open / New ----------

    def open(self, filter_str: str = "", accessory: Any | None = None) -> Outcome:
        """Ask for a file and open it, offering to save unsaved changes first."""
        guard = self._resolve_unsaved_changes(filter_str)
        if not guard.ok:
            return guard

        path = self.prompt.pick_open_path(self.last_open_dir, filter_str, accessory)
        if path is None:
            return Outcome.CANCELLED
        self.last_open_dir = path.parent
        return self._open(path)

    def open_path(self, path: Path, filter_str: str = "") -> Outcome:
        """Open a known file (recent list, command line, drop)."""
        guard = self._resolve_unsaved_changes(filter_str)
        if not guard.ok:
            return guard
        return self._open(path)

    def create_new(self, filter_str: str = "") -> Outcome:
        guard = self._resolve_unsaved_changes(filter_str)
        if not guard.ok:
            return guard
        if not self.session.create_new():
            log.warning("Creating a new document failed")
            return Outcome.FAILED
        return Outcome.SUCCEEDED

    def confirm_close(self, filter_str: str = "") -> bool:
        """True when the current document may be discarded (saved, declined or unmodified)."""
        return self._resolve_unsaved_changes(filter_str).ok

    # ---------- Helpers ----------

    def _resolve_unsaved_changes(self, filter_str: str) -> Outcome:
        if not self.session.is_modified:
            return Outcome.SUCCEEDED

        title = self.session.title
        answer = self.prompt.confirm_save_changes(
            title,
            title=self.templates.modified_title,
            text=self.templates.render_modified(title),
        )
        if answer is SaveChangesAnswer.CONFIRM:
            return self.save(filter_str)
        if answer is SaveChangesAnswer.DECLINE:
            log.debug("Discarding changes to %s", title)
            return Outcome.SUCCEEDED
        return Outcome.CANCELLED

    def _open(self, path: Path) -> Outcome:
        if not self.session.open(path):
            log.warning("Opening %s failed", path)
            return Outcome.FAILED
        self._remember(path)
        return Outcome.SUCCEEDED

    def _remember(self, path: Path) -> None:
        if self._recent is not None:
            self._recent.add(path)
