"""Concrete service implementations."""

from .file_service import FileService
from .recent_files import RecentFilesTracker
from .session_controller import DocumentSessionController
from .settings_service import SettingsService

__all__ = ["DocumentSessionController", "FileService", "RecentFilesTracker", "SettingsService"]
