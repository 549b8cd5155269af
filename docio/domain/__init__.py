"""Domain models and service interfaces (no Qt imports)."""

from .interfaces import IAppConfig, IConfigService, IDocumentSession, IFileService, IKeyValueStore
from .models import Document, MessageTemplates, Outcome, OverwriteAnswer, SaveChangesAnswer

__all__ = [
    "IAppConfig",
    "IConfigService",
    "IDocumentSession",
    "IFileService",
    "IKeyValueStore",
    "Document",
    "MessageTemplates",
    "Outcome",
    "OverwriteAnswer",
    "SaveChangesAnswer",
]
