"""Document session helpers: save/open confirmation workflows and a persistent recent-files list."""

__version__ = "1.0.0"
