"""Terminal file explorer with a directory tree, file preview and shell prompt."""

__version__ = "0.1.0"
__all__ = ["tree", "handlers", "paths", "manager"]