"""Working-tree access."""

from lmdiff.files.walker import DEFAULT_METADATA_DIR, FilesystemWalker, PathUnreadable

__all__ = ["DEFAULT_METADATA_DIR", "FilesystemWalker", "PathUnreadable"]
