"""Filesystem walker: directory test and recursive file listing."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Iterator, List

DEFAULT_METADATA_DIR = ".git"


class PathUnreadable(Exception):
    """Raised when a candidate path cannot be stat'ed or traversed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class FilesystemWalker:
    """Classifies and expands paths relative to *root*.

    Directories named *metadata_dir* are pruned from every walk.
    """

    def __init__(self, root: Path, metadata_dir: str = DEFAULT_METADATA_DIR) -> None:
        self.root = Path(root)
        self.metadata_dir = metadata_dir

    def _absolute(self, path: str) -> Path:
        return self.root / path

    def is_directory(self, path: str) -> bool:
        """Return True if *path* is a directory. Raises PathUnreadable on stat failure."""
        try:
            st = os.stat(self._absolute(path))
        except OSError as exc:
            raise PathUnreadable(path, exc.strerror or str(exc)) from exc
        return stat.S_ISDIR(st.st_mode)

    def list_files_recursive(self, dir_path: str) -> List[str]:
        """Return every file beneath *dir_path*, depth-first in name order.

        A failure anywhere in the walk aborts it; no partial result is returned.
        """
        if Path(dir_path).name == self.metadata_dir:
            return []
        try:
            return list(self._walk(dir_path))
        except OSError as exc:
            failed = exc.filename or dir_path
            raise PathUnreadable(
                str(failed), exc.strerror or str(exc)
            ) from exc

    def _walk(self, rel_dir: str) -> Iterator[str]:
        with os.scandir(self._absolute(rel_dir)) as it:
            entries = sorted(it, key=lambda e: e.name)
        for entry in entries:
            rel_path = os.path.join(rel_dir, entry.name)
            if entry.is_dir(follow_symlinks=False):
                if entry.name == self.metadata_dir:
                    continue
                yield from self._walk(rel_path)
            else:
                yield rel_path
