"""Version-control gateway protocol."""

from typing import List, Protocol, runtime_checkable


@runtime_checkable
class VersionControlGateway(Protocol):
    """Operations the review pipeline needs from the version-control tool."""

    def get_diff(self, ref: str) -> str:
        """Unified diff between the working tree and *ref*."""
        ...

    def get_changed_paths(self, ref: str) -> List[str]:
        """Paths differing from *ref*. Empty list when nothing changed."""
        ...

    def get_untracked_paths(self) -> List[str]:
        """Untracked, non-ignored paths. Empty list when there are none."""
        ...

    def get_content_at(self, ref: str, path: str) -> str:
        """Content of *path* at *ref*; raises NotFoundAtRevision if absent."""
        ...
