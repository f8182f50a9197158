"""Git interface layer: subprocess adapter and gateway protocol."""

from lmdiff.git.adapter import (
    ExternalToolError,
    GitGateway,
    NotFoundAtRevision,
    get_repo_root,
)
from lmdiff.git.protocol import VersionControlGateway

__all__ = [
    "ExternalToolError",
    "GitGateway",
    "NotFoundAtRevision",
    "VersionControlGateway",
    "get_repo_root",
]
