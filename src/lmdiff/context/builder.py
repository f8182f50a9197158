"""Build the change set and content map for a review prompt."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from lmdiff.context.models import Diagnostic, ReviewContext
from lmdiff.context.resolver import PLACEHOLDER, ContentResolver
from lmdiff.files.walker import DEFAULT_METADATA_DIR, FilesystemWalker, PathUnreadable
from lmdiff.git.adapter import GitGateway
from lmdiff.git.protocol import VersionControlGateway


class PathSetBuilder:
    """Merges tracked and untracked paths, expands directories, resolves content."""

    def __init__(
        self,
        gateway: VersionControlGateway,
        walker: FilesystemWalker,
        resolver: ContentResolver,
    ) -> None:
        self.gateway = gateway
        self.walker = walker
        self.resolver = resolver

    def build(self, ref: str, include_untracked: bool = True) -> ReviewContext:
        """Return the ReviewContext for the working tree against *ref*.

        ExternalToolError from either listing propagates; every per-path
        failure becomes a Diagnostic instead.
        """
        paths = list(self.gateway.get_changed_paths(ref))
        if include_untracked:
            paths.extend(self.gateway.get_untracked_paths())

        ctx = ReviewContext(ref=ref)

        for path in paths:
            if not path.strip():
                continue

            try:
                is_dir = self.walker.is_directory(path)
            except PathUnreadable as exc:
                ctx.diagnostics.append(
                    Diagnostic(
                        path=path,
                        message=f"could not determine if {path} is a directory: {exc.reason}",
                        kind="classify",
                    )
                )
                continue

            if is_dir:
                try:
                    files = self.walker.list_files_recursive(path)
                except PathUnreadable as exc:
                    ctx.diagnostics.append(
                        Diagnostic(
                            path=path,
                            message=f"could not read directory {path}: {exc.reason}",
                            kind="walk",
                        )
                    )
                    continue
            else:
                files = [path]

            ctx.change_set.append(path)
            for file_path in files:
                ctx.contents[file_path] = self.resolver.resolve(
                    ref, file_path, diagnostics=ctx.diagnostics
                )

        return ctx


def build_review_context(
    root: Path,
    ref: str,
    *,
    include_untracked: bool = True,
    gateway: Optional[VersionControlGateway] = None,
    metadata_dir: str = DEFAULT_METADATA_DIR,
    placeholder: str = PLACEHOLDER,
) -> ReviewContext:
    """Wire the default git-backed pipeline rooted at *root* and run it."""
    root = Path(root)
    gateway = gateway or GitGateway(root)
    builder = PathSetBuilder(
        gateway,
        FilesystemWalker(root, metadata_dir=metadata_dir),
        ContentResolver(gateway, root, placeholder=placeholder),
    )
    return builder.build(ref, include_untracked=include_untracked)
