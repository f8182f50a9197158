"""Original-content resolution with revision → working tree → placeholder fallback."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from lmdiff.context.models import Diagnostic
from lmdiff.git.protocol import VersionControlGateway

PLACEHOLDER = "Error retrieving file content."


class ContentResolver:
    """Fetches the content a reviewer should see as the "original" of a file.

    ``resolve`` never raises: if neither the revision nor the working tree can
    supply the file, a Diagnostic is recorded and the placeholder returned.
    """

    def __init__(
        self,
        gateway: VersionControlGateway,
        root: Path,
        *,
        placeholder: str = PLACEHOLDER,
        diagnostics: Optional[List[Diagnostic]] = None,
    ) -> None:
        self.gateway = gateway
        self.root = Path(root)
        self.placeholder = placeholder
        self.diagnostics: List[Diagnostic] = diagnostics if diagnostics is not None else []

    def read_local(self, path: str) -> str:
        """Read *path* from the working tree."""
        return (self.root / path).read_bytes().decode("utf-8", errors="replace")

    def resolve(
        self, ref: str, path: str, diagnostics: Optional[List[Diagnostic]] = None
    ) -> str:
        """Return the content of *path* at *ref*, the working tree, or the placeholder.

        The failure Diagnostic goes to *diagnostics* when given, else to
        ``self.diagnostics``.
        """
        try:
            return self.gateway.get_content_at(ref, path)
        except Exception:
            # Not at ref (new file) or git failed: fall back to the working tree.
            return self._resolve_local(
                path, self.diagnostics if diagnostics is None else diagnostics
            )

    def _resolve_local(self, path: str, diagnostics: List[Diagnostic]) -> str:
        try:
            return self.read_local(path)
        except Exception as exc:
            diagnostics.append(
                Diagnostic(
                    path=path,
                    message=f"cannot retrieve content for {path}: {exc}",
                    kind="content",
                )
            )
            return self.placeholder
