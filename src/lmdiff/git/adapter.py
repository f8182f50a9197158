"""Git subprocess wrapper: diff, changed/untracked listings, content at a revision."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional, Sequence

# git show reports a missing path with one of these, depending on whether
# the file exists in the working tree.
_MISSING_AT_REF_MARKERS = (
    "does not exist in",
    "exists on disk, but not in",
)


class ExternalToolError(Exception):
    """Raised when git is unavailable or exits non-zero."""

    def __init__(
        self,
        message: str,
        *,
        args: Sequence[str] = (),
        returncode: Optional[int] = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.git_args = list(args)
        self.returncode = returncode
        self.stderr = stderr


class NotFoundAtRevision(ExternalToolError):
    """The requested path did not exist at the revision (e.g. a newly added file)."""


def _split_paths(output: str) -> list[str]:
    """Split NUL-separated listing output; blank output yields an empty list."""
    return [path for path in output.split("\0") if path.strip()]


def _run_git(args: list[str], cwd: Path, timeout: Optional[float] = None) -> str:
    """Run a git command and return stdout. Raises ExternalToolError on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            timeout=timeout,
        )
    except FileNotFoundError:
        raise ExternalToolError("git is not installed or not on PATH", args=args)
    except subprocess.TimeoutExpired:
        raise ExternalToolError(
            f"git command timed out after {timeout}s: git {' '.join(args)}", args=args
        )

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        raise ExternalToolError(
            f"git {' '.join(args)} exited with status {result.returncode}: {stderr}",
            args=args,
            returncode=result.returncode,
            stderr=stderr,
        )
    # Decoded by hand so CRLF line endings survive.
    return result.stdout.decode("utf-8", errors="replace")


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the git repository containing *cwd*."""
    cwd = cwd or Path.cwd()
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    return Path(out.strip())


class GitGateway:
    """Runs git in *root*, one blocking subprocess per call."""

    def __init__(self, root: Path, timeout: Optional[float] = None) -> None:
        self.root = Path(root)
        self.timeout = timeout

    def _git(self, args: list[str]) -> str:
        return _run_git(args, cwd=self.root, timeout=self.timeout)

    def get_diff(self, ref: str) -> str:
        """Return the unified diff between the working tree and *ref*."""
        return self._git(["diff", "--no-color", ref])

    def get_changed_paths(self, ref: str) -> list[str]:
        """Return paths that differ between the working tree and *ref*."""
        return _split_paths(self._git(["diff", "--name-only", "-z", "--no-color", ref]))

    def get_untracked_paths(self) -> list[str]:
        """Return untracked paths not excluded by the standard ignore rules."""
        return _split_paths(self._git(["ls-files", "-z", "--others", "--exclude-standard"]))

    def get_content_at(self, ref: str, path: str) -> str:
        """Return the content of *path* as of *ref*.

        Raises NotFoundAtRevision when git reports the path is absent at *ref*.
        """
        try:
            return self._git(["show", f"{ref}:{path}"])
        except ExternalToolError as exc:
            if any(marker in exc.stderr for marker in _MISSING_AT_REF_MARKERS):
                raise NotFoundAtRevision(
                    f"{path} does not exist at {ref}",
                    args=exc.git_args,
                    returncode=exc.returncode,
                    stderr=exc.stderr,
                ) from exc
            raise
