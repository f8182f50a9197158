"""Shared test fixtures: temp git repos and an in-memory gateway."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from lmdiff.git.adapter import ExternalToolError, NotFoundAtRevision


def git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=repo, capture_output=True, text=True, check=True
    )
    return result.stdout


class FakeGateway:
    """VersionControlGateway backed by dicts instead of a git process."""

    def __init__(
        self,
        changed: Optional[List[str]] = None,
        untracked: Optional[List[str]] = None,
        at_ref: Optional[Dict[str, str]] = None,
        diff: str = "",
    ) -> None:
        self.changed = changed or []
        self.untracked = untracked or []
        self.at_ref = at_ref or {}
        self.diff = diff
        self.fail_listing = False
        self.shown: List[str] = []

    def get_diff(self, ref: str) -> str:
        return self.diff

    def get_changed_paths(self, ref: str) -> List[str]:
        if self.fail_listing:
            raise ExternalToolError("fatal: bad revision", args=["diff", "--name-only", ref])
        return list(self.changed)

    def get_untracked_paths(self) -> List[str]:
        return list(self.untracked)

    def get_content_at(self, ref: str, path: str) -> str:
        self.shown.append(path)
        if path not in self.at_ref:
            raise NotFoundAtRevision(f"{path} does not exist at {ref}")
        return self.at_ref[path]


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository with one commit on branch ``base``."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    git(tmp_path, "config", "user.email", "test@test.com")
    git(tmp_path, "config", "user.name", "Test")
    git(tmp_path, "config", "commit.gpgsign", "false")
    git(tmp_path, "config", "core.autocrlf", "false")
    (tmp_path / "README.md").write_text("# Test\n")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "a.go").write_text("old\n")
    git(tmp_path, "add", ".")
    git(tmp_path, "commit", "-m", "init")
    git(tmp_path, "branch", "base")
    return tmp_path
