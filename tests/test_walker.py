"""Tests for directory classification and recursive file listing."""

import os
from pathlib import Path

import pytest

from lmdiff.files import walker as walker_module
from lmdiff.files.walker import FilesystemWalker, PathUnreadable


@pytest.fixture
def pkg_tree(tmp_path: Path) -> Path:
    pkg = tmp_path / "pkg"
    (pkg / "sub").mkdir(parents=True)
    (pkg / ".git").mkdir()
    (pkg / "a.go").write_text("package pkg\n")
    (pkg / "sub" / "b.go").write_text("package sub\n")
    (pkg / ".git" / "ignored").write_text("metadata")
    return tmp_path


class TestIsDirectory:
    def test_directory(self, pkg_tree: Path):
        assert FilesystemWalker(pkg_tree).is_directory("pkg") is True

    def test_file(self, pkg_tree: Path):
        assert FilesystemWalker(pkg_tree).is_directory("pkg/a.go") is False

    def test_missing_path_raises(self, pkg_tree: Path):
        with pytest.raises(PathUnreadable) as excinfo:
            FilesystemWalker(pkg_tree).is_directory("gone.txt")
        assert excinfo.value.path == "gone.txt"

    def test_absolute_path(self, pkg_tree: Path):
        walker = FilesystemWalker(Path("/nonexistent-root"))
        assert walker.is_directory(str(pkg_tree / "pkg")) is True


class TestListFilesRecursive:
    def test_prunes_metadata_dir(self, pkg_tree: Path):
        files = FilesystemWalker(pkg_tree).list_files_recursive("pkg/")
        assert files == ["pkg/a.go", "pkg/sub/b.go"]

    def test_never_lists_directories(self, pkg_tree: Path):
        (pkg_tree / "pkg" / "empty").mkdir()
        files = FilesystemWalker(pkg_tree).list_files_recursive("pkg")
        assert all(not (pkg_tree / f).is_dir() for f in files)
        assert not any(".git" in Path(f).parts for f in files)

    def test_depth_first_name_order(self, tmp_path: Path):
        (tmp_path / "d" / "a").mkdir(parents=True)
        (tmp_path / "d" / "a" / "x.txt").write_text("x")
        (tmp_path / "d" / "b.txt").write_text("b")
        files = FilesystemWalker(tmp_path).list_files_recursive("d")
        assert files == [os.path.join("d", "a", "x.txt"), os.path.join("d", "b.txt")]

    def test_custom_metadata_dir(self, pkg_tree: Path):
        (pkg_tree / "pkg" / ".hg").mkdir()
        (pkg_tree / "pkg" / ".hg" / "store").write_text("hg")
        files = FilesystemWalker(pkg_tree, metadata_dir=".hg").list_files_recursive("pkg")
        assert "pkg/.hg/store" not in files
        assert "pkg/.git/ignored" in files

    def test_missing_dir_raises(self, tmp_path: Path):
        with pytest.raises(PathUnreadable):
            FilesystemWalker(tmp_path).list_files_recursive("nope")

    @pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="needs POSIX permissions as non-root")
    def test_unreadable_subdir_aborts_walk(self, pkg_tree: Path):
        locked = pkg_tree / "pkg" / "sub"
        locked.chmod(0)
        try:
            with pytest.raises(PathUnreadable):
                FilesystemWalker(pkg_tree).list_files_recursive("pkg")
        finally:
            locked.chmod(0o755)

    def test_error_mid_walk_aborts_without_partial_result(self, pkg_tree: Path, monkeypatch):
        real_scandir = os.scandir
        visited = []

        def scandir(path):
            visited.append(Path(path).name)
            if Path(path).name == "sub":
                raise PermissionError(13, "Permission denied", str(path))
            return real_scandir(path)

        monkeypatch.setattr(walker_module.os, "scandir", scandir)
        walker = FilesystemWalker(pkg_tree)

        with pytest.raises(PathUnreadable) as excinfo:
            walker.list_files_recursive("pkg")

        assert visited == ["pkg", "sub"]
        assert excinfo.value.reason == "Permission denied"
        assert excinfo.value.path.endswith("sub")
