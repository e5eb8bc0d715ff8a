"""Unit tests for git access."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from pub_time.core.commits import LOG_FORMAT
from pub_time.exceptions import GitError
from pub_time.vcs.git import GitRepository


class TestReadHistory:
    """Tests for GitRepository.read_history()."""

    def test_returns_stdout(self, tmp_path: Path):
        repo = GitRepository(tmp_path)

        with patch("subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(stdout="\x1eabc", returncode=0)

            assert repo.read_history() == "\x1eabc"

            args = mock_run.call_args[0][0]
            assert args[:3] == ["git", "--no-pager", "log"]
            assert f"--format=format:{LOG_FORMAT}" in args
            assert mock_run.call_args.kwargs["cwd"] == tmp_path.resolve()

    def test_repository_without_commits(self, tmp_path: Path):
        repo = GitRepository(tmp_path)

        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = subprocess.CalledProcessError(
                128,
                "git",
                stderr="fatal: your current branch 'main' does not have any commits yet",
            )

            assert repo.read_history() == ""

    def test_git_failure_raises(self, tmp_path: Path):
        repo = GitRepository(tmp_path)

        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = subprocess.CalledProcessError(
                128, "git", stderr="fatal: not a git repository"
            )

            with pytest.raises(GitError, match="not a git repository") as exc_info:
                repo.read_history()

            assert exc_info.value.stderr == "fatal: not a git repository"

    def test_git_not_installed(self, tmp_path: Path):
        repo = GitRepository(tmp_path)

        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = FileNotFoundError("git")

            with pytest.raises(GitError, match="git not found"):
                repo.read_history()


class TestIsDirty:
    """Tests for GitRepository.is_dirty()."""

    def test_clean(self, tmp_path: Path):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(stdout="", returncode=0)
            assert GitRepository(tmp_path).is_dirty() is False

    def test_dirty(self, tmp_path: Path):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(stdout=" M pyproject.toml\n", returncode=0)
            assert GitRepository(tmp_path).is_dirty() is True

            assert mock_run.call_args[0][0] == ["git", "status", "--porcelain"]


class TestGitErrorMessage:
    """Tests for GitError formatting."""

    def test_without_stderr(self):
        assert str(GitError("boom")) == "boom"

    def test_with_stderr(self):
        assert str(GitError("git log failed", stderr="fatal: bad\n")) == "git log failed: fatal: bad"


class TestReleaseWrites:
    """Tests for GitRepository.commit_all() and create_tag()."""

    def test_commit_all(self, tmp_path: Path):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(stdout="", returncode=0)
            GitRepository(tmp_path).commit_all("ci: release v1.3.0")

            commands = [c[0][0] for c in mock_run.call_args_list]
            assert commands == [
                ["git", "add", "."],
                ["git", "commit", "-m", "ci: release v1.3.0"],
            ]

    def test_create_tag(self, tmp_path: Path):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(stdout="", returncode=0)
            GitRepository(tmp_path).create_tag("v1.3.0", "1.3.0")

            assert mock_run.call_args[0][0] == ["git", "tag", "-a", "v1.3.0", "-m", "1.3.0"]

    def test_existing_tag_raises(self, tmp_path: Path):
        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = subprocess.CalledProcessError(
                128, "git", stderr="fatal: tag 'v1.3.0' already exists"
            )

            with pytest.raises(GitError, match="already exists"):
                GitRepository(tmp_path).create_tag("v1.3.0", "1.3.0")
