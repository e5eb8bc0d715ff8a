"""Git access for pub-time.

Mostly reads: the raw commit log and the working tree status. Writes are
limited to the release commit and its annotated tag; nothing is pushed.
Every command goes through ``GitRepository._run`` so tests can patch
``subprocess.run`` in one place.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from pub_time.core.commits import LOG_FORMAT
from pub_time.exceptions import GitError

logger = logging.getLogger(__name__)

# Message git prints for `git log` in a repository without commits
_NO_COMMITS_MARKERS = ("does not have any commits yet", "bad default revision")


class GitRepository:
    """A git working copy."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = (path or Path.cwd()).resolve()

    def _run(self, args: list[str]) -> subprocess.CompletedProcess[str]:
        """Run a git command in the repository.

        Raises:
            GitError: If git is missing or exits with a non-zero status
        """
        cmd = ["git", *args]
        logger.debug("Running: %s", " ".join(cmd))
        try:
            return subprocess.run(
                cmd,
                cwd=self.path,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=True,
            )
        except FileNotFoundError as e:
            raise GitError("git not found. Is git installed and on PATH?") from e
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"Git command failed with exit code {e.returncode}",
                stderr=e.stderr,
            ) from e

    def read_history(self) -> str:
        """Return the full commit log, newest first, in ``LOG_FORMAT``.

        A repository without commits yields an empty string.
        """
        try:
            result = self._run(["--no-pager", "log", f"--format=format:{LOG_FORMAT}"])
        except GitError as e:
            if e.stderr and any(marker in e.stderr for marker in _NO_COMMITS_MARKERS):
                logger.debug("Repository at %s has no commits", self.path)
                return ""
            raise
        return result.stdout

    def is_dirty(self) -> bool:
        """Return True if the working tree has uncommitted changes."""
        result = self._run(["status", "--porcelain"])
        return bool(result.stdout.strip())

    def commit_all(self, message: str) -> None:
        """Stage every change and commit it."""
        self._run(["add", "."])
        self._run(["commit", "-m", message])
        logger.debug("Committed %r in %s", message, self.path)

    def create_tag(self, name: str, message: str) -> None:
        """Create an annotated tag on HEAD."""
        self._run(["tag", "-a", name, "-m", message])
        logger.debug("Tagged %s in %s", name, self.path)
