"""Shared setup for commands: config, git history and release computation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from pub_time.config import load_config
from pub_time.config.loader import get_project_homepage
from pub_time.core.commits import parse_history
from pub_time.core.release import release_from_commits
from pub_time.core.version import parse_version
from pub_time.core.window import latest_tagged_version
from pub_time.exceptions import PubTimeError
from pub_time.project.pyproject import get_pyproject_version
from pub_time.vcs import GitRepository

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from pub_time.config.models import PubTimeConfig
    from pub_time.core.commits import CommitRecord
    from pub_time.core.release import ReleaseData
    from pub_time.core.version import Version

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReleaseContext:
    project_path: Path
    config: PubTimeConfig
    repo: GitRepository
    release: ReleaseData

    @property
    def homepage(self) -> str | None:
        if self.config.homepage:
            return self.config.homepage
        try:
            return get_project_homepage(self.project_path)
        except PubTimeError:
            return None


def resolve_prev_version(
    config: PubTimeConfig,
    commits: Sequence[CommitRecord],
    project_path: Path,
    override: str | None = None,
) -> Version | None:
    """Find the previously published version.

    Order: explicit override, then the configured source (newest version
    tag in history, or ``[project].version``). None means nothing has been
    published.
    """
    if override:
        return parse_version(override)
    if config.version.source == "pyproject":
        return parse_version(get_pyproject_version(project_path))
    return latest_tagged_version(commits)


def build_release_context(
    path: str | None,
    prev_hash: str | None,
    prev_version: str | None,
    err_console: Console,
) -> ReleaseContext:
    """Load config, read history and compute the pending release.

    Exits with status 1 on any pub-time error.
    """
    project_path = Path(path) if path else Path.cwd()

    try:
        config = load_config(project_path)
    except PubTimeError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    repo = GitRepository(project_path)
    boundary = prev_hash or config.prev_hash

    try:
        commits = parse_history(repo.read_history(), tag_prefix=config.tag_prefix)
        prev = resolve_prev_version(config, commits, project_path, prev_version)
        release = release_from_commits(commits, prev, boundary)
    except PubTimeError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    logger.debug("Boundary %r, %d pending commit(s)", boundary, len(release.commits))
    return ReleaseContext(project_path=project_path, config=config, repo=repo, release=release)


def version_transition(release: ReleaseData) -> str:
    """``prev => next`` in human form, escaped for rich markup."""
    prev = escape(release.prev_version.to_human_string())
    return f"[cyan]{prev}[/] => [green]{release.next_version.to_human_string()}[/]"
