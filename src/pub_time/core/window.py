"""Release window selection.

The pending window is the newest-first prefix of history that comes after
the last release: everything strictly newer than the boundary commit.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pub_time.core.commits import CommitRecord
    from pub_time.core.version import Version

logger = logging.getLogger(__name__)

# Not a hex string, so it never matches a hash and the whole history is pending.
ALL_COMMITS = "all"


def find_boundary_index(
    commits: Sequence[CommitRecord],
    boundary: str | None = None,
) -> int | None:
    """Locate the last released commit.

    Args:
        commits: History, newest first
        boundary: Hash prefix of the last released commit (case-insensitive),
            or None to use the newest commit carrying a version tag

    Returns:
        Index of the boundary commit, or None if nothing matched
    """
    if boundary:
        prefix = boundary.lower()
        for index, commit in enumerate(commits):
            if commit.hash.startswith(prefix):
                logger.debug("Boundary %r matched commit %s", boundary, commit.short_hash)
                return index
        logger.debug("Boundary %r matched no commit", boundary)
        return None

    for index, commit in enumerate(commits):
        if commit.is_tagged:
            logger.debug("Last tagged commit is %s", commit.short_hash)
            return index
    logger.debug("No tagged commit found")
    return None


def select_pending(
    commits: Sequence[CommitRecord],
    boundary: str | None = None,
) -> list[CommitRecord]:
    """Return the commits not yet released.

    When no boundary is found the entire history is pending.
    """
    index = find_boundary_index(commits, boundary)
    if index is None:
        return list(commits)
    return list(commits[:index])


def latest_tagged_version(commits: Sequence[CommitRecord]) -> Version | None:
    """Return the first version tag of the newest tagged commit, if any."""
    for commit in commits:
        if commit.versions:
            return commit.versions[0]
    return None
