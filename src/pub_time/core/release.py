"""Next version computation.

Pending commits are sorted into major/minor/patch buckets and the
strongest impact decides the bump. Two rules override the bump:

1. Once a major line exists (``X >= 1``) and ``X.0.0`` itself has not
   shipped, the next version is ``X.0.0``.
2. Before ``0.1.0`` the next version is ``0.1.0``.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pub_time.core.commits import SemverImpact, parse_history
from pub_time.core.version import NEW_VERSION, BumpType, Version
from pub_time.core.window import find_boundary_index
from pub_time.exceptions import AmbiguousReleaseWindowError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pub_time.core.commits import CommitRecord

logger = logging.getLogger(__name__)

_FIRST_MINOR = Version(0, 1, 0)


@dataclass(frozen=True, slots=True)
class ReleaseData:
    """Everything known about the upcoming release."""

    prev_version: Version
    next_version: Version
    bump: BumpType
    commits: tuple[CommitRecord, ...] = ()
    majors: tuple[CommitRecord, ...] = ()
    minors: tuple[CommitRecord, ...] = ()
    patches: tuple[CommitRecord, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.commits


def bucket_commits(
    commits: Sequence[CommitRecord],
) -> tuple[BumpType, list[CommitRecord], list[CommitRecord], list[CommitRecord]]:
    """Split commits by impact and decide the overall bump.

    Commits with UNKNOWN impact go to the patch bucket with their message
    prefixed by ``unknown: ``.

    Returns:
        Tuple of (bump, majors, minors, patches)
    """
    bump = BumpType.PATCH
    majors: list[CommitRecord] = []
    minors: list[CommitRecord] = []
    patches: list[CommitRecord] = []

    for commit in commits:
        match commit.semver_impact:
            case SemverImpact.MAJOR:
                bump = BumpType.MAJOR
                majors.append(commit)
            case SemverImpact.MINOR:
                if bump == BumpType.PATCH:
                    bump = BumpType.MINOR
                minors.append(commit)
            case SemverImpact.PATCH:
                patches.append(commit)
            case _:
                patches.append(dataclasses.replace(commit, message=f"unknown: {commit.message}"))

    return bump, majors, minors, patches


def next_version_for(prev_version: Version, bump: BumpType) -> Version:
    """Compute the version that follows ``prev_version``."""
    major_line = Version(prev_version.major, 0, 0)
    if prev_version.major >= 1 and prev_version.is_before(major_line):
        return major_line
    if prev_version.is_before(_FIRST_MINOR):
        return Version(prev_version.major, 1, 0)
    return prev_version.bump(bump)


def compute_next_version(
    prev_version: Version | None,
    pending: Sequence[CommitRecord],
) -> ReleaseData:
    """Classify pending commits and compute the next version.

    Args:
        prev_version: Last published version, or None if nothing was published
        pending: Commits of the release window, newest first

    Returns:
        ReleaseData for the upcoming release
    """
    prev = NEW_VERSION if prev_version is None else prev_version
    bump, majors, minors, patches = bucket_commits(pending)
    next_version = next_version_for(prev, bump)
    logger.debug(
        "Bump %s over %d commit(s): %s -> %s",
        bump,
        len(pending),
        prev.to_human_string(),
        next_version,
    )
    return ReleaseData(
        prev_version=prev,
        next_version=next_version,
        bump=bump,
        commits=tuple(pending),
        majors=tuple(majors),
        minors=tuple(minors),
        patches=tuple(patches),
    )


def generate_release(
    history_text: str,
    prev_version: Version | None = None,
    boundary: str | None = None,
    *,
    tag_prefix: str = "v",
) -> ReleaseData:
    """Run the full pipeline from raw ``git log`` output to ReleaseData.

    Args:
        history_text: ``git log`` output in ``LOG_FORMAT``, newest first
        prev_version: Last published version, or None
        boundary: Hash prefix of the last released commit; None infers it
            from version tags, ``"all"`` takes the whole history
        tag_prefix: Prefix of version tags

    Returns:
        ReleaseData for the upcoming release

    Raises:
        MalformedHistoryError: If the history text cannot be parsed
        AmbiguousReleaseWindowError: If there is nothing pending and nothing
            anchors the window
    """
    commits = parse_history(history_text, tag_prefix=tag_prefix)
    return release_from_commits(commits, prev_version, boundary)


def release_from_commits(
    commits: Sequence[CommitRecord],
    prev_version: Version | None = None,
    boundary: str | None = None,
) -> ReleaseData:
    """Select the pending window of parsed history and compute the release.

    Raises:
        AmbiguousReleaseWindowError: If there is nothing pending and nothing
            anchors the window
    """
    index = find_boundary_index(commits, boundary)
    pending = commits if index is None else commits[:index]

    if index is None and not pending:
        raise AmbiguousReleaseWindowError(
            "No commits found and no release boundary to anchor the release window"
        )

    return compute_next_version(prev_version, pending)
