"""Core release logic for pub-time.

Everything here is pure: no git, no files, no console.
- Version parsing and comparison
- Commit history parsing and conventional commit classification
- Release window selection
- Next version computation
- Changelog rendering
"""

from __future__ import annotations

from pub_time.core.changelog import release_link, render_changelog
from pub_time.core.commits import (
    LOG_FORMAT,
    CommitRecord,
    SemverImpact,
    classify_commit,
    parse_history,
    parse_tag_versions,
)
from pub_time.core.release import (
    ReleaseData,
    bucket_commits,
    compute_next_version,
    generate_release,
    next_version_for,
    release_from_commits,
)
from pub_time.core.version import (
    NEW_VERSION,
    BumpType,
    Version,
    is_before,
    parse_version,
)
from pub_time.core.window import (
    ALL_COMMITS,
    find_boundary_index,
    latest_tagged_version,
    select_pending,
)

__all__ = [
    # Window
    "ALL_COMMITS",
    # Commits
    "LOG_FORMAT",
    # Version
    "NEW_VERSION",
    "BumpType",
    "CommitRecord",
    # Release
    "ReleaseData",
    "SemverImpact",
    "Version",
    "bucket_commits",
    "classify_commit",
    "compute_next_version",
    "find_boundary_index",
    "generate_release",
    "is_before",
    "latest_tagged_version",
    "next_version_for",
    "parse_history",
    "parse_tag_versions",
    "parse_version",
    "release_from_commits",
    # Changelog
    "release_link",
    "render_changelog",
    "select_pending",
]
