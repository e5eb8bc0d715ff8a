"""Changelog rendering.

Builds the markdown release notes from the commit buckets of a
ReleaseData: breaking changes, then features, then everything else.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pub_time.core.commits import CommitRecord
    from pub_time.core.release import ReleaseData
    from pub_time.core.version import Version

MAJOR_HEADING = "Major changes (breaking)"
MINOR_HEADING = "Feature updates"
PATCH_HEADING = "Other commits"

# Characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"


def render_changelog(release: ReleaseData) -> str:
    """Render release notes for a release.

    Args:
        release: Release whose majors/minors/patches buckets are rendered

    Returns:
        Markdown text ending in a single newline, or an empty string when
        every bucket is empty
    """
    sections = [
        _render_section(heading, commits)
        for heading, commits in (
            (MAJOR_HEADING, release.majors),
            (MINOR_HEADING, release.minors),
            (PATCH_HEADING, release.patches),
        )
        if commits
    ]
    if not sections:
        return ""
    return "\n\n".join(sections) + "\n"


def _render_section(heading: str, commits: Sequence[CommitRecord]) -> str:
    return f"# {heading}\n\n{_to_markdown_list(commits)}"


def _to_markdown_list(commits: Sequence[CommitRecord]) -> str:
    # Only consecutive repeats are collapsed
    lines: list[str] = []
    for commit in commits:
        line = f"- {commit.message}"
        if lines and lines[-1] == line:
            continue
        lines.append(line)
    return "\n".join(lines)


def release_link(
    homepage: str | None,
    version: Version,
    notes: str,
    *,
    tag_prefix: str = "v",
) -> str | None:
    """Build a prefilled GitHub "new release" URL.

    Args:
        homepage: Project homepage, e.g. ``https://github.com/owner/repo``
        version: Version being released
        notes: Rendered release notes used as the release body
        tag_prefix: Prefix of the release tag

    Returns:
        The URL, or None when the homepage is not a GitHub repository
    """
    if not homepage or not homepage.startswith("https://github.com/"):
        return None
    tag = quote(f"{tag_prefix}{version}", safe=_URI_COMPONENT_SAFE)
    body = quote(notes, safe=_URI_COMPONENT_SAFE)
    return f"{homepage.rstrip('/')}/releases/new?tag={tag}&title={tag}&body={body}"
