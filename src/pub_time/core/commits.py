"""Commit history parsing and conventional commit classification.

The history is read with ``git log --format=format:%x1e%H%x1f%D%x1f%B``:
every commit starts with an ASCII record separator and its hash, ref names
and raw message are split by ASCII unit separators. Neither control
character appears in commit text, so records can be split unambiguously.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import StrEnum

from pub_time.core.version import SEMVER_REGEX, Version, parse_version
from pub_time.exceptions import MalformedHistoryError

logger = logging.getLogger(__name__)

RECORD_SEPARATOR = "\x1e"
FIELD_SEPARATOR = "\x1f"
LOG_FORMAT = "%x1e%H%x1f%D%x1f%B"

BREAKING_CHANGE_MARKER = "BREAKING CHANGE: "

_HASH_RE = re.compile(r"^[\da-f]{40}$")
_BREAKING_SUBJECT_RE = re.compile(r"^[a-z]+(\([^)]+\))?!:")
_FEAT_RE = re.compile(r"^feat(\([^)]+\))?!?:")
_CONVENTIONAL_RE = re.compile(r"^[a-z]+(\([^)]+\))?!?:")


class SemverImpact(StrEnum):
    """Version impact of a single commit."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class CommitRecord:
    """A commit as read from history.

    Attributes:
        hash: Full 40-character lowercase commit hash
        message: Subject line, trimmed
        footer: Everything after the subject line, trimmed
        versions: Versions tagged on this commit, in ref order
        semver_impact: Classification of the commit message
    """

    hash: str
    message: str
    footer: str = ""
    versions: tuple[Version, ...] = field(default=())
    semver_impact: SemverImpact = SemverImpact.UNKNOWN

    @property
    def short_hash(self) -> str:
        return self.hash[:7]

    @property
    def is_tagged(self) -> bool:
        return bool(self.versions)


def classify_commit(message: str, footer: str = "") -> SemverImpact:
    """Classify a commit by its subject line and footer.

    Args:
        message: Commit subject line
        footer: Commit body below the subject

    Returns:
        MAJOR for ``type!:`` subjects or a ``BREAKING CHANGE: `` footer,
        MINOR for ``feat:``, PATCH for any other conventional subject,
        UNKNOWN otherwise.
    """
    if _BREAKING_SUBJECT_RE.match(message) or BREAKING_CHANGE_MARKER in footer:
        return SemverImpact.MAJOR
    if _FEAT_RE.match(message):
        return SemverImpact.MINOR
    if _CONVENTIONAL_RE.match(message):
        return SemverImpact.PATCH
    return SemverImpact.UNKNOWN


def parse_tag_versions(ref_names: str, tag_prefix: str = "v") -> tuple[Version, ...]:
    """Extract version tags from a ``%D`` ref-name list.

    ``"HEAD -> main, tag: v1.2.0, origin/main"`` yields ``(Version(1, 2, 0),)``.
    Tags that are not ``<prefix><semver>`` are ignored.
    """
    marker = f"tag: {tag_prefix}"
    versions: list[Version] = []
    for part in ref_names.split(","):
        ref = part.strip()
        if not ref.startswith(marker):
            continue
        candidate = ref[len(marker) :]
        if SEMVER_REGEX.match(candidate):
            versions.append(parse_version(candidate))
    return tuple(versions)


def parse_history(text: str, *, tag_prefix: str = "v") -> list[CommitRecord]:
    """Parse raw ``git log`` output into commit records.

    Args:
        text: Output of ``git log`` using ``LOG_FORMAT``, newest commit first
        tag_prefix: Prefix of version tags (``v`` for ``v1.2.3``)

    Returns:
        One CommitRecord per commit, in the same (newest-first) order

    Raises:
        MalformedHistoryError: If the text is not in the expected format
    """
    if not text.strip():
        return []

    preamble, *raw_records = text.split(RECORD_SEPARATOR)
    if preamble.strip():
        raise MalformedHistoryError(
            f"Unexpected text before the first commit record: {preamble.strip()[:40]!r}"
        )

    commits = [_parse_record(raw, index, tag_prefix) for index, raw in enumerate(raw_records)]
    logger.debug("Parsed %d commits from history", len(commits))
    return commits


def _parse_record(raw: str, index: int, tag_prefix: str) -> CommitRecord:
    fields = raw.split(FIELD_SEPARATOR, 2)
    if len(fields) != 3:
        raise MalformedHistoryError(
            f"Commit record {index} has {len(fields)} field(s), expected 3"
        )

    raw_hash, ref_names, body = fields
    commit_hash = raw_hash.strip().lower()
    if not _HASH_RE.match(commit_hash):
        raise MalformedHistoryError(f"Commit record {index} has an invalid hash: {raw_hash!r}")

    subject, _, rest = body.partition("\n")
    message = subject.strip()
    footer = rest.strip()

    return CommitRecord(
        hash=commit_hash,
        message=message,
        footer=footer,
        versions=parse_tag_versions(ref_names, tag_prefix),
        semver_impact=classify_commit(message, footer),
    )
