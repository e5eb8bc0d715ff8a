"""Semantic version model.

Versions follow the SemVer 2.0 grammar ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]``.
Only the prerelease part is kept (as ``suffix``); build metadata is parsed
and dropped.

A string that does not parse is never an error: it yields ``NEW_VERSION``,
the ``0.0.0-new`` sentinel meaning "nothing has been published yet".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

SEMVER_REGEX = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[A-Za-z-][\dA-Za-z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[A-Za-z-][\dA-Za-z-]*))*))?"
    r"(?:\+([\dA-Za-z-]+(?:\.[\dA-Za-z-]+)*))?$"
)

NEW_SUFFIX = "new"


class BumpType(StrEnum):
    """Magnitude of a version increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


@dataclass(frozen=True, slots=True)
class Version:
    """An immutable semantic version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        suffix: Prerelease identifier, or ``"new"`` for the unreleased sentinel
    """

    major: int
    minor: int
    patch: int
    suffix: str | None = None

    def __post_init__(self) -> None:
        if min(self.major, self.minor, self.patch) < 0:
            raise ValueError(f"Version numbers must be non-negative: {self!r}")

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a version string, see :func:`parse_version`."""
        return parse_version(text)

    @property
    def is_new(self) -> bool:
        """True for the "nothing published yet" sentinel."""
        return self == NEW_VERSION

    def is_before(self, other: Version) -> bool:
        """Return True if this version sorts strictly before ``other``."""
        return is_before(self, other)

    def bump(self, kind: BumpType) -> Version:
        """Return the next version for a plain increment of ``kind``."""
        match kind:
            case BumpType.MAJOR:
                return Version(self.major + 1, 0, 0)
            case BumpType.MINOR:
                return Version(self.major, self.minor + 1, 0)
            case BumpType.PATCH:
                return Version(self.major, self.minor, self.patch + 1)
            case _:
                raise AssertionError(f"unexpected bump kind: {kind}")

    def to_semver_string(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        return f"{base}-{self.suffix}" if self.suffix else base

    def to_human_string(self) -> str:
        """Render for people; an all-zero version with a suffix shows as ``[suffix]``."""
        if self.major == 0 and self.minor == 0 and self.patch == 0 and self.suffix:
            return f"[{self.suffix}]"
        return self.to_semver_string()

    def __str__(self) -> str:
        return self.to_semver_string()


NEW_VERSION = Version(0, 0, 0, NEW_SUFFIX)


def parse_version(text: str) -> Version:
    """Parse a SemVer string into a Version.

    Args:
        text: Version string such as ``"1.2.3"`` or ``"2.0.0-rc.1+build.5"``

    Returns:
        The parsed Version, or ``NEW_VERSION`` if ``text`` is not valid SemVer
    """
    match = SEMVER_REGEX.match(text.strip())
    if match is None:
        return NEW_VERSION
    return Version(
        major=int(match.group(1)),
        minor=int(match.group(2)),
        patch=int(match.group(3)),
        suffix=match.group(4),
    )


def is_before(first: Version, second: Version) -> bool:
    """Return True if ``first`` sorts strictly before ``second``.

    Numbers compare numerically. On a tie, a version with a suffix comes
    before the same version without one; two suffixed (or two bare)
    versions compare equal.
    """
    first_key = (first.major, first.minor, first.patch)
    second_key = (second.major, second.minor, second.patch)
    if first_key != second_key:
        return first_key < second_key
    return bool(first.suffix) and not second.suffix
