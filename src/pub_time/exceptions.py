"""Exception hierarchy for pub-time.

Every error raised on purpose by pub-time derives from PubTimeError,
so callers (and the CLI) can catch a single base class.
"""

from __future__ import annotations


class PubTimeError(Exception):
    """Base class for all pub-time errors."""


# =============================================================================
# Release computation
# =============================================================================


class MalformedHistoryError(PubTimeError):
    """Raised when commit history text cannot be split into commit records."""


class AmbiguousReleaseWindowError(PubTimeError):
    """Raised when the pending window is empty and nothing anchors it.

    This happens when there is no history at all: no boundary hash matched
    and no commit carries a version tag, so "nothing to release" and
    "nothing was ever released" cannot be told apart.
    """


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(PubTimeError):
    """Base class for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when pyproject.toml cannot be found or read."""


class ConfigValidationError(ConfigError):
    """Raised when configuration is present but invalid."""


# =============================================================================
# Git / project files
# =============================================================================


class GitError(PubTimeError):
    """Raised when a git command fails."""

    def __init__(self, message: str, stderr: str | None = None) -> None:
        super().__init__(message)
        self.stderr = stderr

    def __str__(self) -> str:
        base = super().__str__()
        if self.stderr:
            return f"{base}: {self.stderr.strip()}"
        return base


class ProjectError(PubTimeError):
    """Raised when project files cannot be read or updated."""


class VersionNotFoundError(ProjectError):
    """Raised when no version can be located in a project file."""
