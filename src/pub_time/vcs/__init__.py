"""Version control access."""

from __future__ import annotations

from pub_time.vcs.git import GitRepository

__all__ = ["GitRepository"]
