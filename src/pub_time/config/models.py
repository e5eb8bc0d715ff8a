"""Configuration models for pub-time.

Configuration lives in the ``[tool.pub-time]`` table of pyproject.toml.
All fields have defaults, so an absent table is a valid configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class VersionConfig(BaseModel):
    """Where versions come from and how they are tagged."""

    model_config = ConfigDict(extra="forbid")

    source: Literal["tag", "pyproject"] = Field(
        default="tag",
        description="Source of the previously published version",
    )
    tag_prefix: str = Field(default="v", description="Prefix of release tags")


class ChangelogConfig(BaseModel):
    """Changelog file settings."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    path: Path = Path("CHANGELOG.md")


class PubTimeConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(extra="forbid")

    prev_hash: str | None = Field(
        default=None,
        description="Hash of the last released commit; 'all' includes every commit",
    )
    allow_dirty: bool = False
    homepage: str | None = None
    version: VersionConfig = Field(default_factory=VersionConfig)
    changelog: ChangelogConfig = Field(default_factory=ChangelogConfig)

    @property
    def tag_prefix(self) -> str:
        return self.version.tag_prefix
