"""Configuration management for pub-time."""

from __future__ import annotations

from pub_time.config.loader import load_config
from pub_time.config.models import (
    ChangelogConfig,
    PubTimeConfig,
    VersionConfig,
)

__all__ = [
    "ChangelogConfig",
    "PubTimeConfig",
    "VersionConfig",
    "load_config",
]
