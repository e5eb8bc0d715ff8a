"""Loading configuration and project metadata from pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pub_time.config.models import PubTimeConfig
from pub_time.exceptions import ConfigNotFoundError, ConfigValidationError

logger = logging.getLogger(__name__)

TOOL_KEY = "pub-time"
HOMEPAGE_KEYS = ("Homepage", "homepage", "Repository", "repository", "Source", "source")


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Find pyproject.toml in ``start`` or one of its parents.

    Args:
        start: Directory to start from (defaults to the current directory)

    Returns:
        Path to pyproject.toml

    Raises:
        ConfigNotFoundError: If no pyproject.toml is found
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    raise ConfigNotFoundError(f"No pyproject.toml found in {current} or its parents")


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Read and parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"File not found: {path}")
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_pub_time_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.pub-time]`` table, or an empty dict."""
    return pyproject.get("tool", {}).get(TOOL_KEY, {})


def resolve_pyproject_path(path: Path | None = None) -> Path:
    """Turn a file, a directory or None into a pyproject.toml path.

    Directories and None are searched upward with ``find_pyproject_toml``.
    """
    if path is None:
        return find_pyproject_toml()
    if path.is_dir():
        return find_pyproject_toml(path)
    return path


def load_config(path: Path | None = None) -> PubTimeConfig:
    """Load pub-time configuration.

    Args:
        path: pyproject.toml or a directory to search from

    Returns:
        Validated configuration (defaults when the table is absent)

    Raises:
        ConfigNotFoundError: If pyproject.toml cannot be found
        ConfigValidationError: If the configuration is invalid
    """
    pyproject_path = resolve_pyproject_path(path)
    data = extract_pub_time_config(load_pyproject_toml(pyproject_path))
    try:
        config = PubTimeConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid [tool.{TOOL_KEY}] in {pyproject_path}:\n{e}") from e
    logger.debug("Loaded configuration from %s", pyproject_path)
    return config


def get_project_homepage(path: Path | None = None) -> str | None:
    """Return the homepage/repository URL from ``[project.urls]``, if any."""
    pyproject_path = resolve_pyproject_path(path)
    urls = load_pyproject_toml(pyproject_path).get("project", {}).get("urls", {})
    for key in HOMEPAGE_KEYS:
        if urls.get(key):
            return str(urls[key])
    return None
