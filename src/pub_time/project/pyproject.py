"""pyproject.toml version manipulation.

Reading goes through tomllib; writing uses a targeted regex replacement
inside the ``[project]`` table so formatting and comments survive.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from pub_time.config.loader import load_pyproject_toml, resolve_pyproject_path
from pub_time.exceptions import ProjectError, VersionNotFoundError

if TYPE_CHECKING:
    from pathlib import Path

# The [project] table up to the next table header or end of file
_PROJECT_TABLE_RE = re.compile(r"^\[project\][^\n]*$.*?(?=^\[|\Z)", re.MULTILINE | re.DOTALL)
_VERSION_LINE_RE = re.compile(r'^(version\s*=\s*)["\'][^"\']*["\']', re.MULTILINE)


def get_pyproject_version(path: Path | None = None) -> str:
    """Get ``[project].version`` from pyproject.toml.

    Args:
        path: pyproject.toml or a directory to search from

    Raises:
        VersionNotFoundError: If the version is missing
    """
    pyproject_path = resolve_pyproject_path(path)
    version = load_pyproject_toml(pyproject_path).get("project", {}).get("version")
    if not version:
        raise VersionNotFoundError(f"Could not find [project].version in {pyproject_path}")
    return str(version)


def update_pyproject_version(path: Path | None, new_version: str) -> Path:
    """Set ``[project].version`` in pyproject.toml.

    Args:
        path: pyproject.toml or a directory to search from
        new_version: Version string to write

    Returns:
        Path to the updated file

    Raises:
        VersionNotFoundError: If there is no version line in ``[project]``
        ProjectError: If the file already holds ``new_version``
    """
    pyproject_path = resolve_pyproject_path(path)
    content = pyproject_path.read_text(encoding="utf-8")

    table = _PROJECT_TABLE_RE.search(content)
    if table is None or not _VERSION_LINE_RE.search(table.group(0)):
        raise VersionNotFoundError(f"Could not find a version to update in {pyproject_path}")

    new_table = _VERSION_LINE_RE.sub(rf'\g<1>"{new_version}"', table.group(0), count=1)
    if new_table == table.group(0):
        raise ProjectError(f"Version in {pyproject_path} is already {new_version}")

    updated = content[: table.start()] + new_table + content[table.end() :]
    pyproject_path.write_text(updated, encoding="utf-8")
    return pyproject_path
