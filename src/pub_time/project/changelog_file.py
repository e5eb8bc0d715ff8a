"""Writing release notes into the project changelog file."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from pub_time.exceptions import ProjectError

if TYPE_CHECKING:
    from pathlib import Path

    from pub_time.core.version import Version


def format_release_entry(version: Version, notes: str, today: date) -> str:
    """Wrap release notes in a dated ``## [version]`` entry.

    Headings in ``notes`` are demoted two levels so sections sit under the
    ``## [version]`` heading as ``###``.
    """
    body = "\n".join(f"##{line}" if line.startswith("#") else line for line in notes.splitlines())
    return f"## [{version}] - {today.isoformat()}\n\n{body}\n"


def prepend_release_notes(
    path: Path,
    version: Version,
    notes: str,
    *,
    today: date | None = None,
) -> Path:
    """Insert a release entry at the top of the changelog file.

    The file is created if it does not exist.

    Raises:
        ProjectError: If the file cannot be read or written
    """
    entry = format_release_entry(version, notes, today or datetime.now(UTC).date())
    try:
        existing = path.read_text(encoding="utf-8") if path.exists() else ""
        content = f"{entry}\n{existing}" if existing else entry
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ProjectError(f"Failed to update {path}: {e}") from e
    return path
