"""Shared pytest fixtures for pub-time tests."""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from pathlib import Path

import pytest

from pub_time.core.commits import CommitRecord, classify_commit

RS = "\x1e"
US = "\x1f"


def fake_hash(seed: str) -> str:
    """Deterministic 40-character hex hash."""
    return hashlib.sha1(seed.encode()).hexdigest()


def log_entry(commit_hash: str, body: str, refs: str = "") -> str:
    """One commit as printed by ``git log --format=format:LOG_FORMAT``."""
    if not body.endswith("\n"):
        body += "\n"
    return f"{RS}{commit_hash}{US}{refs}{US}{body}"


def make_record(message: str, footer: str = "", seed: str | None = None, versions=()) -> CommitRecord:
    return CommitRecord(
        hash=fake_hash(seed or message),
        message=message,
        footer=footer,
        versions=tuple(versions),
        semver_impact=classify_commit(message, footer),
    )


@pytest.fixture
def record() -> Callable[..., CommitRecord]:
    """Factory for classified CommitRecords."""
    return make_record


@pytest.fixture
def make_history() -> Callable[..., str]:
    """Build git log text from ``(body, refs)`` pairs or bare bodies, newest first."""

    def _make(*entries: str | tuple[str, str]) -> str:
        lines = []
        for index, entry in enumerate(entries):
            body, refs = (entry, "") if isinstance(entry, str) else entry
            lines.append(log_entry(fake_hash(f"{index}:{body}"), body, refs))
        return "\n".join(lines)

    return _make


@pytest.fixture
def sample_history(make_history: Callable[..., str]) -> str:
    """Two pending commits on top of v1.2.3."""
    return make_history(
        ("feat(cli): add --link option", "HEAD -> main, origin/main"),
        "fix: handle empty history\n\nCloses #12",
        ("chore: release 1.2.3", "tag: v1.2.3"),
        "feat: initial commit",
    )


@pytest.fixture
def feat_commit() -> CommitRecord:
    return make_record("feat: add user authentication", seed="feat123")


@pytest.fixture
def fix_commit() -> CommitRecord:
    return make_record("fix(core): resolve memory leak", seed="fix456")


@pytest.fixture
def breaking_commit() -> CommitRecord:
    return make_record(
        "refactor: new config format",
        footer="BREAKING CHANGE: config.yaml is no longer read",
        seed="break789",
    )


@pytest.fixture
def unknown_commit() -> CommitRecord:
    return make_record("Update the readme", seed="readme")


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    """A project directory with a pyproject.toml."""
    (tmp_path / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
version = "1.2.3"  # managed by pub-time
description = "A test project"

[project.urls]
Homepage = "https://github.com/owner/test-project"

[tool.pub-time]
allow_dirty = false
"""
    )
    return tmp_path
