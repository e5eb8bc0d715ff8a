"""Tests for configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from pub_time.config.loader import (
    extract_pub_time_config,
    find_pyproject_toml,
    get_project_homepage,
    load_config,
    load_pyproject_toml,
    resolve_pyproject_path,
)
from pub_time.config.models import ChangelogConfig, PubTimeConfig, VersionConfig
from pub_time.exceptions import ConfigNotFoundError, ConfigValidationError


class TestPubTimeConfig:
    """Tests for PubTimeConfig model."""

    def test_default_config(self):
        """Default configuration has sensible values."""
        config = PubTimeConfig()

        assert config.prev_hash is None
        assert config.allow_dirty is False
        assert config.homepage is None
        assert config.tag_prefix == "v"

    def test_nested_defaults(self):
        config = PubTimeConfig()

        assert config.version.source == "tag"
        assert config.changelog.enabled is True
        assert config.changelog.path == Path("CHANGELOG.md")

    def test_tag_prefix_follows_version_config(self):
        config = PubTimeConfig(version=VersionConfig(tag_prefix="release-"))
        assert config.tag_prefix == "release-"

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            PubTimeConfig.model_validate({"prev_hsah": "abc"})

    def test_invalid_source_rejected(self):
        with pytest.raises(ValidationError):
            VersionConfig(source="registry")  # type: ignore[arg-type]


class TestChangelogConfig:
    """Tests for ChangelogConfig model."""

    def test_path_coerced(self):
        config = ChangelogConfig.model_validate({"path": "docs/CHANGES.md"})
        assert config.path == Path("docs/CHANGES.md")


class TestLoadPyprojectToml:
    """Tests for load_pyproject_toml()."""

    def test_load_valid_toml(self, temp_project: Path):
        data = load_pyproject_toml(temp_project / "pyproject.toml")

        assert data["project"]["name"] == "test-project"

    def test_load_nonexistent_raises(self, tmp_path: Path):
        with pytest.raises(ConfigNotFoundError):
            load_pyproject_toml(tmp_path / "nonexistent.toml")

    def test_invalid_toml_raises(self, tmp_path: Path):
        path = tmp_path / "pyproject.toml"
        path.write_text("[project\nname = ")

        with pytest.raises(ConfigValidationError, match="Invalid TOML"):
            load_pyproject_toml(path)


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml()."""

    def test_find_in_current_dir(self, temp_project: Path):
        assert find_pyproject_toml(temp_project).name == "pyproject.toml"

    def test_find_in_parent_dir(self, temp_project: Path):
        subdir = temp_project / "src" / "package"
        subdir.mkdir(parents=True)

        assert find_pyproject_toml(subdir) == (temp_project / "pyproject.toml").resolve()

    def test_not_found_raises(self, tmp_path: Path):
        with pytest.raises(ConfigNotFoundError):
            find_pyproject_toml(tmp_path)


class TestResolvePyprojectPath:
    """Tests for resolve_pyproject_path()."""

    def test_file_path_returned_as_is(self, temp_project: Path):
        path = temp_project / "pyproject.toml"
        assert resolve_pyproject_path(path) == path

    def test_directory_searched(self, temp_project: Path):
        nested = temp_project / "src" / "pkg"
        nested.mkdir(parents=True)

        assert resolve_pyproject_path(nested) == (temp_project / "pyproject.toml").resolve()

    def test_none_searches_cwd(self, temp_project: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(temp_project)

        assert resolve_pyproject_path() == (temp_project / "pyproject.toml").resolve()


class TestExtractPubTimeConfig:
    """Tests for extract_pub_time_config()."""

    def test_extract_existing_config(self):
        pyproject = {"tool": {"pub-time": {"prev_hash": "abc123"}}}
        assert extract_pub_time_config(pyproject) == {"prev_hash": "abc123"}

    def test_extract_missing_config(self):
        assert extract_pub_time_config({"project": {"name": "test"}}) == {}


class TestLoadConfig:
    """Tests for load_config()."""

    def test_load_with_config(self, temp_project: Path):
        config = load_config(temp_project)

        assert isinstance(config, PubTimeConfig)
        assert config.allow_dirty is False

    def test_load_nested_tables(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text(
            """\
[project]
name = "test"
version = "1.0.0"

[tool.pub-time]
prev_hash = "all"
homepage = "https://github.com/o/r"

[tool.pub-time.version]
source = "pyproject"
tag_prefix = "release-"

[tool.pub-time.changelog]
enabled = false
"""
        )
        config = load_config(tmp_path)

        assert config.prev_hash == "all"
        assert config.homepage == "https://github.com/o/r"
        assert config.version.source == "pyproject"
        assert config.tag_prefix == "release-"
        assert config.changelog.enabled is False

    def test_load_defaults_when_no_config(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "test"\nversion = "1.0.0"\n')

        assert load_config(tmp_path) == PubTimeConfig()

    def test_load_from_file_path(self, temp_project: Path):
        config = load_config(temp_project / "pyproject.toml")
        assert isinstance(config, PubTimeConfig)

    def test_invalid_config_raises(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text('[tool.pub-time]\nallow_dirty = "sometimes"\n')

        with pytest.raises(ConfigValidationError, match=r"\[tool.pub-time\]"):
            load_config(tmp_path)


class TestGetProjectInfo:
    """Tests for get_project_homepage()."""

    def test_get_project_homepage(self, temp_project: Path):
        assert get_project_homepage(temp_project) == "https://github.com/owner/test-project"

    def test_repository_url_fallback(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "t"\n\n[project.urls]\nRepository = "https://github.com/o/t"\n'
        )
        assert get_project_homepage(tmp_path) == "https://github.com/o/t"

    def test_no_urls(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "t"\n')
        assert get_project_homepage(tmp_path) is None
