# SPDX-License-Identifier: MIT
"""Tests for CLI configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from semver_cli.config import (
    DEFAULT_PRERELEASE_TOKEN,
    ConfigError,
    SemverConfig,
    find_project_root,
    load_config,
)


class TestSemverConfig:
    """Tests for SemverConfig loading."""

    def test_from_pyproject(self, temp_project: Path) -> None:
        config = SemverConfig.from_pyproject(temp_project)

        assert config.project_dir == temp_project
        assert config.version == "1.4.2"
        assert config.prerelease_token == "beta"
        assert config.constraint == ">=1.0.0 <2.0.0"

    def test_defaults(self, bare_project: Path) -> None:
        config = SemverConfig.from_pyproject(bare_project)

        assert config.version == "0.3.0-rc.2"
        assert config.prerelease_token == DEFAULT_PRERELEASE_TOKEN
        assert config.constraint == ""

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            SemverConfig.from_pyproject(tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[project\nname = ")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            SemverConfig.from_pyproject(tmp_path)

    def test_wrong_type(self, tmp_path: Path) -> None:
        config = {"project": {"version": "1.0.0"}, "tool": {"semver": {"constraint": 5}}}

        with pytest.raises(ConfigError, match="tool.semver.constraint"):
            SemverConfig.from_pyproject_dict(config, tmp_path)


class TestFindProjectRoot:
    """Tests for project root discovery."""

    def test_finds_parent(self, temp_project: Path) -> None:
        nested = temp_project / "src" / "pkg"
        nested.mkdir(parents=True)

        assert find_project_root(nested) == temp_project.resolve()

    def test_load_config_explicit_dir(self, temp_project: Path) -> None:
        assert load_config(temp_project).version == "1.4.2"
