# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory with pyproject.toml."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "test-project"
version = "1.4.2"
description = "Test project"

[tool.semver]
prerelease-token = "beta"
constraint = ">=1.0.0 <2.0.0"
"""
    )

    yield project_dir


@pytest.fixture
def bare_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a project whose pyproject.toml has no [tool.semver] table."""
    project_dir = tmp_path / "bare_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[project]
name = "bare-project"
version = "0.3.0-rc.2"
"""
    )

    yield project_dir
