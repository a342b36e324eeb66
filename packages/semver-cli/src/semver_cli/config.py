# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


DEFAULT_PRERELEASE_TOKEN = "rc"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class SemverConfig:
    """CLI configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml
        version: Project version from [project].version
        prerelease_token: Token used by `semver bump prerelease`
        constraint: Constraint the project version must satisfy
    """

    project_dir: Path
    version: str = ""
    prerelease_token: str = DEFAULT_PRERELEASE_TOKEN
    constraint: str = ""

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "SemverConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            SemverConfig instance

        Raises:
            ConfigError: If the file is invalid
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "SemverConfig":
        """Create SemverConfig from a parsed pyproject.toml dictionary.

        Args:
            pyproject: Parsed pyproject.toml as a dictionary
            project_dir: Directory containing pyproject.toml

        Returns:
            SemverConfig instance

        Raises:
            ConfigError: If a setting has the wrong type
        """
        project = pyproject.get("project", {})
        tool_semver = pyproject.get("tool", {}).get("semver", {})

        version = project.get("version", "")
        prerelease_token = tool_semver.get("prerelease-token", DEFAULT_PRERELEASE_TOKEN)
        constraint = tool_semver.get("constraint", "")

        for key, value in (
            ("project.version", version),
            ("tool.semver.prerelease-token", prerelease_token),
            ("tool.semver.constraint", constraint),
        ):
            if not isinstance(value, str):
                raise ConfigError(f"{key} must be a string, got {type(value).__name__}")

        return cls(
            project_dir=project_dir,
            version=version,
            prerelease_token=prerelease_token,
            constraint=constraint,
        )


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(project_dir: Optional[str | Path] = None) -> SemverConfig:
    """Load CLI configuration from the project directory.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Returns:
        SemverConfig instance

    Raises:
        ConfigError: If configuration cannot be loaded
        FileNotFoundError: If pyproject.toml doesn't exist
    """
    if project_dir is None:
        project_dir = find_project_root()

    return SemverConfig.from_pyproject(project_dir)
