# SPDX-License-Identifier: MIT
"""Tests for the semver bump and check commands."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from semver_cli.main import cli


class TestBumpCommand:
    """Tests for semver bump."""

    def test_bump_explicit_version(self, cli_runner: CliRunner) -> None:
        for part, expected in (
            ("major", "2.0.0"),
            ("minor", "1.5.0"),
            ("patch", "1.4.3"),
            ("release", "1.4.2"),
        ):
            result = cli_runner.invoke(cli, ["bump", part, "1.4.2-rc.1+build"])

            assert result.exit_code == 0, result.output
            assert result.output.strip() == expected

    def test_bump_prerelease_with_token(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["bump", "prerelease", "1.4.2", "--token", "alpha"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.4.3-alpha.0"

    def test_bump_prerelease_default_token(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        with cli_runner.isolated_filesystem(temp_dir=tmp_path):
            result = cli_runner.invoke(cli, ["bump", "prerelease", "1.4.3-rc.0"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.4.3-rc.1"

    def test_bump_project_version(self, cli_runner: CliRunner, temp_project: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(temp_project), "bump", "minor"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.5.0"

    def test_bump_uses_configured_token(self, cli_runner: CliRunner, temp_project: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(temp_project), "bump", "prerelease"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.4.3-beta.0"

    def test_bump_without_project(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "bump", "patch"])

        assert result.exit_code == 1
        assert "pyproject.toml not found" in result.output

    def test_bump_invalid_token(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["bump", "prerelease", "1.0.0", "-t", "r_c"])

        assert result.exit_code == 1
        assert "Invalid pre-release token" in result.output

    def test_bump_invalid_part(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["bump", "micro", "1.0.0"])

        assert result.exit_code == 2


class TestCheckCommand:
    """Tests for semver check."""

    def test_check_valid(self, cli_runner: CliRunner, temp_project: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(temp_project), "check"])

        assert result.exit_code == 0
        assert "Version 1.4.2 is valid" in result.output

    def test_check_constraint_violation(self, cli_runner: CliRunner, temp_project: Path) -> None:
        pyproject = temp_project / "pyproject.toml"
        pyproject.write_text(pyproject.read_text().replace('version = "1.4.2"', 'version = "2.1.0"'))

        result = cli_runner.invoke(cli, ["-C", str(temp_project), "check"])

        assert result.exit_code == 1
        assert "does not satisfy" in result.output

    def test_check_invalid_version(self, cli_runner: CliRunner, temp_project: Path) -> None:
        pyproject = temp_project / "pyproject.toml"
        pyproject.write_text(pyproject.read_text().replace('version = "1.4.2"', 'version = "1.4"'))

        result = cli_runner.invoke(cli, ["-C", str(temp_project), "check"])

        assert result.exit_code == 1
        assert "MAJOR.MINOR.PATCH" in result.output

    def test_check_prerelease_warning(self, cli_runner: CliRunner, bare_project: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(bare_project), "check"])

        assert result.exit_code == 0
        assert "Warning:" in result.output

    def test_check_strict(self, cli_runner: CliRunner, bare_project: Path) -> None:
        result = cli_runner.invoke(cli, ["-C", str(bare_project), "check", "--strict"])

        assert result.exit_code == 1

    def test_check_invalid_constraint(self, cli_runner: CliRunner, temp_project: Path) -> None:
        pyproject = temp_project / "pyproject.toml"
        pyproject.write_text(pyproject.read_text().replace(">=1.0.0 <2.0.0", "^1.0.0"))

        result = cli_runner.invoke(cli, ["-C", str(temp_project), "check"])

        assert result.exit_code == 1
        assert "[tool.semver].constraint" in result.output

    def test_check_missing_version(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n')

        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "check"])

        assert result.exit_code == 1
        assert "no [project].version" in result.output
