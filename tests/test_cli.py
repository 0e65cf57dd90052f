"""
Tests for CLI commands — install, check, and global options.
"""

import json
import textwrap
from pathlib import Path
from unittest.mock import patch

import pytest

from click.testing import CliRunner

from dynamic_installer.main import cli


def _write_config(tmp_path: Path, body: str) -> Path:
    config = tmp_path / "dependencies.yml"
    config.write_text(textwrap.dedent(body))
    return config


@pytest.fixture
def good_config(tmp_path: Path) -> Path:
    return _write_config(tmp_path, """\
        global_options: "--save-exact"
        verbose: false
        dependencies:
          - name: lodash
          - name: typescript
            options: ["--save-dev"]
    """)


@pytest.fixture
def mixed_config(tmp_path: Path) -> Path:
    return _write_config(tmp_path, """\
        verbose: false
        dependencies:
          - name: "lodash; rm -rf /"
          - name: axios
            options: ["--Save"]
          - name: express
    """)


class TestCLIGlobal:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Dynamic Installer" in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_missing_config(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = CliRunner().invoke(cli, ["--config", str(tmp_path / "nope.yml"), "check"])
        assert result.exit_code == 1


class TestCheckCommand:
    def test_all_valid(self, good_config: Path):
        result = CliRunner().invoke(cli, ["--config", str(good_config), "check"])
        assert result.exit_code == 0
        assert "npm install lodash --save-exact" in result.output
        assert "npm install typescript --save-exact --save-dev" in result.output

    def test_rejections_exit_nonzero(self, mixed_config: Path):
        result = CliRunner().invoke(cli, ["--config", str(mixed_config), "check"])
        assert result.exit_code == 1
        assert "Invalid dependency name: lodash; rm -rf /" in result.output
        assert "Invalid options for dependency: axios" in result.output
        assert "npm install express" in result.output

    def test_json(self, mixed_config: Path):
        result = CliRunner().invoke(cli, ["--config", str(mixed_config), "check", "--json"])
        data = json.loads(result.output)
        assert [p["name"] for p in data] == ["lodash; rm -rf /", "axios", "express"]
        assert data[2]["command"] == "npm install express"
        assert data[0]["command"] is None

    def test_install_command_option(self, good_config: Path):
        result = CliRunner().invoke(
            cli, ["--config", str(good_config), "check", "--install-command", "pnpm add"]
        )
        assert "pnpm add lodash --save-exact" in result.output


class TestInstallCommand:
    def test_dry_run_succeeds(self, good_config: Path):
        result = CliRunner().invoke(cli, ["--config", str(good_config), "install", "--dry-run"])
        assert result.exit_code == 0
        assert "✅ lodash" in result.output
        assert "2/2 installed" in result.output

    def test_dry_run_json(self, good_config: Path):
        result = CliRunner().invoke(
            cli, ["--config", str(good_config), "install", "--dry-run", "--json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["success"] is True
        assert data["details"][0]["message"] == "[dry-run] not executed"
        commands = [line for line in data["logs_array"] if "]: command: " in line]
        assert commands[1].endswith("command: npm install typescript --save-exact --save-dev")

    def test_partial_failure_exit_code(self, mixed_config: Path):
        result = CliRunner().invoke(cli, ["--config", str(mixed_config), "install", "--dry-run"])
        assert result.exit_code == 1
        assert "❌ lodash; rm -rf /" in result.output
        assert "❌ axios — Invalid options for dependency: axios" in result.output
        assert "✅ express" in result.output
        assert "1/3 installed" in result.output

    def test_real_shell_with_echo(self, good_config: Path):
        result = CliRunner().invoke(
            cli,
            ["--config", str(good_config), "install", "--install-command", "echo", "--json"],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["details"][0]["message"] == "lodash --save-exact\n"

    def test_verbose_config_prints_trace_without_flags(self, tmp_path: Path):
        config = _write_config(tmp_path, """\
            dependencies:
              - name: lodash
        """)
        result = CliRunner().invoke(cli, ["--config", str(config), "install", "--dry-run"])
        assert result.exit_code == 0
        assert "[dynamic-installer]: command: npm install lodash" in result.output
        assert "✅ lodash" in result.output

    def test_quiet_flag_silences_trace(self, tmp_path: Path):
        config = _write_config(tmp_path, """\
            dependencies:
              - name: lodash
        """)
        result = CliRunner().invoke(cli, ["--quiet", "--config", str(config), "install", "--dry-run"])
        assert result.exit_code == 0
        assert "[dynamic-installer]" not in result.output

    def test_malformed_entry_does_not_abort(self, tmp_path: Path):
        config = _write_config(tmp_path, """\
            verbose: false
            dependencies:
              - name: 5
              - name: lodash
        """)
        result = CliRunner().invoke(cli, ["--config", str(config), "install", "--dry-run"])
        assert result.exit_code == 1
        assert "❌ 5 — Invalid dependency name: 5" in result.output
        assert "✅ lodash" in result.output

    def test_no_shell_available(self, good_config: Path):
        with patch(
            "dynamic_installer.adapters.shell.command.shutil.which", return_value=None
        ):
            result = CliRunner().invoke(cli, ["--config", str(good_config), "install"])
        assert result.exit_code == 1
        assert "No shell found" in result.output


class TestCheckAdapterAvailability:
    def test_check_warns_when_shell_missing(self, good_config: Path):
        with patch(
            "dynamic_installer.adapters.shell.command.shutil.which", return_value=None
        ):
            result = CliRunner().invoke(cli, ["--config", str(good_config), "check"])
        assert result.exit_code == 0
        assert "shell adapter unavailable" in result.output
