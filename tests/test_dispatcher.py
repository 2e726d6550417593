"""
Tests for the command dispatcher and the top-level CLI.
"""

import logging
import os

import pytest

from soos_sast_docker.cli import main
from soos_sast_docker.config import REPORT_CLI_ENTRYPOINT, ScanConfiguration
from soos_sast_docker.core.enums import SarifGenerator
from soos_sast_docker.core.errors import CommandError, ScannerNotImplementedError
from soos_sast_docker.dispatcher import resolve_source_code_path, run
from soos_sast_docker.scanners.gitleaks import GITLEAKS_BIN
from soos_sast_docker.scanners.semgrep import SEMGREP_BIN

from conftest import REQUIRED_ARGS


def option_value(tokens, flag):
    return tokens[tokens.index(flag) + 1]


def make_config(tmp_path, generator, **kwargs) -> ScanConfiguration:
    return ScanConfiguration(
        api_key="key-secret",
        client_id="client-123",
        project_name="my-app",
        working_directory=str(tmp_path),
        sarif_generator=generator,
        **kwargs,
    )


class TestRun:
    """Tests for the scanner and report steps."""

    def test_semgrep_then_report(self, tmp_path, fake_run):
        """Test that the scanner runs before the report and feeds it."""
        runner = fake_run([0, 0])

        result = run(make_config(tmp_path, SarifGenerator.SEMGREP))

        assert len(runner.calls) == 2
        scanner_call, report_call = runner.calls
        assert scanner_call[0] == SEMGREP_BIN
        assert f"--sarif-output={tmp_path / 'soos' / 'soosio.sast.sarif.json'}" in scanner_call
        assert report_call[:2] == ["node", REPORT_CLI_ENTRYPOINT]
        assert option_value(report_call, "--sourceCodePath") == str(tmp_path / "soos")
        assert option_value(report_call, "--outputDirectory") == str(tmp_path / "soos")
        assert result.scanner_command.tokens[0] == SEMGREP_BIN

    def test_output_directory_is_created(self, tmp_path, fake_run):
        fake_run()

        run(make_config(tmp_path, SarifGenerator.OPENGREP, output_directory=str(tmp_path / "out" / "sarif")))

        assert (tmp_path / "out" / "sarif").is_dir()

    def test_gitleaks_findings_do_not_abort(self, tmp_path, fake_run):
        """Test that Gitleaks exiting 1 still reaches the report step."""
        runner = fake_run([1, 0])

        run(make_config(tmp_path, SarifGenerator.GITLEAKS))

        assert len(runner.calls) == 2
        assert runner.calls[0][0] == GITLEAKS_BIN
        assert runner.calls[1][0] == "node"

    def test_file_spawns_no_scanner(self, tmp_path, fake_run):
        """Test that existing SARIF files are reported from the working directory."""
        runner = fake_run([0])

        result = run(make_config(tmp_path, SarifGenerator.FILE))

        assert len(runner.calls) == 1
        assert runner.calls[0][0] == "node"
        assert option_value(runner.calls[0], "--sourceCodePath") == str(tmp_path)
        assert result.scanner_command is None
        assert result.source_code_path == str(tmp_path)

    def test_file_with_source_code_path(self, tmp_path):
        config = make_config(tmp_path, SarifGenerator.FILE, source_code_path="/reports")

        assert resolve_source_code_path(config) == "/reports"

    def test_scanner_failure_stops_run(self, tmp_path, fake_run):
        """Test that the report step never starts after a scanner failure."""
        runner = fake_run([2])

        with pytest.raises(CommandError, match="semgrep failed with exit code 2"):
            run(make_config(tmp_path, SarifGenerator.SEMGREP))

        assert len(runner.calls) == 1

    def test_unknown_generator(self, tmp_path, fake_run):
        runner = fake_run()

        with pytest.raises(ScannerNotImplementedError, match="Unknown"):
            run(make_config(tmp_path, SarifGenerator.UNKNOWN))

        assert runner.calls == []

    def test_exclusions_are_forwarded(self, tmp_path, fake_run):
        runner = fake_run()

        run(make_config(tmp_path, SarifGenerator.FILE, directories_to_exclude=["vendor", "dist"]))

        assert option_value(runner.calls[0], "--directoriesToExclude") == "vendor,dist"
        assert "--filesToExclude" not in runner.calls[0]


class TestMain:
    """Tests for exit codes and error reporting."""

    def test_success(self, fake_run):
        fake_run([0, 0])

        assert main(REQUIRED_ARGS) == 0

    def test_report_failure_exits_1(self, fake_run, caplog):
        """Test that a failing report CLI is logged and exits 1."""
        runner = fake_run([2])

        exit_code = main(REQUIRED_ARGS + ["--sarifGenerator", "File"])

        assert exit_code == 1
        assert len(runner.calls) == 1
        assert "node failed with exit code 2" in caplog.text

    def test_argument_error_exits_1(self, fake_run, caplog):
        """Test that usage errors exit 1 without spawning anything."""
        runner = fake_run()

        assert main(["--projectName", "my-app"]) == 1
        assert runner.calls == []
        assert "required" in caplog.text

    def test_config_file_without_value_exits_1(self, fake_run, caplog):
        """Test that a dangling --configFile is a usage error, not an argparse exit."""
        runner = fake_run()

        assert main(REQUIRED_ARGS + ["--configFile"]) == 1
        assert runner.calls == []
        assert "--configFile" in caplog.text

    def test_missing_binary_exits_1(self, fake_run, caplog):
        fake_run(error=PermissionError(13, "Permission denied"))

        assert main(REQUIRED_ARGS) == 1
        assert "semgrep failed to start" in caplog.text

    def test_debug_log_masks_api_key(self, fake_run, caplog):
        """Test that debug output never contains the API key."""
        fake_run()
        caplog.set_level(logging.DEBUG)

        assert main(REQUIRED_ARGS + ["--logLevel", "DEBUG", "--sarifGenerator", "File"]) == 0

        assert "Running command: node" in caplog.text
        assert "key-secret" not in caplog.text

    def test_help_exits_0(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--help"])

        assert excinfo.value.code == 0
        assert "--sarifGenerator" in capsys.readouterr().out

    def test_debug_env_reraises(self, fake_run, monkeypatch):
        fake_run([5])
        monkeypatch.setenv("DEBUG", "1")

        with pytest.raises(CommandError):
            main(REQUIRED_ARGS + ["--sarifGenerator", "File"])

    def test_log_level_is_applied(self, fake_run):
        fake_run()

        main(REQUIRED_ARGS + ["--logLevel", "WARN", "--sarifGenerator", "File"])

        assert logging.getLogger("soos_sast_docker").level == logging.WARNING
