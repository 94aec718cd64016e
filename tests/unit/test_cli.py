#
# tests/unit/test_cli.py
#
"""
Tests for the runcase command-line interface.
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from runcase.cli.main import EXIT_ERROR, EXIT_SUCCESS, EXIT_VERIFICATION_FAILED, cli


def write_case(tmp_path: Path, content: str, name: str = "case.yaml") -> Path:
    case_file = tmp_path / name
    case_file.write_text(content)
    return case_file


class TestMainCLI:
    """Test main CLI entry point."""

    def test_cli_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "runcase" in result.output.lower()
        assert "--command-policy" in result.output

    def test_cli_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_file_argument_is_required(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, [])

        assert result.exit_code != 0
        assert "Missing argument" in result.output

    def test_nonexistent_file(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["/nonexistent/case.yaml"])

        assert result.exit_code != 0
        assert "does not exist" in result.output

    def test_invalid_log_level(self, tmp_path: Path) -> None:
        case_file = write_case(tmp_path, "command: [echo]\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--log-level", "INVALID", str(case_file)])

        assert result.exit_code != 0


@pytest.mark.usefixtures("require_sh")
class TestRunCase:
    """Running a case file end to end."""

    def test_passing_case(self, tmp_path: Path) -> None:
        case_file = write_case(tmp_path, 'command: [echo, foo]\nexit-code: 0\nstdout: "foo\\n"\n')
        runner = CliRunner()
        result = runner.invoke(cli, [str(case_file)])

        assert result.exit_code == EXIT_SUCCESS
        assert result.output.strip() == "No errors."

    def test_failing_case_prints_diagnostics(self, tmp_path: Path) -> None:
        case_file = write_case(tmp_path, "command: [sh, -c, 'echo foo bar baz']\nexit-code: 1\n")
        runner = CliRunner()
        result = runner.invoke(cli, [str(case_file)])

        assert result.exit_code == EXIT_VERIFICATION_FAILED
        assert "Wrong or unexpected exit code 0. Expected 1" in result.output
        assert 'stdout: "foo bar baz\\n"' in result.output
        assert result.output.rstrip().endswith("Errors.")

    def test_toml_case(self, tmp_path: Path) -> None:
        case_file = write_case(
            tmp_path, 'command = ["sh", "-c", "exit 1"]\nexit-code = 1\n', name="case.toml"
        )
        runner = CliRunner()
        result = runner.invoke(cli, [str(case_file)])

        assert result.exit_code == EXIT_SUCCESS

    def test_split_policy_option(self, tmp_path: Path) -> None:
        case_file = write_case(tmp_path, 'command: echo foo\nstdout: "foo\\n"\n')
        runner = CliRunner()
        result = runner.invoke(cli, ["--command-policy", "split", str(case_file)])

        assert result.exit_code == EXIT_SUCCESS

    def test_split_policy_from_env(self, tmp_path: Path) -> None:
        case_file = write_case(tmp_path, 'command: echo foo\nstdout: "foo\\n"\n')
        runner = CliRunner()
        result = runner.invoke(cli, [str(case_file)], env={"RUNCASE_COMMAND_POLICY": "split"})

        assert result.exit_code == EXIT_SUCCESS

    def test_json_logs_option(self, tmp_path: Path) -> None:
        case_file = write_case(tmp_path, "command: [sh, -c, 'exit 0']\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--json-logs", str(case_file)])

        assert result.exit_code == EXIT_SUCCESS


class TestConfigurationErrors:
    """Problems with the case document exit with the error status."""

    def test_ambiguous_string_command(self, tmp_path: Path) -> None:
        case_file = write_case(tmp_path, "command: foo bar baz\n")
        runner = CliRunner()
        result = runner.invoke(cli, [str(case_file)])

        assert result.exit_code == EXIT_ERROR
        assert "Configuration problem" in result.output
        assert "Please define a list instead of a string" in result.output

    def test_empty_command(self, tmp_path: Path) -> None:
        case_file = write_case(tmp_path, 'command: ""\n')
        runner = CliRunner()
        result = runner.invoke(cli, [str(case_file)])

        assert result.exit_code == EXIT_ERROR
        assert "Command needs at least one element" in result.output

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        case_file = write_case(tmp_path, "command: [echo, foo\n")
        runner = CliRunner()
        result = runner.invoke(cli, [str(case_file)])

        assert result.exit_code == EXIT_ERROR
        assert "Invalid YAML" in result.output

    def test_missing_program(self, tmp_path: Path) -> None:
        case_file = write_case(tmp_path, "command: [runcase-no-such-program-xyz]\n")
        runner = CliRunner()
        result = runner.invoke(cli, [str(case_file)])

        assert result.exit_code == EXIT_ERROR
        assert "Could not run the test case" in result.output

    def test_nul_in_program_is_an_error_not_a_failure(self, tmp_path: Path) -> None:
        case_file = write_case(tmp_path, 'command: ["ec\\0ho"]\n')
        runner = CliRunner()
        result = runner.invoke(cli, [str(case_file)])

        assert result.exit_code == EXIT_ERROR
        assert "Could not run the test case" in result.output
