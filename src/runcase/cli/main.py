# src/runcase/cli/main.py

"""
Main CLI entry point for runcase using Click.
Loads one test case document, runs it and reports the verdict.
"""

import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import click

from runcase.cli.utils import logging_options, setup_logging_from_options
from runcase.config import CommandPolicy, load_expectation
from runcase.exceptions import ConfigurationError, ExecutionIOError
from runcase.telemetry import StructLogger, get_logger
from runcase.verification import Verifier

try:
    __version__ = version("runcase")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

log: StructLogger = get_logger("cli.main")

EXIT_SUCCESS = 0
EXIT_VERIFICATION_FAILED = 1
EXIT_ERROR = 2

POLICY_CHOICES = click.Choice([policy.value for policy in CommandPolicy], case_sensitive=False)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", package_name="runcase")
@click.argument(
    "file",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
)
@click.option(
    "--command-policy",
    type=POLICY_CHOICES,
    default=CommandPolicy.STRICT.value,
    show_default=True,
    envvar="RUNCASE_COMMAND_POLICY",
    show_envvar=True,
    help="How a command written as a single string with spaces is handled.",
)
@logging_options
@click.pass_context
def cli(
    ctx: click.Context,
    file: Path,
    command_policy: str,
    log_level: str | None,
    log_file: str | None,
    json_logs: bool | None,
):
    """
    Runcase: run a single command and check its outcome.

    FILE is a YAML (or .toml) document with the fields `command`,
    `exit-code` and `stdout`.
    """
    setup_logging_from_options(log_level, log_file, json_logs)
    policy = CommandPolicy(command_policy.lower())
    log.debug("Loading test case", file=str(file), policy=policy.value)

    try:
        expectation = load_expectation(file, policy=policy)
    except ConfigurationError as e:
        log.error("Failed to load or validate test case", error=str(e))
        click.echo(f"Error: Configuration problem in '{file}':\n{e}", err=True)
        ctx.exit(EXIT_ERROR)

    try:
        verdict = Verifier().verify(expectation, sys.stdout)
    except ExecutionIOError as e:
        log.error("Test case could not be run", error=str(e))
        click.echo(f"Error: Could not run the test case: {e}", err=True)
        ctx.exit(EXIT_ERROR)

    if verdict.success:
        click.echo("No errors.")
        ctx.exit(EXIT_SUCCESS)

    click.echo("Errors.")
    ctx.exit(EXIT_VERIFICATION_FAILED)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()

# 🖥️⚙️
