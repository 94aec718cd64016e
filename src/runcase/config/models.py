#
# src/runcase/config/models.py
#
"""
Attrs-based model describing a single test case and the rules that build it.
"""

from collections.abc import Sequence
from enum import Enum
from typing import Any

from attrs import converters, define, field

from runcase.exceptions import (
    AmbiguousStringCommandError,
    ConfigurationError,
    EmptyCommandError,
)
from runcase.telemetry import get_logger

log = get_logger("config.models")


class CommandPolicy(Enum):
    """How a command given as a single string is turned into program and arguments."""

    STRICT = "strict"  # Reject strings with interior spaces.
    SPLIT = "split"  # Split on single spaces.


# --- Validators ---
def _validate_program(inst: Any, attr: Any, value: str) -> None:
    """Validator ensures the program is a non-empty string."""
    if not isinstance(value, str):
        raise ConfigurationError(f"Field '{attr.name}' must be a string, got {type(value).__name__}")
    if not value:
        raise EmptyCommandError()


def _validate_arguments(inst: Any, attr: Any, value: tuple[str, ...]) -> None:
    """Validator ensures every argument is a string."""
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise ConfigurationError(
                f"Command argument {index + 1} must be a string, got {type(item).__name__}"
            )


def _validate_exit_code(inst: Any, attr: Any, value: int) -> None:
    """Validator ensures the exit code is an integer (bools are rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"Field 'exit-code' must be an integer, got {value!r}")


def _validate_stdout(inst: Any, attr: Any, value: str | None) -> None:
    """Validator ensures expected stdout, when given, is a string."""
    if value is not None and not isinstance(value, str):
        raise ConfigurationError(f"Field 'stdout' must be a string, got {type(value).__name__}")


@define(frozen=True, slots=True)
class Expectation:
    """
    What success means for one test case.

    Immutable once built. `expected_stdout` of None means stdout is not checked.
    """

    program: str = field(validator=_validate_program)
    arguments: tuple[str, ...] = field(
        factory=tuple, converter=tuple, validator=_validate_arguments
    )
    expected_exit_code: int = field(
        default=0,
        converter=converters.default_if_none(0),
        validator=_validate_exit_code,
    )
    expected_stdout: str | None = field(default=None, validator=_validate_stdout)

    @property
    def argv(self) -> list[str]:
        """The full command line, program first."""
        return [self.program, *self.arguments]


def _split_string_command(command: str, policy: CommandPolicy) -> list[str]:
    if not command.strip():
        raise EmptyCommandError()

    trimmed = command.strip()
    if " " not in trimmed:
        return [command]

    if policy is CommandPolicy.STRICT:
        raise AmbiguousStringCommandError(command)

    tokens = [token for token in trimmed.split(" ") if token]
    log.debug("Split string command on spaces", command=command, tokens=tokens)
    return tokens


def build_expectation(
    command: Any,
    exit_code: int | None = None,
    stdout: str | None = None,
    policy: CommandPolicy = CommandPolicy.STRICT,
) -> Expectation:
    """
    Validates a raw command description and builds an Expectation.

    Args:
        command: Either a sequence of strings (program first) or a single string.
        exit_code: Expected exit code; None means 0.
        stdout: Expected standard output; None means stdout is not checked.
        policy: How a single string with spaces is handled.

    Returns:
        A validated, immutable Expectation.

    Raises:
        EmptyCommandError: The command is empty.
        AmbiguousStringCommandError: A string command has spaces under the strict policy.
        ConfigurationError: Any other malformed field.
    """
    if isinstance(command, str):
        tokens = _split_string_command(command, policy)
    elif isinstance(command, Sequence) and not isinstance(command, bytes | bytearray):
        tokens = list(command)
        if not tokens:
            raise EmptyCommandError()
    else:
        raise ConfigurationError(
            f"Field 'command' must be a list of strings or a string, got {type(command).__name__}"
        )

    program, *arguments = tokens
    return Expectation(
        program=program,
        arguments=arguments,
        expected_exit_code=exit_code,
        expected_stdout=stdout,
    )

# 🔼⚙️
