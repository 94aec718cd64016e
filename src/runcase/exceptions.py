#
# src/runcase/exceptions.py
#
"""
Exception hierarchy for runcase.

Mismatches between a command's outcome and its expectation are not errors;
they are reported through a failing Verdict. The exceptions here cover the
conditions that stop a case from being checked at all.
"""


class RuncaseError(Exception):
    """Base class for all runcase errors."""


class ConfigurationError(RuncaseError):
    """Raised when a test case document or command description is malformed."""

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        full_message = message
        if source:
            full_message += f" (Source: '{source}')"
        super().__init__(full_message)


class EmptyCommandError(ConfigurationError):
    """The command has no program to run."""

    def __init__(self, source: str | None = None):
        super().__init__("Command needs at least one element", source=source)


class AmbiguousStringCommandError(ConfigurationError):
    """A single-string command contains spaces and cannot be tokenized safely."""

    def __init__(self, command: str, source: str | None = None):
        self.command = command
        super().__init__(
            f"Please define a list instead of a string. Got: {command!r}",
            source=source,
        )


class ExecutionIOError(RuncaseError):
    """Raised when spawning the command, reading its output or writing diagnostics fails."""

    def __init__(
        self,
        message: str,
        program: str | None = None,
        details: Exception | None = None,
    ):
        self.program = program
        self.details = details
        full_message = message
        if program:
            full_message += f" (Program: '{program}')"
        super().__init__(full_message)
        if details and hasattr(self, "add_note"):
            self.add_note(f"Original error: {type(details).__name__}: {details}")

# 🔼⚙️
