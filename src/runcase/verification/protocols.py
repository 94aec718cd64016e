#
# src/runcase/verification/protocols.py
#
"""
Defines protocols and data structures for executing and verifying a test case.
"""

from typing import Protocol, runtime_checkable

from attrs import define, field

from runcase.config.models import Expectation


@define(frozen=True, slots=True)
class TerminationStatus:
    """
    How a child process ended: a numeric exit code, or abnormally.

    At most one field is set. On POSIX a process killed by a signal has no
    exit code and `signal` holds the signal number. Both are None when the
    process ended without any retrievable status.
    """

    exit_code: int | None = field(default=None)
    signal: int | None = field(default=None)

    @property
    def is_abnormal(self) -> bool:
        return self.exit_code is None

    @classmethod
    def from_returncode(cls, returncode: int | None, posix: bool = True) -> "TerminationStatus":
        """Maps an asyncio/subprocess return code onto a status."""
        if returncode is None:
            return cls()
        if posix and returncode < 0:
            return cls(signal=-returncode)
        return cls(exit_code=returncode)


@define(frozen=True, slots=True)
class ExecutionResult:
    """
    Raw outcome of one command execution.
    """

    stdout: bytes
    stderr: bytes
    status: TerminationStatus

    @property
    def stdout_text(self) -> str:
        return self.stdout.decode("utf-8", errors="replace")

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")


@define(frozen=True, slots=True)
class Verdict:
    """
    Pass/fail outcome of comparing an execution against an Expectation.
    """

    success: bool
    diagnostics: tuple[str, ...] = field(factory=tuple, converter=tuple)


@runtime_checkable
class DiagnosticSink(Protocol):
    """Anything that accepts text, e.g. sys.stdout or io.StringIO."""

    def write(self, text: str, /) -> object: ...


@runtime_checkable
class CommandExecutor(Protocol):
    """
    Protocol for something that can run the command of an Expectation.
    """

    async def execute(self, expectation: Expectation) -> ExecutionResult:
        """
        Runs the command once and waits for it to finish.

        Args:
            expectation: The test case whose program and arguments are run.

        Returns:
            The captured output streams and termination status.
        """
        ...

# 🔼⚙️
