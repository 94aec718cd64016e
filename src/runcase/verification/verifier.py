#
# src/runcase/verification/verifier.py
#
"""
Checks the outcome of a command against its Expectation.
"""

import asyncio
import unicodedata


from runcase.config.models import Expectation
from runcase.exceptions import ExecutionIOError
from runcase.telemetry import get_logger
from runcase.verification.executor import SubprocessExecutor
from runcase.verification.protocols import (
    CommandExecutor,
    DiagnosticSink,
    ExecutionResult,
    Verdict,
)

log = get_logger("verification.verifier")

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def quote_text(text: str) -> str:
    """
    Double-quotes text with control characters escaped, e.g. "foo bar baz\\n".
    """
    parts = ['"']
    for char in text:
        escaped = _ESCAPES.get(char)
        if escaped is not None:
            parts.append(escaped)
        elif unicodedata.category(char) == "Cc":
            parts.append(f"\\u{{{ord(char):x}}}")
        else:
            parts.append(char)
    parts.append('"')
    return "".join(parts)


def _check_exit_code(expectation: Expectation, result: ExecutionResult) -> list[str]:
    status = result.status
    if status.is_abnormal:
        cause = f"signal {status.signal}" if status.signal is not None else "no exit code"
        return [
            f"Process terminated abnormally ({cause}). "
            f"Expected exit code {expectation.expected_exit_code}"
        ]
    if status.exit_code != expectation.expected_exit_code:
        return [
            f"Wrong or unexpected exit code {status.exit_code}. "
            f"Expected {expectation.expected_exit_code}"
        ]
    return []


def _check_stdout(expectation: Expectation, result: ExecutionResult) -> list[str]:
    if expectation.expected_stdout is None:
        return []
    actual = result.stdout_text
    if actual == expectation.expected_stdout:
        return []
    return [
        "Got unexpected stdout output.",
        f"expected: {quote_text(expectation.expected_stdout)}",
        f"got     : {quote_text(actual)}",
    ]


def evaluate(expectation: Expectation, result: ExecutionResult) -> Verdict:
    """
    Compares a captured execution against an Expectation.

    On failure the diagnostics always end with the full stdout and stderr.
    """
    diagnostics = _check_exit_code(expectation, result)
    diagnostics += _check_stdout(expectation, result)

    if not diagnostics:
        return Verdict(success=True)

    diagnostics.append(f"stdout: {quote_text(result.stdout_text)}")
    diagnostics.append(f"stderr: {quote_text(result.stderr_text)}")
    return Verdict(success=False, diagnostics=diagnostics)


class Verifier:
    """
    Runs the command of an Expectation and reports whether it behaved as expected.
    """

    def __init__(self, executor: CommandExecutor | None = None):
        self._executor = executor or SubprocessExecutor()

    async def verify_async(self, expectation: Expectation, sink: DiagnosticSink) -> Verdict:
        """
        Executes and evaluates one test case, writing diagnostics to `sink`.

        Raises:
            ExecutionIOError: The command could not be run or the sink failed.
        """
        verify_log = log.bind(program=expectation.program)

        result = await self._executor.execute(expectation)
        verdict = evaluate(expectation, result)

        try:
            for line in verdict.diagnostics:
                sink.write(f"{line}\n")
        except (OSError, ValueError) as e:
            # ValueError covers closed streams and UnicodeEncodeError.
            verify_log.error("Failed to write diagnostics", error=str(e))
            raise ExecutionIOError(
                f"Failed to write diagnostics: {e}",
                program=expectation.program,
                details=e,
            ) from e

        verify_log.info(
            "Verification complete",
            success=verdict.success,
            diagnostic_lines=len(verdict.diagnostics),
        )
        return verdict

    def verify(self, expectation: Expectation, sink: DiagnosticSink) -> Verdict:
        """Synchronous wrapper around `verify_async`."""
        return asyncio.run(self.verify_async(expectation, sink))


def verify(expectation: Expectation, sink: DiagnosticSink) -> Verdict:
    """Verifies one test case with the default subprocess executor."""
    return Verifier().verify(expectation, sink)

# 🔼⚙️
