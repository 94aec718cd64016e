#
# src/runcase/verification/executor.py
#
"""
Runs a test case command using asyncio.subprocess.
"""

import asyncio
import contextlib
import os

from runcase.config.models import Expectation
from runcase.exceptions import ExecutionIOError
from runcase.telemetry import get_logger
from runcase.verification.protocols import CommandExecutor, ExecutionResult, TerminationStatus

log = get_logger("verification.executor")


async def _reap(process: asyncio.subprocess.Process) -> None:
    """Kills a child that is still running and waits for it to exit."""
    with contextlib.suppress(ProcessLookupError):
        process.kill()
    await process.wait()


class SubprocessExecutor(CommandExecutor):
    """
    Implements the CommandExecutor protocol with asyncio.create_subprocess_exec.

    Stdin is closed, stdout and stderr are captured on separate pipes.
    """

    async def execute(self, expectation: Expectation) -> ExecutionResult:
        """
        Executes the command and blocks until it exits.

        Both pipes are drained concurrently by `communicate()`, so a child
        that writes a lot to one stream cannot stall on a full pipe buffer.
        """
        exec_log = log.bind(
            program=expectation.program,
            arguments=list(expectation.arguments),
        )
        exec_log.info("Executing command")

        try:
            process = await asyncio.create_subprocess_exec(
                expectation.program,
                *expectation.arguments,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            exec_log.error("Command not found")
            raise ExecutionIOError(
                "Command not found. Is it installed and in the system's PATH?",
                program=expectation.program,
                details=e,
            ) from e
        except (OSError, ValueError) as e:
            # ValueError: e.g. an embedded NUL byte in the program or an argument.
            exec_log.error("Failed to spawn command", error=str(e))
            raise ExecutionIOError(
                f"Failed to spawn command: {e}",
                program=expectation.program,
                details=e,
            ) from e

        try:
            stdout_bytes, stderr_bytes = await process.communicate()
        except OSError as e:
            exec_log.error("Failed to read command output", error=str(e))
            raise ExecutionIOError(
                f"Failed to read command output: {e}",
                program=expectation.program,
                details=e,
            ) from e
        finally:
            if process.returncode is None:
                await _reap(process)

        status = TerminationStatus.from_returncode(process.returncode, posix=os.name == "posix")

        exec_log.info(
            "Command finished",
            exit_code=status.exit_code,
            signal=status.signal,
        )
        exec_log.debug(
            "Command output",
            stdout_len=len(stdout_bytes),
            stderr_len=len(stderr_bytes),
        )

        return ExecutionResult(stdout=stdout_bytes, stderr=stderr_bytes, status=status)

# 🔼⚙️
