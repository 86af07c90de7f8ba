"""Command execution using invoke library with custom extensions."""

from __future__ import annotations

import os
import shlex
import shutil
from pathlib import Path

from invoke import Context
from invoke import Result as InvokeResult
from invoke.exceptions import CommandTimedOut

from prepush.core.errors import (
    CommandFailedError,
    CommandNotFoundError,
    CommandTimeoutError,
)
from prepush.core.log import logger
from prepush.core.result import Result

# Exit code reported for commands killed by a timeout
TIMEOUT_EXIT_CODE = -1


class Runner(Context):
    """Wrapper around invoke.Context with a single execute() entry
    point that never raises for non-zero exits or timeouts.
    """

    def execute(
        self,
        command: str,
        cwd: Path | None = None,
        timeout: float | None = None,
    ) -> InvokeResult:
        """Execute a command and capture its output.

        Args:
            command: Command string to execute
            cwd: Working directory for command execution
            timeout: Maximum execution time in seconds

        Returns:
            invoke.Result with stdout, stderr and exited. A timed out
            command is returned with exited == TIMEOUT_EXIT_CODE.
        """
        kwargs = {
            "hide": True,
            "warn": True,
            "in_stream": False,
        }
        if timeout:
            kwargs["timeout"] = timeout

        try:
            if cwd:
                with self.cd(str(cwd)):
                    result = self.run(command, **kwargs)
            else:
                result = self.run(command, **kwargs)
        except CommandTimedOut as e:
            result = e.result
            result.exited = TIMEOUT_EXIT_CODE

        logger.debug(
            "Command finished",
            command=command,
            cwd=str(cwd) if cwd else None,
            exited=result.exited,
        )
        return result


def command_exists(program: str) -> bool:
    """Return True if program resolves on PATH. Nothing is executed."""
    return shutil.which(program) is not None


def file_exists(path: str | os.PathLike) -> bool:
    """Return True if path exists.

    Only an explicit not-found counts as missing; any other stat
    error (permission denied, for instance) means something is there.
    """
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except OSError:
        return True
    return True


def _combined_output(result: InvokeResult) -> str:
    parts = [result.stdout.strip(), result.stderr.strip()]
    return "\n".join(part for part in parts if part)


def _timed_out(result: InvokeResult, timeout: float | None) -> bool:
    return bool(timeout) and result.exited == TIMEOUT_EXIT_CODE


def run_command(
    name: str,
    workdir: str | os.PathLike,
    program: str,
    *args: str,
    timeout: float | None = None,
) -> Result:
    """Run program synchronously and turn the outcome into a Result.

    Args:
        name: Display name of the resulting check
        workdir: Directory to run in (must exist)
        program: Executable name, resolved on PATH
        *args: Arguments passed to the program
        timeout: Optional limit in seconds

    Returns:
        Result with passed set from the exit status and output holding
        stdout and stderr combined, trimmed. error is set when the
        program could not be found, exited non-zero or timed out.
    """
    if not command_exists(program):
        logger.debug("Command not found", program=program)
        return Result(
            name=name, passed=False, error=CommandNotFoundError(program)
        )

    command = shlex.join([program, *args])
    result = Runner().execute(command, cwd=Path(workdir), timeout=timeout)
    output = _combined_output(result)

    if _timed_out(result, timeout):
        return Result(
            name=name,
            passed=False,
            output=output,
            error=CommandTimeoutError(command, timeout),
        )
    if result.exited != 0:
        return Result(
            name=name,
            passed=False,
            output=output,
            error=CommandFailedError(command, result.exited, output),
        )
    return Result(name=name, passed=True, output=output)


def command_output(
    workdir: str | os.PathLike,
    program: str,
    *args: str,
    timeout: float | None = None,
) -> str:
    """Run program and return its standard output.

    Used for tools that print structured data on stdout, where
    stderr chatter must not be mixed in.

    Raises:
        CommandNotFoundError: program is not on PATH
        CommandTimeoutError: program exceeded timeout
        CommandFailedError: program exited non-zero
    """
    if not command_exists(program):
        raise CommandNotFoundError(program)

    command = shlex.join([program, *args])
    result = Runner().execute(command, cwd=Path(workdir), timeout=timeout)

    if _timed_out(result, timeout):
        raise CommandTimeoutError(command, timeout)
    if result.exited != 0:
        raise CommandFailedError(
            command, result.exited, _combined_output(result)
        )
    return result.stdout
