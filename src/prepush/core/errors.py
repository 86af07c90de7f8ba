"""Errors raised while running external tools.

Checkers never let these escape; they are stored on the Result of
the check that could not run.
"""


class CheckError(Exception):
    """Base class for errors produced while executing a check."""


class CommandNotFoundError(CheckError):
    """The program could not be resolved on PATH."""

    def __init__(self, program: str):
        self.program = program
        super().__init__(f"executable file not found in $PATH: {program}")


class CommandFailedError(CheckError):
    """The program ran but exited with a non-zero status."""

    def __init__(self, command: str, exit_code: int, output: str = ""):
        self.command = command
        self.exit_code = exit_code
        self.output = output
        super().__init__(f"{command}: exit status {exit_code}")


class CommandTimeoutError(CheckError):
    """The program was killed after exceeding its timeout."""

    def __init__(self, command: str, timeout: float):
        self.command = command
        self.timeout = timeout
        super().__init__(f"{command}: timed out after {timeout}s")


class ManifestError(CheckError):
    """A tool produced data that could not be interpreted."""
