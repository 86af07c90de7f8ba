"""Base checker interface."""

from abc import abstractmethod
from pathlib import Path
from typing import Protocol

from prepush.core.options import Options
from prepush.core.result import Result


class Checker(Protocol):
    """Protocol for language checkers.

    A checker runs the checks for one language on one project
    directory. Categories disabled in Options are left out of the
    returned list entirely; a check is only reported as skipped when
    it is enabled but its tool is not installed. Tool failures are
    returned as failed Results, never raised.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Checker name used in reports (Go, Python, ...)."""
        pass

    @abstractmethod
    def check(self, directory: Path, opts: Options) -> list[Result]:
        """Run every enabled check against directory.

        Args:
            directory: Project root for this language
            opts: Check selection options

        Returns:
            Results in execution order (possibly empty)
        """
        pass
