"""Check command - run pre-push validation checks."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field
from pydantic_settings import CliPositionalArg

from prepush.checks.registry import run_checks
from prepush.core.log import logger
from prepush.core.options import Options
from prepush.detect import detect
from prepush.report import (
    format_summary_line,
    print_go_no_go_report,
    print_results,
)

if TYPE_CHECKING:
    from prepush.core.config import State


class CheckCommand(BaseModel):
    """Run validation checks for all detected languages.

    Checks include module hygiene, format, lint and test for each
    detected language. Results are summarized with pass/fail status
    and the exit code is non-zero when any check fails.
    """

    directory: CliPositionalArg[Path] = Field(
        default=Path("."),
        description="Repository to check",
    )
    test: bool = Field(default=True, description="Run tests")
    lint: bool = Field(default=True, description="Run linters")
    format: bool = Field(default=True, description="Run format checks")
    coverage: bool = Field(
        default=False,
        description="Show coverage (Go only, informational)",
    )
    go_no_go: bool = Field(
        default=False,
        description="Display a Go/No-Go validation report",
    )
    verbose: bool = Field(
        default=False,
        description="Show tool output and skip reasons",
    )

    def build_options(self, configured: Options) -> Options:
        """Combine configured options with command-line flags.

        A category disabled in either place stays disabled; coverage
        and verbose are enabled by either.
        """
        return configured.model_copy(
            update={
                "test": configured.test and self.test,
                "lint": configured.lint and self.lint,
                "format": configured.format and self.format,
                "coverage": configured.coverage or self.coverage,
                "verbose": configured.verbose or self.verbose,
            }
        )

    def run(self, state: State) -> int:
        """Run checks and print the report.

        Returns:
            Exit code (0 when no check failed)
        """
        if not self.directory.exists():
            print(
                f"Error: directory {self.directory} does not exist",
                file=sys.stderr,
            )
            return 1

        opts = self.build_options(state.config.checks)

        print("=== Pre-push Checks ===")
        print()
        print("Detecting languages...")

        detections = detect(self.directory)
        if not detections:
            print("No supported languages detected.")
            return 0

        for detection in detections:
            print(f"  Found: {detection.language} in {detection.path}")
        print()

        logger.info(
            "Running checks",
            directory=str(self.directory),
            languages=[d.language for d in detections],
        )
        results = run_checks(detections, opts)

        if self.go_no_go:
            return 0 if print_go_no_go_report(results, opts.verbose) else 1

        print("=== Summary ===")
        summary = print_results(results, opts.verbose)
        print()
        print(format_summary_line(summary))
        print()

        if not summary.ok:
            print("Pre-push checks failed!")
            return 1
        if summary.warnings:
            print("Pre-push checks passed with warnings.")
        else:
            print("All pre-push checks passed!")
        return 0
