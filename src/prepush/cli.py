#!/usr/bin/env python3
"""prepush CLI - pre-push validation checks."""

import sys

from pydantic_settings import CliApp, CliSubCommand, get_subcommand

from prepush.command.check import CheckCommand
from prepush.core.config import State


class CliState(State):
    """Pluggable pre-push validation runner.

    Detects the languages present in a repository and runs format,
    lint, test and coverage checks for each of them.

    Configuration sources (in priority order):
    1. Command-line arguments
    2. Environment variables (PREPUSH_CONFIG__CHECKS__TIMEOUT=600)
    3. .env file
    4. ./prepush.yaml, then the user config file, then package defaults
    """

    check: CliSubCommand[CheckCommand]

    def cli_cmd(self):
        """Dispatch to the active subcommand, or show help."""
        subcommand = get_subcommand(self, is_required=False)

        if subcommand is None:
            CliApp.run(CliState, cli_args=['--help'])
            sys.exit(1)

        # Closing the config flushes and closes log sinks
        with self.config:
            raise SystemExit(subcommand.run(self))


def main():
    """Main entry point for CLI."""
    CliApp.run(CliState)


if __name__ == "__main__":
    main()
