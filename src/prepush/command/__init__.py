"""CLI command modules for prepush."""

from prepush.command.check import CheckCommand

__all__ = ["CheckCommand"]
