"""Language checker implementations."""

from prepush.checks.base import Checker
from prepush.checks.golang import GoChecker
from prepush.checks.registry import (
    CheckerRegistry,
    register_checker,
    registry,
    run_checks,
)

__all__ = [
    "Checker",
    "GoChecker",
    "CheckerRegistry",
    "register_checker",
    "registry",
    "run_checks",
]
