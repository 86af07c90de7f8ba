"""Result aggregation and report rendering."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import NamedTuple, TextIO

from prepush.core.result import Result, Status

# Lines of output shown for a failure when not verbose
FAILURE_TAIL_LINES = 20

REPORT_WIDTH = 60

STATUS_MARKS = {
    Status.PASSED: "✓",
    Status.FAILED: "✗",
    Status.SKIPPED: "○",
    Status.WARNING: "!",
}

GATE_LABELS = {
    Status.PASSED: "GO",
    Status.FAILED: "NO-GO",
    Status.SKIPPED: "SKIP",
    Status.WARNING: "GO (advisory)",
}


class Summary(NamedTuple):
    """Counts per terminal state. Warnings are never counted as
    passed or failed."""

    passed: int = 0
    failed: int = 0
    skipped: int = 0
    warnings: int = 0

    @property
    def ok(self) -> bool:
        return self.failed == 0


def summarize(results: Sequence[Result]) -> Summary:
    """Count results by status in one pass."""
    counts = dict.fromkeys(Status, 0)
    for result in results:
        counts[result.status] += 1
    return Summary(
        passed=counts[Status.PASSED],
        failed=counts[Status.FAILED],
        skipped=counts[Status.SKIPPED],
        warnings=counts[Status.WARNING],
    )


def format_summary_line(summary: Summary) -> str:
    line = (
        f"Passed: {summary.passed}, Failed: {summary.failed}, "
        f"Skipped: {summary.skipped}"
    )
    if summary.warnings:
        line += f", Warnings: {summary.warnings}"
    return line


def _tail(text: str, lines: int) -> str:
    split = text.splitlines()
    if len(split) <= lines:
        return text
    hidden = len(split) - lines
    return "\n".join([f"... ({hidden} more lines)", *split[-lines:]])


def _indent(text: str, prefix: str = "    ") -> str:
    return "\n".join(prefix + line for line in text.splitlines())


def _details(result: Result, verbose: bool) -> str:
    """Text shown under a result line, or '' for none."""
    status = result.status
    if status is Status.SKIPPED:
        return (result.reason or "") if verbose else ""
    if status is Status.FAILED:
        # Failures are always actionable without a verbose re-run
        detail = result.detail
        return detail if verbose else _tail(detail, FAILURE_TAIL_LINES)
    if result.informational and result.error is None:
        return result.output
    if status is Status.WARNING or verbose:
        return result.detail
    return ""


def print_results(
    results: Sequence[Result],
    verbose: bool = False,
    stream: TextIO | None = None,
) -> Summary:
    """Print one line per result and return the counts.

    Args:
        results: Results in report order (not modified)
        verbose: Show skip reasons and output of every check
        stream: Where to write (stdout when None)

    Returns:
        Summary of passed, failed, skipped and warning counts
    """
    out = stream or sys.stdout
    for result in results:
        status = result.status
        suffix = ""
        if status is Status.SKIPPED:
            suffix = " (skipped)"
        elif status is Status.WARNING:
            suffix = " (warning)"
        print(f"{STATUS_MARKS[status]} {result.name}{suffix}", file=out)

        details = _details(result, verbose)
        if details:
            print(_indent(details), file=out)

    return summarize(results)


def print_go_no_go_report(
    results: Sequence[Result],
    verbose: bool = False,
    stream: TextIO | None = None,
) -> bool:
    """Print a Go/No-Go poll of the results.

    Every check answers GO or NO-GO in input order. Skipped checks
    answer SKIP and advisory checks GO (advisory); neither blocks.

    Returns:
        True when no check is NO-GO (including when there are none)
    """
    out = stream or sys.stdout
    rule = "=" * REPORT_WIDTH

    print(rule, file=out)
    print("PRE-PUSH GO/NO-GO POLL".center(REPORT_WIDTH), file=out)
    print(rule, file=out)
    print(file=out)

    for result in results:
        status = result.status
        label = GATE_LABELS[status]
        if status is Status.SKIPPED:
            label += f" ({result.reason})"
        leader = "." * max(REPORT_WIDTH - len(result.name) - 16, 3)
        print(f"  {result.name} {leader} {label}", file=out)

        details = _details(result, verbose)
        if details and status is not Status.SKIPPED:
            print(_indent(details, "      "), file=out)

    summary = summarize(results)
    all_go = summary.ok

    print(file=out)
    print("-" * REPORT_WIDTH, file=out)
    print(
        f"  GO: {summary.passed + summary.warnings}   "
        f"NO-GO: {summary.failed}   SKIP: {summary.skipped}",
        file=out,
    )
    print(rule, file=out)
    verdict = "GO FOR PUSH" if all_go else "NO-GO"
    print(f"  FINAL STATUS: {verdict}", file=out)
    print(rule, file=out)

    return all_go
