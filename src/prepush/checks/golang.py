"""Checks for Go modules."""

from __future__ import annotations

import json
from pathlib import Path

from prepush.core.errors import CheckError, ManifestError
from prepush.core.log import logger
from prepush.core.options import Options
from prepush.core.result import Result
from prepush.core.runner import command_exists, command_output, run_command

# Replace targets starting with these are filesystem paths
LOCAL_PATH_PREFIXES = (".", "/")


def _path(entry) -> str | None:
    """Path of a replace side, or None when absent or not a string."""
    if not isinstance(entry, dict):
        return None
    path = entry.get("Path")
    return path if isinstance(path, str) else None


def local_replacements(manifest) -> list[str]:
    """Return 'old => new' for every replace directive that points
    at a local path in a `go mod edit -json` manifest.

    Raises:
        ManifestError: manifest or its Replace list has the wrong shape
    """
    if not isinstance(manifest, dict):
        raise ManifestError("go mod edit -json: expected a JSON object")
    replaces = manifest.get("Replace") or []
    if not isinstance(replaces, list):
        raise ManifestError("go mod edit -json: Replace is not a list")

    found = []
    for replace in replaces:
        if not isinstance(replace, dict):
            raise ManifestError("go mod edit -json: malformed Replace entry")
        new_path = _path(replace.get("New"))
        if new_path and new_path.startswith(LOCAL_PATH_PREFIXES):
            old_path = _path(replace.get("Old")) or "?"
            found.append(f"{old_path} => {new_path}")
    return found


class GoChecker:
    """Module hygiene, gofmt, golangci-lint, go test and coverage."""

    language = "go"

    @property
    def name(self) -> str:
        return "Go"

    def check(self, directory: Path, opts: Options) -> list[Result]:
        directory = Path(directory)
        results = [self.check_no_local_replace(directory, opts)]

        if opts.format:
            results.append(self.check_format(directory, opts))
        if opts.lint:
            results.append(self.check_lint(directory, opts))
        if opts.test:
            results.append(self.check_test(directory, opts))
        if opts.coverage:
            results.append(self.check_coverage(directory, opts))

        return results

    def check_no_local_replace(self, directory: Path, opts: Options) -> Result:
        name = "Go: no local replace directives"

        try:
            raw = command_output(
                directory, "go", "mod", "edit", "-json",
                timeout=opts.timeout,
            )
            try:
                manifest = json.loads(raw)
            except json.JSONDecodeError as e:
                raise ManifestError(f"go mod edit -json: {e}") from e
            local = local_replacements(manifest)
        except CheckError as e:
            return Result(
                name=name,
                passed=False,
                output=getattr(e, "output", ""),
                error=e,
            )

        if local:
            return Result(
                name=name,
                passed=False,
                output=(
                    "go.mod contains local replace directives:\n"
                    + "\n".join(local)
                ),
            )
        return Result(name=name, passed=True)

    def check_format(self, directory: Path, opts: Options) -> Result:
        name = "Go: gofmt"

        try:
            listing = command_output(
                directory, "gofmt", "-l", ".", timeout=opts.timeout
            )
        except CheckError as e:
            return Result(
                name=name,
                passed=False,
                output=getattr(e, "output", ""),
                error=e,
            )

        unformatted = listing.strip()
        if unformatted:
            return Result(
                name=name,
                passed=False,
                output="Files need formatting:\n" + unformatted,
            )
        return Result(name=name, passed=True)

    def check_lint(self, directory: Path, opts: Options) -> Result:
        name = "Go: golangci-lint"

        if not command_exists("golangci-lint"):
            return Result.skip(name, "golangci-lint not installed")
        return run_command(
            name, directory, "golangci-lint", "run", timeout=opts.timeout
        )

    def check_test(self, directory: Path, opts: Options) -> Result:
        return run_command(
            "Go: tests", directory, "go", "test", "./...",
            timeout=opts.timeout,
        )

    def check_coverage(self, directory: Path, opts: Options) -> Result:
        """Coverage is informational: the result always passes.

        When gocoverbadge itself fails the result is flagged as a
        warning so the reporter can show it without blocking.
        """
        name = "Go: coverage"

        if not command_exists("gocoverbadge"):
            return Result.skip(name, "gocoverbadge not installed")

        args = ["-dir", str(directory), "-badge-only"]
        if opts.go_exclude_coverage:
            args += ["-exclude", opts.go_exclude_coverage]

        result = run_command(
            name, directory, "gocoverbadge", *args, timeout=opts.timeout
        )
        if not result.passed:
            logger.warn(
                "Coverage tool failed; reporting as warning",
                directory=str(directory),
                error=str(result.error),
            )
        return result.model_copy(
            update={
                "passed": True,
                "informational": True,
                "warning": not result.passed,
            }
        )
