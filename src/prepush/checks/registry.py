"""Checker registry and the runner that drives it."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor

from prepush.checks.base import Checker
from prepush.checks.golang import GoChecker
from prepush.core.log import logger
from prepush.core.options import Options
from prepush.core.result import Result
from prepush.detect import Detection

CheckerFactory = Callable[[], Checker]


class CheckerRegistry:
    """Maps language identifiers to checker factories.

    Adding a language means registering a factory; the runner does
    not change.
    """

    def __init__(self):
        """Initialize empty registry."""
        self._factories: dict[str, CheckerFactory] = {}

    def register(self, language: str, factory: CheckerFactory) -> None:
        """Register a checker factory for a language.

        Args:
            language: Language identifier as produced by detection
            factory: Zero-argument callable returning a Checker
        """
        self._factories[language] = factory

    def get(self, language: str) -> Checker | None:
        """Build the checker for language, or None if unregistered."""
        factory = self._factories.get(language)
        return factory() if factory else None

    @property
    def languages(self) -> list[str]:
        return list(self._factories)


registry = CheckerRegistry()
registry.register(GoChecker.language, GoChecker)


def register_checker(language: str):
    """Class decorator registering a checker in the default registry."""
    def decorator(cls):
        registry.register(language, cls)
        return cls
    return decorator


def _run_one(checker: Checker, detection: Detection, opts: Options):
    with logger.span(
        "Running {checker} checks",
        checker=checker.name,
        path=str(detection.path),
    ):
        return checker.check(detection.path, opts)


def run_checks(
    detections: Iterable[Detection],
    opts: Options,
    checkers: CheckerRegistry = registry,
) -> list[Result]:
    """Run the registered checker for every detection.

    Detections whose language has no checker are ignored. Results
    come back in detection order, then in each checker's own order,
    whether or not checkers ran concurrently (opts.jobs > 1).
    """
    planned = []
    for detection in detections:
        checker = checkers.get(detection.language)
        if checker is None:
            logger.debug(
                "No checker registered for language",
                language=detection.language,
                path=str(detection.path),
            )
            continue
        planned.append((checker, detection))

    if opts.jobs > 1 and len(planned) > 1:
        with ThreadPoolExecutor(max_workers=opts.jobs) as pool:
            batches = list(pool.map(
                lambda item: _run_one(item[0], item[1], opts), planned
            ))
    else:
        batches = [_run_one(c, d, opts) for c, d in planned]

    results: list[Result] = []
    for batch in batches:
        results.extend(batch)
    return results
