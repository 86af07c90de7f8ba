"""Options controlling which checks run."""

from pydantic import ConfigDict, Field

from prepush.core.base import BaseConfig

# Go coverage skips command entry points by default
DEFAULT_GO_EXCLUDE_COVERAGE = "cmd"


class Options(BaseConfig):
    """Check selection and reporting options.

    Also serves as the ``checks`` section of the configuration file.
    Options are read-only once built; use ``model_copy(update=...)``
    to derive a variant.
    """

    test: bool = Field(default=True, description="Run test checks")
    lint: bool = Field(default=True, description="Run lint checks")
    format: bool = Field(default=True, description="Run format checks")
    coverage: bool = Field(
        default=False,
        description="Run informational coverage checks",
    )
    go_exclude_coverage: str = Field(
        default=DEFAULT_GO_EXCLUDE_COVERAGE,
        description="Package pattern excluded from Go coverage",
    )
    verbose: bool = Field(
        default=False,
        description="Show tool output and skip reasons in reports",
    )
    timeout: float | None = Field(
        default=None,
        gt=0,
        description="Per-command timeout in seconds (None waits forever)",
    )
    jobs: int = Field(
        default=1,
        ge=1,
        description="Number of language checkers run concurrently",
    )

    model_config = ConfigDict(frozen=True)


def default_options() -> Options:
    """Return the default Options."""
    return Options()
