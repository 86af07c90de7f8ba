"""Result types for check execution."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Status(str, Enum):
    """Terminal state of a single check."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
    WARNING = "warning"


class Result(BaseModel):
    """Outcome of one discrete check.

    A Result is created by a checker when a sub-check completes or
    is bypassed and is never modified afterwards.
    """

    name: str = Field(min_length=1, description="Check identifier")
    passed: bool = Field(
        default=False,
        description="Whether the check passed (ignored when skipped)",
    )
    skipped: bool = Field(
        default=False,
        description="Check applies but its external tool is absent",
    )
    reason: str | None = Field(
        default=None,
        description="Why the check was skipped",
    )
    output: str = Field(
        default="",
        description="Captured tool output or explanation",
    )
    error: Exception | None = Field(
        default=None,
        description="Error that prevented the check from running cleanly",
    )
    informational: bool = Field(
        default=False,
        description="Advisory check that never blocks a push",
    )
    warning: bool = Field(
        default=False,
        description=(
            "Advisory check forced to pass although the underlying "
            "tool did not succeed"
        ),
    )

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def _reason_iff_skipped(self) -> Result:
        if self.skipped and not self.reason:
            raise ValueError(f"skipped check {self.name!r} needs a reason")
        if not self.skipped and self.reason is not None:
            raise ValueError(
                f"check {self.name!r} is not skipped; "
                "only skipped checks have a reason"
            )
        return self

    @classmethod
    def skip(cls, name: str, reason: str) -> Result:
        return cls(name=name, skipped=True, reason=reason)

    @property
    def status(self) -> Status:
        if self.skipped:
            return Status.SKIPPED
        if self.warning:
            return Status.WARNING
        if self.passed and self.error is None:
            return Status.PASSED
        return Status.FAILED

    @property
    def failed(self) -> bool:
        return self.status is Status.FAILED

    @property
    def detail(self) -> str:
        """Error and output joined for display."""
        parts = []
        if self.error is not None:
            parts.append(f"Error: {self.error}")
        if self.output:
            parts.append(self.output)
        return "\n".join(parts)
