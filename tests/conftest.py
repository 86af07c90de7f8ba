"""Pytest configuration and fixtures for prepush tests."""

import tempfile
from pathlib import Path

import pytest

from prepush.core.errors import CommandFailedError, CommandNotFoundError
from prepush.core.log import ConsoleSink, setup_logger
from prepush.core.result import Result

GO_MANIFEST = '{"Module": {"Path": "example.com/app"}, "Replace": null}'


@pytest.fixture(autouse=True, scope="session")
def configure_logging():
    """Configure a quiet console-only logger for the test session.

    Nothing is sent to logfire.dev.
    """
    setup_logger(
        log_root=Path(tempfile.gettempdir()) / "prepush-tests",
        run_name="prepush-tests",
        console=ConsoleSink(enabled=False),
    )


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep a real per-user prepush.yaml out of the tests and keep
    console logging out of captured reports.
    """
    monkeypatch.setattr(
        "prepush.core.yaml_settings.user_config_file",
        lambda: tmp_path / "no-user-config" / "prepush.yaml",
    )
    monkeypatch.setenv("PREPUSH_CONFIG__LOGGER__CONSOLE__ENABLED", "false")


class FakeTools:
    """Stand-in for the external Go toolchain.

    stdout: program → text returned by command_output (or an
        exception instance to raise)
    exits: program → (exit code, output) for run_command
    """

    def __init__(self):
        self.installed = {"go", "gofmt", "golangci-lint", "gocoverbadge"}
        self.stdout = {"go": GO_MANIFEST, "gofmt": ""}
        self.exits = {}
        self.calls = []

    def command_exists(self, program):
        return program in self.installed

    def command_output(self, workdir, program, *args, timeout=None):
        self.calls.append((program, *args))
        if program not in self.installed:
            raise CommandNotFoundError(program)
        value = self.stdout.get(program, "")
        if isinstance(value, Exception):
            raise value
        return value

    def run_command(self, name, workdir, program, *args, timeout=None):
        self.calls.append((program, *args))
        if program not in self.installed:
            return Result(name=name, error=CommandNotFoundError(program))
        code, output = self.exits.get(program, (0, ""))
        if code:
            return Result(
                name=name,
                passed=False,
                output=output,
                error=CommandFailedError(program, code, output),
            )
        return Result(name=name, passed=True, output=output)


@pytest.fixture
def fake_tools(monkeypatch):
    """Replace the Go checker's tool layer with FakeTools."""
    tools = FakeTools()
    for attr in ("command_exists", "command_output", "run_command"):
        monkeypatch.setattr(
            f"prepush.checks.golang.{attr}", getattr(tools, attr)
        )
    return tools
