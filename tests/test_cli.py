"""End-to-end tests for the check command with a faked Go toolchain."""

import pytest
from pydantic_settings import CliApp

from prepush.cli import CliState


@pytest.fixture
def repo(tmp_path, monkeypatch):
    """Empty repository; also the working directory for config."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def go_repo(repo):
    (repo / "go.mod").write_text("module example.com/app\n")
    return repo


def _run(*args):
    with pytest.raises(SystemExit) as excinfo:
        CliApp.run(CliState, cli_args=["check", *args])
    return excinfo.value.code


def test_missing_directory(repo, capsys):
    code = _run(str(repo / "nope"))

    assert code == 1
    assert "does not exist" in capsys.readouterr().err


def test_no_languages_detected(repo, capsys):
    code = _run(str(repo))

    out = capsys.readouterr().out
    assert code == 0
    assert "=== Pre-push Checks ===" in out
    assert "No supported languages detected." in out


def test_directory_defaults_to_working_directory(go_repo, fake_tools, capsys):
    """`prepush check` with no argument checks the current directory."""
    code = _run()

    out = capsys.readouterr().out
    assert code == 0
    assert "Found: go in ." in out
    assert "Passed: 4, Failed: 0, Skipped: 0" in out


def test_directory_after_flags(go_repo, fake_tools, capsys):
    code = _run("--no-lint", str(go_repo))

    out = capsys.readouterr().out
    assert code == 0
    assert f"Found: go in {go_repo}" in out
    assert "Go: golangci-lint" not in out


def test_all_checks_pass(go_repo, fake_tools, capsys):
    code = _run(str(go_repo))

    out = capsys.readouterr().out
    assert code == 0
    assert f"Found: go in {go_repo}" in out
    assert "=== Summary ===" in out
    assert "Passed: 4, Failed: 0, Skipped: 0" in out
    assert "All pre-push checks passed!" in out


def test_failure_exits_non_zero(go_repo, fake_tools, capsys):
    fake_tools.stdout["gofmt"] = "main.go"

    code = _run(str(go_repo))

    out = capsys.readouterr().out
    assert code == 1
    assert "Files need formatting" in out
    assert "Pre-push checks failed!" in out


def test_flags_disable_checks(go_repo, fake_tools, capsys):
    code = _run(str(go_repo), "--no-test", "--no-lint")

    out = capsys.readouterr().out
    assert code == 0
    assert "Go: tests" not in out
    assert "Go: golangci-lint" not in out
    assert "Passed: 2, Failed: 0, Skipped: 0" in out


def test_coverage_warning_does_not_fail(go_repo, fake_tools, capsys):
    fake_tools.exits["gocoverbadge"] = (1, "no test files")

    code = _run(str(go_repo), "--coverage")

    out = capsys.readouterr().out
    assert code == 0
    assert "Warnings: 1" in out
    assert "Pre-push checks passed with warnings." in out


def test_missing_lint_tool_is_skipped(go_repo, fake_tools, capsys):
    fake_tools.installed.discard("golangci-lint")

    code = _run(str(go_repo), "--verbose")

    out = capsys.readouterr().out
    assert code == 0
    assert "Skipped: 1" in out
    assert "golangci-lint not installed" in out


def test_go_no_go_mode(go_repo, fake_tools, capsys):
    fake_tools.exits["go"] = (1, "FAIL example.com/app")

    code = _run(str(go_repo), "--go-no-go")

    out = capsys.readouterr().out
    assert code == 1
    assert "GO/NO-GO" in out
    assert "FINAL STATUS: NO-GO" in out
    assert "=== Summary ===" not in out


def test_config_file_disables_checks(go_repo, fake_tools, capsys):
    (go_repo / "prepush.yaml").write_text(
        "config:\n  checks:\n    lint: false\n"
    )

    code = _run(str(go_repo))

    assert code == 0
    assert "Go: golangci-lint" not in capsys.readouterr().out
