"""Tests for marker-file language detection."""

from prepush.detect import Detection, detect


def test_empty_repository(tmp_path):
    assert detect(tmp_path) == []


def test_root_go_module(tmp_path):
    (tmp_path / "go.mod").write_text("module example.com/app\n")

    assert detect(tmp_path) == [Detection(language="go", path=tmp_path)]


def test_nested_projects_in_path_order(tmp_path):
    (tmp_path / "go.mod").write_text("module example.com/app\n")
    (tmp_path / "tools").mkdir()
    (tmp_path / "tools" / "go.mod").write_text("module example.com/tools\n")
    (tmp_path / "web").mkdir()
    (tmp_path / "web" / "package.json").write_text("{}")

    found = [(d.language, d.path) for d in detect(tmp_path)]

    assert found == [
        ("go", tmp_path),
        ("go", tmp_path / "tools"),
        ("typescript", tmp_path / "web"),
    ]


def test_same_language_reported_once_per_directory(tmp_path):
    (tmp_path / "pyproject.toml").write_text("")
    (tmp_path / "setup.py").write_text("")

    assert [d.language for d in detect(tmp_path)] == ["python"]


def test_hidden_and_dependency_dirs_ignored(tmp_path):
    for name in (".git", "vendor", "node_modules"):
        (tmp_path / name).mkdir()
        (tmp_path / name / "go.mod").write_text("module x\n")

    assert detect(tmp_path) == []
