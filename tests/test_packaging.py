"""Packaging metadata tests."""

import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def test_readme_is_the_project_readme() -> None:
    project = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))["project"]
    readme = ROOT / project["readme"]
    assert readme.name == "README.md"
    assert readme.is_file()
    assert "RXPAD_" in readme.read_text(encoding="utf-8")
