"""Shared test fixtures for guardgen."""

from __future__ import annotations

from pathlib import Path

import pytest

from guardgen.config import GeneratorOptions


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty project directory."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture()
def home_templates(tmp_path: Path) -> Path:
    """Create a user template directory with a ``bar`` template."""
    templates = tmp_path / "home" / ".guard" / "templates"
    templates.mkdir(parents=True)
    (templates / "bar").write_text("Template content", encoding="utf-8")
    return templates


@pytest.fixture()
def options(workdir: Path, home_templates: Path) -> GeneratorOptions:
    """Return options pointing at the temporary project and templates."""
    return GeneratorOptions(home_templates=str(home_templates))
