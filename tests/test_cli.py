"""Tests for guardgen.cli — Typer CLI commands via CliRunner."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest
from typer.testing import CliRunner

from guardgen.cli import app
from guardgen.generator import GUARDFILE_TEMPLATE

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_entry_points(monkeypatch: pytest.MonkeyPatch) -> None:
    """Only the built-in plugins are installed during CLI tests."""
    monkeypatch.setattr("guardgen.plugin_util._entry_points", lambda: [])


@pytest.fixture()
def project(workdir: Path, home_templates: Path) -> Path:
    (workdir / ".guardgen.yaml").write_text(
        f"home_templates: {home_templates}\n", encoding="utf-8"
    )
    return workdir


class TestCliInit:
    def test_init_all_plugins(self, project: Path) -> None:
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 0, result.output
        content = (project / "Guardfile").read_text(encoding="utf-8")
        assert content.startswith(GUARDFILE_TEMPLATE.read_text(encoding="utf-8"))
        assert "guard :pytest" in content
        assert "guard :shell" in content
        assert "Writing new Guardfile" in result.output

    def test_init_named_plugins(self, project: Path) -> None:
        result = runner.invoke(app, ["init", "shell", "bar"])
        assert result.exit_code == 0, result.output
        content = (project / "Guardfile").read_text(encoding="utf-8")
        assert "guard :shell" in content
        assert "guard :pytest" not in content
        assert content.endswith("\n\nTemplate content\n")

    def test_init_unknown_plugin(self, project: Path) -> None:
        result = runner.invoke(app, ["init", "foo"])
        assert result.exit_code == 0
        assert "Could not load 'guard/foo'" in result.output

    def test_init_bare(self, project: Path) -> None:
        result = runner.invoke(app, ["init", "--bare"])
        assert result.exit_code == 0
        content = (project / "Guardfile").read_text(encoding="utf-8")
        assert content == GUARDFILE_TEMPLATE.read_text(encoding="utf-8")

    def test_init_bare_existing_guardfile_aborts(self, project: Path) -> None:
        (project / "Guardfile").write_text("mine\n", encoding="utf-8")
        result = runner.invoke(app, ["init", "--bare"])
        assert result.exit_code == 1
        assert "Guardfile already exists at" in result.output
        assert (project / "Guardfile").read_text(encoding="utf-8") == "mine\n"

    def test_init_existing_guardfile_appends(self, project: Path) -> None:
        (project / "Guardfile").write_text("mine\n", encoding="utf-8")
        result = runner.invoke(app, ["init", "shell"])
        assert result.exit_code == 0
        content = (project / "Guardfile").read_text(encoding="utf-8")
        assert content.startswith("mine\n\n")

    def test_abort_on_existence_from_config(self, project: Path) -> None:
        (project / "Guardfile").write_text("mine\n", encoding="utf-8")
        config = project / "strict.yaml"
        config.write_text("abort_on_existence: true\n", encoding="utf-8")
        result = runner.invoke(app, ["init", "--config", str(config)])
        assert result.exit_code == 1

    def test_custom_guardfile(self, project: Path) -> None:
        result = runner.invoke(app, ["init", "--bare", "--guardfile", "Guardfile.local"])
        assert result.exit_code == 0
        assert (project / "Guardfile.local").exists()
        assert not (project / "Guardfile").exists()


class TestCliList:
    def test_list_plugins(self, project: Path) -> None:
        (project / "Guardfile").write_text("guard :shell do\nend\n", encoding="utf-8")
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "pytest" in result.output
        assert "shell" in result.output
        assert "yes" in result.output

    def test_list_includes_entry_points(
        self, project: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        eps = [SimpleNamespace(name="rails", value="x:Rails", load=lambda: None)]
        monkeypatch.setattr("guardgen.plugin_util._entry_points", lambda: eps)
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "rails" in result.output
