"""Plugin: re-run pytest for the test module matching a changed file."""

from __future__ import annotations

from guardgen.plugins.base import Plugin


class Pytest(Plugin):
    name = "pytest"
    TEMPLATE = """\
guard :pytest, cmd: "python -m pytest" do
  watch(%r{^src/(.+)\\.py$}) { |m| "tests/test_#{File.basename(m[1])}.py" }
  watch(%r{^tests/test_.+\\.py$})
  watch("tests/conftest.py") { "tests" }
end
"""
