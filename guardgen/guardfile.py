"""Reading and appending to an existing Guardfile."""

from __future__ import annotations

import re
from pathlib import Path


def _line(text: str) -> str:
    """Terminate *text* with a newline unless it already ends with one."""
    return text if text.endswith("\n") else text + "\n"


def append_template(guardfile: Path, template: str) -> None:
    """Rewrite *guardfile* as its content, a blank line, then *template*.

    An empty Guardfile still gets a newline before the blank line, so the
    template always starts on the third line of a fresh file.
    """
    content = guardfile.read_text(encoding="utf-8")
    with guardfile.open("w", encoding="utf-8", newline="") as fh:
        fh.write(_line(content))
        fh.write(_line(""))
        fh.write(_line(template))


def includes_guard(text: str, name: str) -> bool:
    """Return True if *text* already declares ``guard :name`` or ``guard "name"``."""
    pattern = re.compile(
        r"^\s*guard\s*\(?\s*(?::|['\"])" + re.escape(name) + r"(?:['\"]|\b)",
        re.MULTILINE,
    )
    return pattern.search(text) is not None
