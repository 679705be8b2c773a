"""Plugin interface definition.

A guardgen plugin is a subclass of :class:`Plugin` that knows how to
register its own block into a Guardfile::

    class Rspec(Plugin):
        name = "rspec"
        TEMPLATE = 'guard :rspec, cmd: "bundle exec rspec" do\\n  ...\\nend\\n'

To register a new plugin:

1. Built-in: create a module in ``guardgen/plugins/`` and add the class to
   ``_register_builtins()`` in ``guardgen/plugin_util.py``.
2. Third-party: expose the class under the ``guardgen.plugins`` entry-point
   group of your distribution.

Subclasses override :meth:`template` when the block has to be computed, and
:meth:`add_to_guardfile` when registration is more than an append.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from guardgen import ui
from guardgen.guardfile import append_template, includes_guard


class Plugin:
    """Base class for plugins that can add themselves to a Guardfile."""

    name: ClassVar[str] = ""
    TEMPLATE: ClassVar[str] = ""

    @classmethod
    def template(cls) -> str:
        """Return the Guardfile block for this plugin."""
        return cls.TEMPLATE

    @classmethod
    def add_to_guardfile(cls, guardfile: Path) -> bool:
        """Append this plugin's template to *guardfile*.

        Returns:
            True if the Guardfile was modified, False if it already
            declared this plugin.
        """
        if includes_guard(guardfile.read_text(encoding="utf-8"), cls.name):
            ui.info(f"Guardfile already includes {cls.name} guard")
            return False

        append_template(guardfile, cls.template())
        ui.info(f"{cls.name} guard added to Guardfile, feel free to edit it")
        return True
