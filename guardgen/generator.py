"""Guardfile generator — creates a Guardfile and appends plugin templates."""

from __future__ import annotations

import shutil
from pathlib import Path

from guardgen import ui
from guardgen.config import GeneratorOptions
from guardgen.errors import GuardfileExistsError
from guardgen.guardfile import append_template
from guardgen.plugin_util import PluginUtil

GUARDFILE_TEMPLATE = Path(__file__).resolve().parent / "templates" / "Guardfile"


class GuardfileGenerator:
    """Create a Guardfile from the built-in template and add plugin blocks.

    Args:
        options: Generator options. ``abort_on_existence`` makes
            :meth:`create_guardfile` abort when the Guardfile is present.
    """

    def __init__(self, options: GeneratorOptions | None = None, **overrides: object) -> None:
        base = options if options is not None else GeneratorOptions()
        self.options = GeneratorOptions(**{**base.model_dump(), **overrides}) if overrides else base

    @property
    def guardfile(self) -> Path:
        """Absolute path of the Guardfile being generated."""
        return self.options.guardfile_path()

    def create_guardfile(self) -> None:
        """Copy the Guardfile template into place unless a Guardfile exists.

        Raises:
            GuardfileExistsError: If the Guardfile exists and
                ``abort_on_existence`` is set.
        """
        path = self.guardfile
        if path.exists():
            if self.options.abort_on_existence:
                ui.error(f"Guardfile already exists at {path}")
                self.abort()
            return

        ui.info(f"Writing new Guardfile to {path}")
        shutil.copyfile(GUARDFILE_TEMPLATE, path)

    def abort(self) -> None:
        """Stop generation.

        Raises:
            GuardfileExistsError: Always, carrying the Guardfile path.
        """
        raise GuardfileExistsError(self.guardfile)

    def initialize_template(self, plugin_name: str) -> None:
        """Add the block for *plugin_name* to the Guardfile.

        An installed plugin class registers itself; otherwise the user
        template ``<home templates>/<plugin_name>`` is appended. When
        neither exists an error is reported and nothing is written.
        """
        plugin_util = PluginUtil(plugin_name)
        if plugin_util.plugin_class(fail_gracefully=True):
            try:
                plugin_util.add_to_guardfile(self.guardfile)
            except Exception as exc:
                ui.error(f"Plugin '{plugin_name}' raised an exception: {exc}")
            return

        templates = self.options.home_templates_path()
        template = templates / plugin_name.lstrip("/\\")
        # Names may not reach outside the templates directory
        inside = template.resolve().is_relative_to(templates.resolve())
        if inside and template.is_file():
            append_template(self.guardfile, template.read_text(encoding="utf-8"))
            ui.info(f"{plugin_name} template added to Guardfile, feel free to edit it")
            return

        name = plugin_name.lower()
        const_name = name.replace("-", "").capitalize()
        ui.error(
            f"Could not load 'guard/{name}' or '~/.guard/templates/{name}'"
            f" or find class Guard::{const_name}"
        )

    def initialize_all_templates(self) -> None:
        """Run :meth:`initialize_template` for every installed plugin."""
        for plugin_name in PluginUtil.plugin_names():
            self.initialize_template(plugin_name)
