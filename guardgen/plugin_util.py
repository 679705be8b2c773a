"""Plugin registry — lists installed plugins and resolves names to classes."""

from __future__ import annotations

from importlib import metadata
from pathlib import Path

from guardgen import ui
from guardgen.errors import PluginLoadError, PluginNotFoundError
from guardgen.plugins.base import Plugin

ENTRY_POINT_GROUP = "guardgen.plugins"

# Plugin registry: maps built-in plugin names to their classes.
# Populated on first use by _register_builtins().
_PLUGIN_REGISTRY: dict[str, type[Plugin]] = {}


def _register_builtins() -> None:
    """Lazily import and register all built-in plugins."""
    if _PLUGIN_REGISTRY:
        return

    from guardgen.plugins.pytest_watch import Pytest
    from guardgen.plugins.shell import Shell

    _PLUGIN_REGISTRY.update(
        {
            Pytest.name: Pytest,
            Shell.name: Shell,
        }
    )


def get_registry() -> dict[str, type[Plugin]]:
    """Return the built-in plugin registry, initialising if needed."""
    _register_builtins()
    return _PLUGIN_REGISTRY


def _entry_points() -> list[metadata.EntryPoint]:
    return list(metadata.entry_points(group=ENTRY_POINT_GROUP))


def _normalize(name: str) -> str:
    return name.lower().replace("-", "_")


class PluginUtil:
    """Resolve a plugin name to an installed plugin class."""

    def __init__(self, name: str) -> None:
        self.name = name

    @staticmethod
    def plugin_names() -> list[str]:
        """Return built-in plugin names followed by entry-point plugins."""
        names = sorted(get_registry())
        seen = {_normalize(n) for n in names}
        for ep in _entry_points():
            key = _normalize(ep.name)
            if key not in seen:
                seen.add(key)
                names.append(ep.name)
        return names

    def plugin_class(self, fail_gracefully: bool = True) -> type[Plugin] | None:
        """Return the plugin class for this name, or None if not installed.

        Built-ins win over entry points of the same name. Lookup ignores
        case and treats ``-`` and ``_`` alike.

        Raises:
            PluginLoadError: If an entry point matches but cannot be loaded
                and *fail_gracefully* is False.
        """
        key = _normalize(self.name)
        for name, klass in get_registry().items():
            if _normalize(name) == key:
                return klass

        for ep in _entry_points():
            if _normalize(ep.name) != key:
                continue
            try:
                klass = ep.load()
                if not callable(getattr(klass, "add_to_guardfile", None)):
                    raise TypeError(f"{ep.value} does not provide add_to_guardfile()")
            except Exception as exc:
                err = PluginLoadError(self.name, exc)
                if not fail_gracefully:
                    raise err from exc
                ui.error(str(err))
                return None
            return klass

        return None

    def add_to_guardfile(self, guardfile: Path) -> bool:
        """Let the plugin class register itself into *guardfile*.

        Raises:
            PluginNotFoundError: If no plugin class matches this name.
        """
        klass = self.plugin_class(fail_gracefully=False)
        if klass is None:
            raise PluginNotFoundError(self.name)
        return klass.add_to_guardfile(guardfile)
