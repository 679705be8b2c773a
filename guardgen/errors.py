"""Exceptions raised by guardgen."""

from __future__ import annotations

from pathlib import Path


class GuardgenError(Exception):
    """Base exception for all guardgen errors."""


class GuardfileExistsError(GuardgenError):
    """Guardfile generation was aborted because the target already exists."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Guardfile already exists at {self.path}")


class PluginLoadError(GuardgenError):
    """A plugin entry point could not be imported."""

    def __init__(self, name: str, cause: Exception) -> None:
        self.name = name
        self.cause = cause
        super().__init__(f"Could not load plugin '{name}': {cause}")


class PluginNotFoundError(GuardgenError):
    """No installed plugin class matches the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Plugin '{name}' is not installed")
