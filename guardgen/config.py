"""Generator options — loads and validates .guardgen.yaml with Pydantic."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, field_validator

DEFAULT_CONFIG = ".guardgen.yaml"


class GeneratorOptions(BaseModel):
    """Options controlling Guardfile generation."""

    abort_on_existence: bool = False
    guardfile: str = "Guardfile"
    home_templates: str = "~/.guard/templates"

    @field_validator("guardfile", "home_templates")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("path must not be empty")
        return v

    def guardfile_path(self) -> Path:
        """Return the Guardfile path, anchored at the current directory."""
        return Path(self.guardfile).expanduser().absolute()

    def home_templates_path(self) -> Path:
        """Return the expanded user template directory."""
        return Path(self.home_templates).expanduser()


def load_options(path: Path | str = DEFAULT_CONFIG) -> GeneratorOptions:
    """Load and validate a generator options file.

    Args:
        path: Path to the YAML options file.

    Returns:
        A validated GeneratorOptions instance.

    Raises:
        FileNotFoundError: If the options file does not exist.
        ValueError: If the options file contains invalid configuration.
    """
    options_path = Path(path)
    if not options_path.exists():
        raise FileNotFoundError(f"Options file not found: {options_path}")

    data = yaml.safe_load(options_path.read_text(encoding="utf-8"))

    if data is None:
        raise ValueError(f"Options file is empty: {options_path}")
    if not isinstance(data, dict):
        raise ValueError(f"Options file must contain a YAML mapping: {options_path}")

    return GeneratorOptions(**data)
