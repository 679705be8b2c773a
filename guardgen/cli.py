"""guardgen CLI — Typer entry point with Rich formatting."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from guardgen.config import DEFAULT_CONFIG, GeneratorOptions, load_options
from guardgen.errors import GuardfileExistsError
from guardgen.generator import GuardfileGenerator
from guardgen.guardfile import includes_guard
from guardgen.plugin_util import PluginUtil

app = typer.Typer(
    name="guardgen",
    help="guardgen — Generate a Guardfile and add plugin templates to it.",
    no_args_is_help=True,
)
console = Console()

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help=f"Path to options file (default: {DEFAULT_CONFIG})"),
]
GuardfileOption = Annotated[
    Path | None,
    typer.Option("--guardfile", "-G", help="Path to the Guardfile"),
]


def _load(config: Path | None, guardfile: Path | None) -> GeneratorOptions:
    """Load options from *config* (or the default file if present)."""
    if config is not None:
        options = load_options(config)
    elif Path(DEFAULT_CONFIG).exists():
        options = load_options(DEFAULT_CONFIG)
    else:
        options = GeneratorOptions()

    if guardfile is not None:
        options = options.model_copy(update={"guardfile": str(guardfile)})
    return options


@app.command()
def init(
    plugins: Annotated[
        list[str] | None,
        typer.Argument(help="Plugins to add (default: all installed plugins)"),
    ] = None,
    bare: Annotated[
        bool, typer.Option("--bare", "-b", help="Generate a bare Guardfile without plugins")
    ] = False,
    abort_on_existence: Annotated[
        bool,
        typer.Option("--abort-on-existence", help="Fail if the Guardfile already exists"),
    ] = False,
    config: ConfigOption = None,
    guardfile: GuardfileOption = None,
) -> None:
    """Create a Guardfile and add plugin templates to it."""
    options = _load(config, guardfile)
    if bare or abort_on_existence:
        options = options.model_copy(update={"abort_on_existence": True})

    generator = GuardfileGenerator(options)
    try:
        generator.create_guardfile()
    except GuardfileExistsError as exc:
        raise typer.Exit(code=1) from exc

    if bare:
        return

    if plugins:
        for name in plugins:
            generator.initialize_template(name)
    else:
        generator.initialize_all_templates()


@app.command(name="list")
def list_plugins(
    config: ConfigOption = None,
    guardfile: GuardfileOption = None,
) -> None:
    """List installed plugins and whether the Guardfile uses them."""
    options = _load(config, guardfile)
    path = options.guardfile_path()
    content = path.read_text(encoding="utf-8") if path.exists() else ""

    table = Table(title="Available Guard plugins")
    table.add_column("Plugin", style="magenta")
    table.add_column("In Guardfile")

    for name in PluginUtil.plugin_names():
        used = includes_guard(content, name)
        table.add_row(name, "[green]yes[/green]" if used else "[dim]no[/dim]")

    console.print(table)
