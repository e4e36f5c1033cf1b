"""Main CLI entry point."""

import logging
from pathlib import Path
from typing import Optional

import rich.panel
import rich_click as click
from rich.console import Console
from rich.logging import RichHandler

from staticwire import __version__
from staticwire.compiler.codegen.generator import CompileOptions, component_to_html
from staticwire.compiler.exceptions import StaticWireError
from staticwire.compiler.loader import load_component
from staticwire.core.nodes import Component

console = Console()
err_console = Console(stderr=True)

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.STYLE_HELPTEXT_FIRST = True
click.rich_click.STYLE_COMMANDS_TABLE_SHOW_LINES = False
click.rich_click.STYLE_COMMANDS_TABLE_PAD_EDGE = False
click.rich_click.STYLE_COMMANDS_TABLE_BOX = None
click.rich_click.STYLE_OPTIONS_TABLE_EXPAND = False
click.rich_click.STYLE_COMMANDS_TABLE_HEADER = "bold magenta"
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = "Try running 'staticwire --help' for more information."
click.rich_click.STYLE_OPTIONS_TABLE_BOX = None
click.rich_click.STYLE_COMMANDS_PANEL_BOX = None
click.rich_click.STYLE_OPTIONS_PANEL_BOX = None

# Cyan theme
click.rich_click.STYLE_HEADER_TEXT = "bold cyan"
click.rich_click.STYLE_OPTION = "cyan"
click.rich_click.STYLE_SWITCH = "cyan"
click.rich_click.STYLE_METAVAR = "dim white"
click.rich_click.STYLE_USAGE_COMMAND = "cyan"
click.rich_click.STYLE_USAGE = "dim"

click.rich_click.COMMAND_GROUPS = {
    "staticwire": [
        {
            "name": "Commands",
            "commands": ["compile", "preview"],
        }
    ]
}


# Workaround: rich-click wraps tables in Panels which default to expand=True.
# We monkeypatch Panel to default expand=False to allow natural resizing.
original_panel_init = rich.panel.Panel.__init__


def panel_init(self, *args, **kwargs):
    kwargs.setdefault("expand", False)
    original_panel_init(self, *args, **kwargs)


rich.panel.Panel.__init__ = panel_init  # type: ignore[method-assign]


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False, markup=False)],
    )


def _load(input_path: Path) -> Component:
    try:
        return load_component(input_path)
    except StaticWireError as e:
        raise click.ClickException(str(e))


@click.group(
    help=f"""
[bold white on cyan] staticwire [/] [bold cyan]v{__version__}[/] Compile components to framework-free HTML.

Run [bold cyan]staticwire compile COMPONENT[/] to write the compiled document.
Run [bold cyan]staticwire preview COMPONENT[/] to serve it while you edit.

[dim]COMPONENT is a JSON component description.[/dim]
"""
)
@click.version_option(__version__)
def cli() -> None:
    pass


@cli.command("compile")
@click.argument("input_path", metavar="COMPONENT", type=click.Path(path_type=Path))
@click.option(
    "-o",
    "--output",
    default=None,
    type=click.Path(path_type=Path),
    help="Write the document here instead of stdout.",
)
@click.option("--no-format", is_flag=True, help="Skip the formatting pass.")
@click.option(
    "--deterministic-ids",
    is_flag=True,
    help="Number element identifiers instead of randomizing them.",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
def compile_command(
    input_path: Path,
    output: Optional[Path],
    no_format: bool,
    deterministic_ids: bool,
    verbose: bool,
) -> None:
    """Compile a component to a single HTML document."""
    configure_logging(verbose)

    component = _load(input_path)
    options = CompileOptions(format=not no_format, deterministic_ids=deterministic_ids)
    html = component_to_html(component, options)

    if output is None:
        click.echo(html)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    err_console.print(f"✅ Wrote [cyan]{output}[/]")


@cli.command()
@click.argument("input_path", metavar="COMPONENT", type=click.Path(path_type=Path))
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=3000, type=int, help="Port to bind to")
@click.option("--no-format", is_flag=True, help="Skip the formatting pass.")
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
def preview(
    input_path: Path, host: str, port: int, no_format: bool, verbose: bool
) -> None:
    """Serve the compiled component, recompiling on every request."""
    from staticwire.runtime.preview import run_preview_server

    configure_logging(verbose)

    if not input_path.exists():
        err_console.print(
            f"[bold yellow]Warning[/]: Component file '{input_path}' does not exist."
        )

    console.print(
        f"🚀 Previewing [cyan]{input_path}[/] on [link=http://{host}:{port}]http://{host}:{port}[/link]"
    )
    run_preview_server(input_path, host, port, CompileOptions(format=not no_format))


if __name__ == "__main__":
    cli()
