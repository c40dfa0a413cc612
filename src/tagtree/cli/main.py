"""CLI entry point for tagtree.

Invoked as::

    tagtree [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m tagtree.cli.main

Commands
--------
render          Render a YAML or JSON tree description to HTML
dump            Load a tree description and print it in normalized form
void-elements   List the elements rendered without an end tag
version         Show version information
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click
import yaml
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

_FORMATS = ("yaml", "json")


def _read_source(path: str) -> str:
    """Read a tree description file, exiting on error."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _detect_format(path: str, fmt: str | None) -> str:
    """Return ``fmt`` or guess it from the file extension (YAML by default)."""
    if fmt is not None:
        return fmt
    return "json" if Path(path).suffix.lower() == ".json" else "yaml"


def _load_or_exit(source: str, path: str, fmt: str) -> Any:
    """Load a node tree, printing errors and exiting on failure."""
    from tagtree.errors import TreeFormatError
    from tagtree.serializer import TreeSerializer

    serializer = TreeSerializer()
    try:
        if fmt == "json":
            return serializer.from_json(source)
        return serializer.from_yaml(source)
    except json.JSONDecodeError as exc:
        err_console.print(f"[red]JSON error[/red] in {path}: {exc}")
        sys.exit(1)
    except yaml.YAMLError as exc:
        err_console.print(f"[red]YAML error[/red] in {path}: {exc}")
        sys.exit(1)
    except TreeFormatError as exc:
        err_console.print(f"[red]Invalid tree[/red] in {path}: {exc}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="tagtree")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Build HTML from node trees and render it to bytes."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from tagtree import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]tagtree[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# void-elements command
# ---------------------------------------------------------------------------


@cli.command(name="void-elements")
def void_elements_command() -> None:
    """List the elements rendered without content or end tag."""
    from tagtree.html import ELEMENTS
    from tagtree.nodes import VOID_ELEMENTS

    table = Table(title="Void elements")
    table.add_column("Tag", style="bold")
    table.add_column("Helper")
    for name in sorted(VOID_ELEMENTS):
        helper = ELEMENTS.get(name)
        table.add_row(name, f"tagtree.html.{helper.__name__}" if helper else "[dim]el()[/dim]")
    console.print(table)


# ---------------------------------------------------------------------------
# render command
# ---------------------------------------------------------------------------


@cli.command(name="render")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--format",
    "fmt",
    type=click.Choice(_FORMATS),
    default=None,
    help="Input format (default: from the file extension, else yaml)",
)
@click.option("--output", "-o", type=click.Path(), default=None, help="Write HTML here instead of stdout")
def render_command(file: str, fmt: str | None, output: str | None) -> None:
    """Render a tree description to HTML.

    FILE is the path to a YAML or JSON tree description.
    """
    from tagtree.errors import ConstructionError

    source = _read_source(file)
    tree = _load_or_exit(source, file, _detect_format(file, fmt))
    if tree is None:
        err_console.print(f"[red]Error:[/red] {file} describes no node")
        sys.exit(1)

    try:
        if output is None:
            tree.render(sys.stdout.buffer)
            sys.stdout.buffer.flush()
        else:
            with open(output, "wb") as sink:
                tree.render(sink)
            console.print(f"[green]Rendered[/green] {file} -> {output}")
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot write output: {exc}")
        sys.exit(1)
    except ConstructionError as exc:
        err_console.print(f"[red]Cannot render[/red] {file}: {exc}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# dump command
# ---------------------------------------------------------------------------


@cli.command(name="dump")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--format",
    "fmt",
    type=click.Choice(_FORMATS),
    default=None,
    help="Input format (default: from the file extension, else yaml)",
)
@click.option(
    "--to",
    "to_fmt",
    type=click.Choice(_FORMATS),
    default="yaml",
    show_default=True,
    help="Output format",
)
def dump_command(file: str, fmt: str | None, to_fmt: str) -> None:
    """Print a tree description in normalized form.

    Shorthand entries (bare strings) are expanded to full node mappings.
    """
    from tagtree.serializer import TreeSerializer

    source = _read_source(file)
    tree = _load_or_exit(source, file, _detect_format(file, fmt))
    serializer = TreeSerializer()
    if to_fmt == "json":
        text = serializer.to_json(tree)
    else:
        text = serializer.to_yaml(tree)
    console.print(Syntax(text, to_fmt))


if __name__ == "__main__":
    cli()
