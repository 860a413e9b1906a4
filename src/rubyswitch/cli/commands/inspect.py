"""``rubyswitch list`` and ``rubyswitch current``."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from rubyswitch.cli.helpers import (
    build_config,
    console,
    dir_option,
    rubies_dir_option,
)
from rubyswitch.runtime.config import GEM_HOME_VAR, RUBY_ROOT_VAR
from rubyswitch.runtime.exceptions import RubySwitchError
from rubyswitch.runtime.inventory import list_installed
from rubyswitch.runtime.locator import find_version_file, locate_version


def list_rubies(
    rubies_dir: Optional[Path] = rubies_dir_option(),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """List Rubies installed under the rubies directory."""
    config = build_config(rubies_dir, None)
    rubies = list_installed(config.rubies_dir, os.environ.get(RUBY_ROOT_VAR))

    if json_output:
        payload = [
            {"name": ruby.name, "path": str(ruby.path), "active": ruby.active}
            for ruby in rubies
        ]
        typer.echo(json.dumps(payload, indent=2))
        return

    if not rubies:
        console.print(f"[yellow]No Rubies installed under {config.rubies_dir}[/yellow]")
        return

    for ruby in rubies:
        marker = "[green] *[/green]" if ruby.active else "  "
        console.print(f"{marker} {ruby.name}", highlight=False)


def current(
    directory: Optional[Path] = dir_option(),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Show the active Ruby and the declaration found for a directory."""
    start_dir = directory if directory is not None else Path.cwd()
    version_file = find_version_file(start_dir)
    try:
        declared: str | None = locate_version(start_dir)
    except RubySwitchError:
        declared = None

    payload = {
        "ruby_root": os.environ.get(RUBY_ROOT_VAR) or None,
        "gem_home": os.environ.get(GEM_HOME_VAR) or None,
        "version_file": str(version_file) if version_file else None,
        "declared": declared,
    }

    if json_output:
        typer.echo(json.dumps(payload, indent=2))
        return

    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in payload.items():
        table.add_row(key, value if value is not None else "[dim]none[/dim]")
    console.print(table)
