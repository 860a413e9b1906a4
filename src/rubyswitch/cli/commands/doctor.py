"""``rubyswitch doctor``: diagnose why a directory does not switch."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from rubyswitch.cli.helpers import (
    build_config,
    console,
    dir_option,
    gem_base_dir_option,
    rubies_dir_option,
)
from rubyswitch.runtime.doctor import run_checks

_SEVERITY_STYLE = {"error": "red", "warning": "yellow", "info": "green"}


def doctor(
    directory: Optional[Path] = dir_option(),
    rubies_dir: Optional[Path] = rubies_dir_option(),
    gem_base_dir: Optional[Path] = gem_base_dir_option(),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
) -> None:
    """Check the rubies directory, version file, installation and probe."""
    start_dir = directory if directory is not None else Path.cwd()
    checks = run_checks(start_dir, build_config(rubies_dir, gem_base_dir))
    failed = any(not check.passed and check.severity == "error" for check in checks)

    if json_output:
        typer.echo(json.dumps([check.to_dict() for check in checks], indent=2))
    else:
        table = Table(title="rubyswitch doctor", show_header=True)
        table.add_column("Check", style="cyan")
        table.add_column("Status")
        table.add_column("Detail")
        for check in checks:
            style = "green" if check.passed else _SEVERITY_STYLE.get(check.severity, "white")
            status = "ok" if check.passed else check.severity
            table.add_row(check.name, f"[{style}]{status}[/{style}]", check.message)
        console.print(table)

    if failed:
        raise typer.Exit(1)
