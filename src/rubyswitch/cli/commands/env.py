"""``rubyswitch env`` and ``rubyswitch reset``: emit shell statements.

Usage:
    eval "$(rubyswitch env)"            # switch to the project's Ruby
    rubyswitch env --shell fish | source
    eval "$(rubyswitch reset)"          # drop the active Ruby

Both commands work on a snapshot of the current environment and print
only the variables that change, so an unchanged project prints nothing.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import typer

from rubyswitch.cli.helpers import (
    build_config,
    check_shell,
    dir_option,
    gem_base_dir_option,
    rubies_dir_option,
    set_log_level,
    shell_option,
)
from rubyswitch.runtime.environment import MemoryEnvironmentStore
from rubyswitch.runtime.pipeline import switch
from rubyswitch.runtime.reconciler import reset as reset_store
from rubyswitch.shell import render_changes


def env(
    shell: str = shell_option(),
    directory: Optional[Path] = dir_option(),
    rubies_dir: Optional[Path] = rubies_dir_option(),
    gem_base_dir: Optional[Path] = gem_base_dir_option(),
    hook: bool = typer.Option(
        False,
        "--hook",
        help="Prompt-hook mode: only report errors and always exit 0",
    ),
) -> None:
    """Print the statements that switch the shell to the project's Ruby."""
    check_shell(shell)
    if hook:
        set_log_level(logging.ERROR)

    before = dict(os.environ)
    store = MemoryEnvironmentStore(before)
    start_dir = directory if directory is not None else Path.cwd()
    result = switch(start_dir, store, build_config(rubies_dir, gem_base_dir))

    for line in render_changes(before, store.snapshot(), shell):
        typer.echo(line)

    if result.status.is_failure and not hook:
        raise typer.Exit(1)


def reset(shell: str = shell_option()) -> None:
    """Print the statements that remove the active Ruby from the shell."""
    check_shell(shell)
    before = dict(os.environ)
    store = MemoryEnvironmentStore(before)
    if not reset_store(store):
        logging.getLogger(__name__).info("No active Ruby to reset")
        return
    for line in render_changes(before, store.snapshot(), shell):
        typer.echo(line)
