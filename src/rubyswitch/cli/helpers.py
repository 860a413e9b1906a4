"""Shared console, logging and option helpers for CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from rubyswitch.runtime.config import SwitchConfig
from rubyswitch.shell import SHELL_CHOICES

# stdout is reserved for shell statements; everything human-facing that
# may accompany them goes to stderr.
console = Console()
err_console = Console(stderr=True)

_HANDLER_NAME = "rubyswitch-cli"


def configure_logging(level: int = logging.INFO) -> None:
    """Route ``rubyswitch`` log records to stderr through rich."""
    logger = logging.getLogger("rubyswitch")
    logger.handlers = [h for h in logger.handlers if h.get_name() != _HANDLER_NAME]
    handler = RichHandler(
        console=err_console,
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.set_name(_HANDLER_NAME)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def set_log_level(level: int) -> None:
    logging.getLogger("rubyswitch").setLevel(level)


def check_shell(shell: str) -> str:
    if shell not in SHELL_CHOICES:
        err_console.print(
            f"[red]Unsupported shell:[/red] {shell} (choose from {', '.join(SHELL_CHOICES)})"
        )
        raise typer.Exit(2)
    return shell


def build_config(rubies_dir: Optional[Path], gem_base_dir: Optional[Path]) -> SwitchConfig:
    return SwitchConfig.from_environment(rubies_dir=rubies_dir, gem_base_dir=gem_base_dir)


def rubies_dir_option():
    return typer.Option(
        None,
        "--rubies-dir",
        help="Directory holding installed Rubies (default: $RUBYSWITCH_RUBIES_DIR or ~/.rubies)",
    )


def gem_base_dir_option():
    return typer.Option(
        None,
        "--gem-base-dir",
        help="Base directory for gem homes (default: $RUBYSWITCH_GEM_BASE or ~/.gem)",
    )


def shell_option():
    return typer.Option("bash", "--shell", "-s", help="Shell dialect: bash, zsh or fish")


def dir_option():
    return typer.Option(
        None,
        "--dir",
        "-d",
        help="Directory to resolve from (default: current directory)",
    )
