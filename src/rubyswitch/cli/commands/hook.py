"""``rubyswitch hook``: print the prompt hook for a shell.

Add one of these to the shell's startup file:
    eval "$(rubyswitch hook --shell bash)"
    eval "$(rubyswitch hook --shell zsh)"
    rubyswitch hook --shell fish | source
"""

from __future__ import annotations

import typer

from rubyswitch.cli.helpers import check_shell, shell_option
from rubyswitch.shell import hook_script


def hook(
    shell: str = shell_option(),
    program: str = typer.Option("rubyswitch", "--program", help="Command the hook invokes"),
) -> None:
    """Print a snippet that re-runs ``rubyswitch env`` before every prompt."""
    check_shell(shell)
    typer.echo(hook_script(shell, program=program), nl=False)
