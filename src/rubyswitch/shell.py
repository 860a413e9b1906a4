"""Render environment changes as shell statements.

A child process cannot change its parent shell's environment, so the
CLI runs the pipeline against a ``MemoryEnvironmentStore`` snapshot and
prints the difference for the shell to ``eval``.
"""

from __future__ import annotations

import os
import shlex
from collections.abc import Mapping

from rubyswitch.runtime.config import GEM_HOME_VAR, RUBY_ROOT_VAR
from rubyswitch.runtime.environment import PATH_VAR

SHELL_CHOICES = ("bash", "zsh", "fish")

TRACKED_VARS: tuple[str, ...] = (RUBY_ROOT_VAR, GEM_HOME_VAR, PATH_VAR)


def _fish_quote(value: str) -> str:
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def _export(shell: str, name: str, value: str) -> str:
    if shell == "fish":
        if name == PATH_VAR:
            entries = [entry for entry in value.split(os.pathsep) if entry]
            return f"set -gx {name} " + " ".join(_fish_quote(entry) for entry in entries)
        return f"set -gx {name} {_fish_quote(value)}"
    return f"export {name}={shlex.quote(value)}"


def _unset(shell: str, name: str) -> str:
    if shell == "fish":
        return f"set -e {name}"
    return f"unset {name}"


def render_changes(
    before: Mapping[str, str],
    after: Mapping[str, str],
    shell: str = "bash",
) -> list[str]:
    """Return the statements turning *before* into *after* for tracked vars."""
    if shell not in SHELL_CHOICES:
        raise ValueError(f"Unsupported shell: {shell!r} (expected one of {', '.join(SHELL_CHOICES)})")

    lines = []
    for name in TRACKED_VARS:
        old = before.get(name)
        new = after.get(name)
        if old == new:
            continue
        if new is None:
            lines.append(_unset(shell, name))
        else:
            lines.append(_export(shell, name, new))
    return lines


_POSIX_HOOK = """\
_rubyswitch_hook() {{
  eval "$({program} env --hook --shell {shell})"
}}
{install}
"""

_BASH_INSTALL = """\
case ";${PROMPT_COMMAND:-};" in
  *";_rubyswitch_hook;"*) ;;
  *) PROMPT_COMMAND="_rubyswitch_hook${PROMPT_COMMAND:+;$PROMPT_COMMAND}" ;;
esac"""

_ZSH_INSTALL = """\
autoload -Uz add-zsh-hook
add-zsh-hook precmd _rubyswitch_hook"""

_FISH_HOOK = """\
function _rubyswitch_hook --on-event fish_prompt
  {program} env --hook --shell fish | source
end
"""


def hook_script(shell: str, program: str = "rubyswitch") -> str:
    """Return the snippet that re-runs ``env`` before every prompt."""
    if shell == "fish":
        return _FISH_HOOK.format(program=program)
    if shell == "bash":
        return _POSIX_HOOK.format(program=program, shell=shell, install=_BASH_INSTALL)
    if shell == "zsh":
        return _POSIX_HOOK.format(program=program, shell=shell, install=_ZSH_INSTALL)
    raise ValueError(f"Unsupported shell: {shell!r} (expected one of {', '.join(SHELL_CHOICES)})")
