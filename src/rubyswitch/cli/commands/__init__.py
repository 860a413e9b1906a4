"""CLI command modules for rubyswitch."""

from rubyswitch.cli.commands.doctor import doctor
from rubyswitch.cli.commands.env import env, reset
from rubyswitch.cli.commands.hook import hook
from rubyswitch.cli.commands.inspect import current, list_rubies

__all__ = ["current", "doctor", "env", "hook", "list_rubies", "reset"]
