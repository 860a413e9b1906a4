"""Configuration for runtime resolution.

Provides the canonical functions for locating:
- The directory holding installed Rubies (``~/.rubies`` by default)
- The base directory for per-runtime gem homes (``~/.gem`` by default)

Both are read at every invocation; nothing here is cached.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

VERSION_FILENAME = ".ruby-version"
RUBY_EXECUTABLE = Path("bin") / "ruby"

RUBIES_DIR_ENV = "RUBYSWITCH_RUBIES_DIR"
GEM_BASE_ENV = "RUBYSWITCH_GEM_BASE"

RUBY_ROOT_VAR = "RUBY_ROOT"
GEM_HOME_VAR = "GEM_HOME"

DEFAULT_PROBE_TIMEOUT = 5.0


def _is_windows() -> bool:
    """Return True when running on Windows."""
    return os.name == "nt"


def _absolute(path: Path) -> Path:
    return Path(path).expanduser().absolute()


def get_rubies_dir() -> Path:
    """Return the directory that holds installed Rubies.

    Resolution order:
    1. RUBYSWITCH_RUBIES_DIR environment variable (all platforms)
    2. ~/.rubies/ on macOS/Linux
    3. %LOCALAPPDATA%\\rubies\\ on Windows (via platformdirs)
    """
    if env_dir := os.environ.get(RUBIES_DIR_ENV):
        return _absolute(Path(env_dir))

    if _is_windows():
        from platformdirs import user_data_dir

        return Path(user_data_dir("rubies", appauthor=False))

    return Path.home() / ".rubies"


def get_gem_base_dir() -> Path:
    """Return the base directory under which gem homes are created.

    Resolution order:
    1. RUBYSWITCH_GEM_BASE environment variable
    2. ~/.gem/
    """
    if env_dir := os.environ.get(GEM_BASE_ENV):
        return _absolute(Path(env_dir))
    return Path.home() / ".gem"


@dataclass(frozen=True)
class SwitchConfig:
    """Explicit configuration threaded through one pipeline run."""

    rubies_dir: Path
    gem_base_dir: Path
    probe_timeout: float = DEFAULT_PROBE_TIMEOUT

    @classmethod
    def from_environment(
        cls,
        rubies_dir: Path | None = None,
        gem_base_dir: Path | None = None,
        probe_timeout: float = DEFAULT_PROBE_TIMEOUT,
    ) -> "SwitchConfig":
        """Build a config, filling unset values from the environment defaults."""
        return cls(
            rubies_dir=_absolute(rubies_dir) if rubies_dir is not None else get_rubies_dir(),
            gem_base_dir=(
                _absolute(gem_base_dir) if gem_base_dir is not None else get_gem_base_dir()
            ),
            probe_timeout=probe_timeout,
        )
