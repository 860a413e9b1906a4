"""Map a version identifier onto an installed Ruby directory."""

from __future__ import annotations

import os
from pathlib import Path

from rubyswitch.runtime.config import RUBY_EXECUTABLE
from rubyswitch.runtime.exceptions import (
    RuntimeExecutableMissing,
    RuntimeNotInstalled,
    RuntimeOutsideRoot,
)
from rubyswitch.runtime.filesystem import FileSystem, LocalFileSystem


def ruby_executable(runtime_dir: Path) -> Path:
    """Return the path of the ``ruby`` binary inside *runtime_dir*."""
    return runtime_dir / RUBY_EXECUTABLE


def validate_runtime(
    identifier: str,
    rubies_dir: Path,
    fs: FileSystem | None = None,
) -> Path:
    """Return ``rubies_dir/identifier`` once it is confirmed installed.

    The identifier must name a direct child of *rubies_dir*; absolute
    paths, separators and ``..`` components are rejected.

    Raises:
        RuntimeOutsideRoot: The identifier resolves outside *rubies_dir*.
        RuntimeNotInstalled: The candidate directory does not exist.
        RuntimeExecutableMissing: The directory exists but ``bin/ruby`` is
            absent or not executable.
    """
    fs = fs or LocalFileSystem()
    root = Path(os.path.normpath(rubies_dir))
    candidate = Path(os.path.normpath(root / identifier))
    if candidate.parent != root or candidate.name != identifier:
        raise RuntimeOutsideRoot(identifier, rubies_dir)
    if not fs.is_dir(candidate):
        raise RuntimeNotInstalled(identifier, rubies_dir)

    executable = ruby_executable(candidate)
    if not fs.is_executable(executable):
        raise RuntimeExecutableMissing(executable)
    return candidate
