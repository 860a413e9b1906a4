"""Enumerate Rubies installed under the rubies root."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rubyswitch.runtime.filesystem import FileSystem, LocalFileSystem
from rubyswitch.runtime.validator import ruby_executable


@dataclass(frozen=True)
class InstalledRuby:
    name: str
    path: Path
    active: bool = False


def list_installed(
    rubies_dir: Path,
    active_root: str | None = None,
    fs: FileSystem | None = None,
) -> list[InstalledRuby]:
    """Return every ``rubies_dir/<name>`` with an executable ``bin/ruby``.

    Directories without a usable interpreter are skipped.  The entry whose
    path equals *active_root* is flagged ``active``.
    """
    fs = fs or LocalFileSystem()
    active = Path(active_root) if active_root else None
    rubies = []
    for entry in fs.list_dir(rubies_dir):
        if not fs.is_dir(entry) or not fs.is_executable(ruby_executable(entry)):
            continue
        rubies.append(InstalledRuby(name=entry.name, path=entry, active=entry == active))
    return sorted(rubies, key=lambda ruby: ruby.name)
