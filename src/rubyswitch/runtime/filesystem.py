"""File-system capability used by the locator, validator and inventory.

Resolution code never touches ``pathlib`` predicates directly; it goes
through a ``FileSystem`` so tests can drive it with an in-memory tree.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Minimal read-only view of a file system."""

    def is_file(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...

    def is_executable(self, path: Path) -> bool: ...

    def read_text(self, path: Path) -> str: ...

    def list_dir(self, path: Path) -> list[Path]: ...


class LocalFileSystem:
    """``FileSystem`` backed by the host operating system."""

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def is_executable(self, path: Path) -> bool:
        return path.is_file() and os.access(path, os.X_OK)

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def list_dir(self, path: Path) -> list[Path]:
        if not path.is_dir():
            return []
        return sorted(path.iterdir())
