"""Locate and normalize the nearest ``.ruby-version`` declaration."""

from __future__ import annotations

import re
from pathlib import Path

from rubyswitch.runtime.config import VERSION_FILENAME
from rubyswitch.runtime.exceptions import VersionFileNotFound, VersionFileUnreadable
from rubyswitch.runtime.filesystem import FileSystem, LocalFileSystem

ENGINE_PREFIX = "ruby-"

_BARE_VERSION_RE = re.compile(r"^\d+\.\d+\.\d+$")


def normalize_version(content: str) -> str | None:
    """Normalize raw version-file content into an identifier.

    A bare ``MAJOR.MINOR.PATCH`` triple gets the ``ruby-`` prefix; any
    other content is returned trimmed.  Blank content yields None.
    """
    version = content.strip()
    if not version:
        return None
    if _BARE_VERSION_RE.match(version):
        return f"{ENGINE_PREFIX}{version}"
    return version


def find_version_file(
    start_dir: Path,
    fs: FileSystem | None = None,
    filename: str = VERSION_FILENAME,
) -> Path | None:
    """Return the nearest *filename* in *start_dir* or its ancestors."""
    fs = fs or LocalFileSystem()
    start_dir = Path(start_dir).absolute()
    for directory in (start_dir, *start_dir.parents):
        candidate = directory / filename
        if fs.is_file(candidate):
            return candidate
    return None


def locate_version(start_dir: Path, fs: FileSystem | None = None) -> str:
    """Return the version identifier declared for *start_dir*.

    Raises:
        VersionFileNotFound: If no ancestor holds a non-empty version file.
        VersionFileUnreadable: If the nearest version file cannot be read
            or is not valid UTF-8.
    """
    fs = fs or LocalFileSystem()
    start_dir = Path(start_dir).absolute()
    version_file = find_version_file(start_dir, fs)
    if version_file is None:
        raise VersionFileNotFound(VERSION_FILENAME, start_dir)

    try:
        content = fs.read_text(version_file)
    except UnicodeDecodeError as exc:
        raise VersionFileUnreadable(version_file, "not valid UTF-8") from exc
    except OSError as exc:
        raise VersionFileUnreadable(version_file, exc.strerror or str(exc)) from exc

    identifier = normalize_version(content)
    if identifier is None:
        raise VersionFileNotFound(VERSION_FILENAME, start_dir)
    return identifier
