"""Detect working directories on remote or virtualized file systems.

The pipeline declines to run in such directories: probing a runtime
through a network mount is slow, and a path reported by an editor for a
remote buffer does not exist locally at all.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path, PurePosixPath

logger = logging.getLogger(__name__)

MOUNT_TABLE = Path("/proc/self/mounts")

REMOTE_FS_TYPES: frozenset[str] = frozenset(
    {
        "nfs",
        "nfs4",
        "cifs",
        "smbfs",
        "smb3",
        "sshfs",
        "fuse.sshfs",
        "9p",
        "afs",
        "davfs",
        "fuse.rclone",
    }
)

_URL_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")
# TRAMP-style: /ssh:host:/path, /docker:container:/path
_TRAMP_RE = re.compile(r"^/[A-Za-z0-9_-]+:[^/:]*:")


def parse_mount_table(text: str) -> list[tuple[str, str]]:
    """Parse ``/proc/mounts`` content into ``(mount_point, fs_type)`` pairs."""
    mounts: list[tuple[str, str]] = []
    for line in text.splitlines():
        fields = line.split()
        if len(fields) < 3:
            continue
        # Spaces in mount points are escaped as \040
        mount_point = fields[1].replace("\\040", " ")
        mounts.append((mount_point, fields[2]))
    return mounts


def read_mount_table(table: Path = MOUNT_TABLE) -> list[tuple[str, str]]:
    """Return the host mount table, or an empty list where none is readable."""
    try:
        return parse_mount_table(table.read_text(encoding="utf-8"))
    except OSError:
        return []


def _filesystem_type(path: str, mounts: list[tuple[str, str]]) -> str | None:
    """Return the type of the longest mount point containing *path*."""
    target = PurePosixPath(path)
    best: tuple[int, str] | None = None
    for mount_point, fs_type in mounts:
        mount = PurePosixPath(mount_point)
        if target == mount or mount in target.parents:
            depth = len(mount.parts)
            if best is None or depth > best[0]:
                best = (depth, fs_type)
    return best[1] if best else None


def is_remote_syntax(path: str | Path) -> bool:
    """Return True when *path* is a URL or a TRAMP-style remote name."""
    text = str(path)
    return bool(_URL_RE.match(text) or _TRAMP_RE.match(text))


def is_remote_path(
    path: str | Path,
    mounts: list[tuple[str, str]] | None = None,
) -> bool:
    """Return True when *path* names a remote or virtualized location.

    Args:
        path: Working directory as reported by the caller.
        mounts: Mount table override; read from the host when omitted.
    """
    if is_remote_syntax(path):
        return True

    text = str(Path(path).absolute())

    if mounts is None:
        mounts = read_mount_table()
    fs_type = _filesystem_type(text, mounts)
    if fs_type in REMOTE_FS_TYPES:
        logger.debug("%s is on a %s mount", text, fs_type)
        return True
    return False
