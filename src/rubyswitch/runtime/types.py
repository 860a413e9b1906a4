"""Value types shared by the resolution pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class SwitchStatus(str, Enum):
    """Terminal outcome of one pipeline run."""

    APPLIED = "applied"
    UNCHANGED = "unchanged"
    SKIPPED_REMOTE = "skipped_remote"
    VERSION_FILE_NOT_FOUND = "version_file_not_found"
    VERSION_FILE_UNREADABLE = "version_file_unreadable"
    RUNTIME_NOT_INSTALLED = "runtime_not_installed"
    RUNTIME_EXECUTABLE_MISSING = "runtime_executable_missing"
    IDENTITY_PROBE_MALFORMED = "identity_probe_malformed"

    @property
    def is_failure(self) -> bool:
        return self not in (
            SwitchStatus.APPLIED,
            SwitchStatus.UNCHANGED,
            SwitchStatus.SKIPPED_REMOTE,
        )


class ReconcileResult(str, Enum):
    APPLIED = "applied"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class RuntimeIdentity:
    """Self-reported engine name and version of an installed Ruby."""

    engine: str
    version: str

    def gem_home(self, gem_base_dir: Path) -> Path:
        """Return ``gem_base_dir/<engine>/<version>``."""
        return gem_base_dir / self.engine / self.version

    def __str__(self) -> str:
        return f"{self.engine} {self.version}"
