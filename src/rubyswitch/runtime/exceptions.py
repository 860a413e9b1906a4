"""Exception hierarchy for runtime resolution failures.

Each error carries the ``SwitchStatus`` the pipeline reports when it
stops on that error.  ``str(exc)`` is the one-line diagnostic shown to
the user.
"""

from __future__ import annotations

from pathlib import Path

from rubyswitch.runtime.types import SwitchStatus


class RubySwitchError(Exception):
    """Base exception for resolution failures."""

    status: SwitchStatus


class VersionFileNotFound(RubySwitchError):
    status = SwitchStatus.VERSION_FILE_NOT_FOUND

    def __init__(self, filename: str, start_dir: Path):
        self.filename = filename
        self.start_dir = start_dir
        super().__init__(f"No {filename} found in {start_dir} or any parent directory")


class VersionFileUnreadable(RubySwitchError):
    status = SwitchStatus.VERSION_FILE_UNREADABLE

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


class RuntimeNotInstalled(RubySwitchError):
    status = SwitchStatus.RUNTIME_NOT_INSTALLED

    def __init__(self, identifier: str, rubies_dir: Path):
        self.identifier = identifier
        self.rubies_dir = rubies_dir
        super().__init__(f"Ruby '{identifier}' is not installed under {rubies_dir}")


class RuntimeOutsideRoot(RuntimeNotInstalled):
    """The identifier names a directory that is not a child of the rubies root."""

    def __init__(self, identifier: str, rubies_dir: Path):
        self.identifier = identifier
        self.rubies_dir = rubies_dir
        RubySwitchError.__init__(
            self, f"Ruby identifier '{identifier}' resolves outside {rubies_dir}"
        )


class RuntimeExecutableMissing(RubySwitchError):
    status = SwitchStatus.RUNTIME_EXECUTABLE_MISSING

    def __init__(self, executable: Path):
        self.executable = executable
        super().__init__(f"Expected executable not found or not executable: {executable}")


class IdentityProbeMalformed(RubySwitchError):
    """The runtime did not report exactly ``<engine> <version>``."""

    status = SwitchStatus.IDENTITY_PROBE_MALFORMED

    def __init__(self, executable: Path, output: str, reason: str | None = None):
        self.executable = executable
        self.output = output
        self.reason = reason
        detail = reason or "expected '<engine> <version>'"
        super().__init__(f"Unexpected identity output from {executable} ({detail}): {output!r}")
