"""Health checks for ``rubyswitch doctor``.

Runs the resolution stages one by one without touching any environment
and reports each as a ``DoctorCheck``:
- Rubies root directory exists
- A ``.ruby-version`` is found from the working directory
- The declared Ruby is installed with an executable ``bin/ruby``
- The installed Ruby answers the identity probe
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path

from rubyswitch.runtime.config import SwitchConfig
from rubyswitch.runtime.exceptions import RubySwitchError
from rubyswitch.runtime.filesystem import FileSystem, LocalFileSystem
from rubyswitch.runtime.locator import find_version_file, locate_version
from rubyswitch.runtime.prober import RuntimeProbe, SubprocessProbe
from rubyswitch.runtime.validator import ruby_executable, validate_runtime


@dataclass
class DoctorCheck:
    """Result of a single doctor health check."""

    name: str
    passed: bool
    message: str
    severity: str  # "error", "warning", "info"

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


def check_rubies_dir(config: SwitchConfig, fs: FileSystem) -> DoctorCheck:
    if fs.is_dir(config.rubies_dir):
        return DoctorCheck("rubies_dir", True, f"{config.rubies_dir} exists", "info")
    return DoctorCheck(
        "rubies_dir",
        False,
        f"Missing rubies directory: {config.rubies_dir}",
        "error",
    )


def run_checks(
    start_dir: Path,
    config: SwitchConfig,
    fs: FileSystem | None = None,
    probe: RuntimeProbe | None = None,
) -> list[DoctorCheck]:
    """Run all checks; later stages are skipped once one fails."""
    start_dir = Path(start_dir).absolute()
    fs = fs or LocalFileSystem()
    probe = probe or SubprocessProbe(timeout=config.probe_timeout)
    checks = [check_rubies_dir(config, fs)]

    try:
        identifier = locate_version(start_dir, fs)
    except RubySwitchError as exc:
        checks.append(DoctorCheck("version_file", False, str(exc), "warning"))
        return checks
    checks.append(
        DoctorCheck(
            "version_file",
            True,
            f"{find_version_file(start_dir, fs)} declares {identifier}",
            "info",
        )
    )

    try:
        runtime_dir = validate_runtime(identifier, config.rubies_dir, fs)
    except RubySwitchError as exc:
        checks.append(DoctorCheck("runtime_installed", False, str(exc), "error"))
        return checks
    checks.append(DoctorCheck("runtime_installed", True, f"{runtime_dir} is installed", "info"))

    try:
        identity = probe.identify(ruby_executable(runtime_dir))
    except RubySwitchError as exc:
        checks.append(DoctorCheck("identity_probe", False, str(exc), "error"))
        return checks
    checks.append(
        DoctorCheck(
            "identity_probe",
            True,
            f"Reports {identity}; gem home {identity.gem_home(config.gem_base_dir)}",
            "info",
        )
    )
    return checks
