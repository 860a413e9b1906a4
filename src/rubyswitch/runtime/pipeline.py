"""End-to-end switch: remote check, locate, validate, probe, reconcile.

``switch()`` is the boundary for resolution errors.  Each stage raises a
typed ``RubySwitchError``; ``switch()`` logs its one-line diagnostic and
returns a ``SwitchResult`` carrying the matching status.  Nothing raised
by a stage escapes to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from rubyswitch.runtime.config import SwitchConfig
from rubyswitch.runtime.environment import EnvironmentStore, ProcessEnvironmentStore
from rubyswitch.runtime.exceptions import RubySwitchError
from rubyswitch.runtime.filesystem import FileSystem, LocalFileSystem
from rubyswitch.runtime.locator import locate_version
from rubyswitch.runtime.prober import RuntimeProbe, SubprocessProbe
from rubyswitch.runtime.reconciler import ENVIRONMENT_LOCK, reconcile
from rubyswitch.runtime.remote import is_remote_path, is_remote_syntax
from rubyswitch.runtime.types import ReconcileResult, RuntimeIdentity, SwitchStatus
from rubyswitch.runtime.validator import ruby_executable, validate_runtime

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SwitchResult:
    """Outcome of one pipeline run, with whatever was resolved on the way."""

    status: SwitchStatus
    identifier: str | None = None
    runtime_dir: Path | None = None
    identity: RuntimeIdentity | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return not self.status.is_failure


def _resolve(
    start_dir: Path,
    config: SwitchConfig,
    fs: FileSystem,
    probe: RuntimeProbe,
) -> tuple[str, Path, RuntimeIdentity]:
    identifier = locate_version(start_dir, fs)
    runtime_dir = validate_runtime(identifier, config.rubies_dir, fs)
    identity = probe.identify(ruby_executable(runtime_dir))
    return identifier, runtime_dir, identity


def switch(
    start_dir: str | Path,
    store: EnvironmentStore | None = None,
    config: SwitchConfig | None = None,
    *,
    fs: FileSystem | None = None,
    probe: RuntimeProbe | None = None,
    mounts: list[tuple[str, str]] | None = None,
) -> SwitchResult:
    """Switch *store* to the Ruby declared for *start_dir*.

    Args:
        start_dir: Directory to start the ``.ruby-version`` search from.
        store: Environment to reconcile; the live process by default.
        config: Rubies root and gem base; environment defaults when omitted.
        fs: File-system capability (local by default).
        probe: Identity probe (subprocess-based by default).
        mounts: Mount table override for remote detection.

    Returns:
        SwitchResult describing the terminal status.
    """
    if not is_remote_syntax(start_dir):
        start_dir = Path(start_dir).absolute()
    if is_remote_path(start_dir, mounts):
        logger.debug("Skipping remote directory %s", start_dir)
        return SwitchResult(status=SwitchStatus.SKIPPED_REMOTE)

    config = config or SwitchConfig.from_environment()
    store = store if store is not None else ProcessEnvironmentStore()
    fs = fs or LocalFileSystem()
    probe = probe or SubprocessProbe(timeout=config.probe_timeout)

    with ENVIRONMENT_LOCK:
        try:
            identifier, runtime_dir, identity = _resolve(start_dir, config, fs, probe)
        except RubySwitchError as exc:
            logger.warning("%s", exc)
            return SwitchResult(status=exc.status, message=str(exc))

        outcome = reconcile(store, runtime_dir, identity, config.gem_base_dir)

    status = SwitchStatus.APPLIED if outcome is ReconcileResult.APPLIED else SwitchStatus.UNCHANGED
    return SwitchResult(
        status=status,
        identifier=identifier,
        runtime_dir=runtime_dir,
        identity=identity,
    )
