"""Apply a resolved runtime to an environment store.

The store's ``RUBY_ROOT`` and ``GEM_HOME`` variables are the only record
of what a previous switch added to the search path.  Reconciling compares
them against the newly resolved runtime and then does one of:

- nothing recorded: set both variables and add both ``bin`` entries;
- same runtime and gem home: leave everything untouched, say nothing;
- anything different: remove the old ``bin`` entries, then apply the new.

Calling ``reconcile`` repeatedly with the same runtime therefore never
grows the search path and never repeats the switch message.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from rubyswitch.runtime.config import GEM_HOME_VAR, RUBY_ROOT_VAR
from rubyswitch.runtime.environment import EnvironmentStore
from rubyswitch.runtime.types import ReconcileResult, RuntimeIdentity

logger = logging.getLogger(__name__)

# Guards the read-compare-mutate sequence on environment stores.
ENVIRONMENT_LOCK = threading.RLock()


def _bin_dir(root: str | Path) -> str:
    return str(Path(root) / "bin")


def _same_path(recorded: str | None, expected: Path) -> bool:
    return recorded is not None and Path(recorded) == expected


def reconcile(
    store: EnvironmentStore,
    runtime_dir: Path,
    identity: RuntimeIdentity,
    gem_base_dir: Path,
) -> ReconcileResult:
    """Point *store* at *runtime_dir* and its gem home.

    Args:
        store: Environment to read and mutate.
        runtime_dir: Validated Ruby installation directory.
        identity: Engine and version reported by the runtime.
        gem_base_dir: Base directory for per-runtime gem homes.

    Returns:
        ``ReconcileResult.UNCHANGED`` when the store already points at this
        runtime, ``ReconcileResult.APPLIED`` otherwise.
    """
    new_gem_home = identity.gem_home(gem_base_dir)

    with ENVIRONMENT_LOCK:
        old_root = store.get(RUBY_ROOT_VAR)
        old_gem_home = store.get(GEM_HOME_VAR)

        if old_root is not None:
            if _same_path(old_root, runtime_dir) and _same_path(old_gem_home, new_gem_home):
                return ReconcileResult.UNCHANGED
            store.remove_path(_bin_dir(old_root))
            if old_gem_home is not None:
                store.remove_path(_bin_dir(old_gem_home))

        store.set(RUBY_ROOT_VAR, str(runtime_dir))
        store.set(GEM_HOME_VAR, str(new_gem_home))
        store.add_path(_bin_dir(runtime_dir))
        store.add_path(_bin_dir(new_gem_home))

    logger.info("Switched to %s", runtime_dir)
    return ReconcileResult.APPLIED


def reset(store: EnvironmentStore) -> bool:
    """Undo the active switch recorded in *store*.

    Removes the recorded ``bin`` entries and unsets both variables.
    Returns False when no runtime was recorded.
    """
    with ENVIRONMENT_LOCK:
        old_root = store.get(RUBY_ROOT_VAR)
        if old_root is None:
            return False
        old_gem_home = store.get(GEM_HOME_VAR)

        store.remove_path(_bin_dir(old_root))
        if old_gem_home is not None:
            store.remove_path(_bin_dir(old_gem_home))
        store.unset(RUBY_ROOT_VAR)
        store.unset(GEM_HOME_VAR)

    logger.info("Reset %s", old_root)
    return True
