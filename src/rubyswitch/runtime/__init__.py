"""Ruby runtime resolution and environment switching.

This subpackage locates the ``.ruby-version`` declaration for a
directory, validates and probes the matching installed Ruby, and points
an environment store at it.
"""

from rubyswitch.runtime.config import SwitchConfig, get_gem_base_dir, get_rubies_dir
from rubyswitch.runtime.environment import (
    EnvironmentStore,
    MemoryEnvironmentStore,
    ProcessEnvironmentStore,
)
from rubyswitch.runtime.exceptions import (
    IdentityProbeMalformed,
    RubySwitchError,
    RuntimeExecutableMissing,
    RuntimeNotInstalled,
    RuntimeOutsideRoot,
    VersionFileNotFound,
    VersionFileUnreadable,
)
from rubyswitch.runtime.locator import locate_version, normalize_version
from rubyswitch.runtime.pipeline import SwitchResult, switch
from rubyswitch.runtime.prober import RuntimeProbe, SubprocessProbe
from rubyswitch.runtime.reconciler import reconcile, reset
from rubyswitch.runtime.types import ReconcileResult, RuntimeIdentity, SwitchStatus
from rubyswitch.runtime.validator import validate_runtime

__all__ = [
    "EnvironmentStore",
    "IdentityProbeMalformed",
    "MemoryEnvironmentStore",
    "ProcessEnvironmentStore",
    "ReconcileResult",
    "RubySwitchError",
    "RuntimeExecutableMissing",
    "RuntimeIdentity",
    "RuntimeNotInstalled",
    "RuntimeOutsideRoot",
    "RuntimeProbe",
    "SubprocessProbe",
    "SwitchConfig",
    "SwitchResult",
    "SwitchStatus",
    "VersionFileNotFound",
    "VersionFileUnreadable",
    "get_gem_base_dir",
    "get_rubies_dir",
    "locate_version",
    "normalize_version",
    "reconcile",
    "reset",
    "switch",
    "validate_runtime",
]
