"""Ask an installed Ruby for its canonical identity.

The requested identifier and the runtime's own report can differ (an
alias directory such as ``ruby-3.2`` reports ``ruby 3.2.1``), so the gem
home is always derived from what the interpreter says about itself.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol, runtime_checkable

from rubyswitch.runtime.config import DEFAULT_PROBE_TIMEOUT
from rubyswitch.runtime.exceptions import IdentityProbeMalformed
from rubyswitch.runtime.types import RuntimeIdentity

logger = logging.getLogger(__name__)

IDENTITY_SCRIPT = 'print "#{RUBY_ENGINE} #{RUBY_VERSION}"'


@runtime_checkable
class RuntimeProbe(Protocol):
    """Capability that reports the engine and version of a Ruby binary."""

    def identify(self, executable: Path) -> RuntimeIdentity: ...


def parse_identity(executable: Path, output: str) -> RuntimeIdentity:
    """Parse ``"<engine> <version>"`` output into a ``RuntimeIdentity``.

    Raises:
        IdentityProbeMalformed: If the output is not exactly two tokens.
    """
    tokens = output.strip().split()
    if len(tokens) != 2:
        raise IdentityProbeMalformed(executable, output, f"got {len(tokens)} token(s)")
    engine, version = tokens
    return RuntimeIdentity(engine=engine, version=version)


class SubprocessProbe:
    """``RuntimeProbe`` that runs the interpreter with ``-e``."""

    def __init__(self, timeout: float = DEFAULT_PROBE_TIMEOUT):
        self.timeout = timeout

    def identify(self, executable: Path) -> RuntimeIdentity:
        logger.debug("Probing %s", executable)
        try:
            result = subprocess.run(
                [str(executable), "-e", IDENTITY_SCRIPT],
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as exc:
            output = exc.stdout if isinstance(exc.stdout, str) else ""
            raise IdentityProbeMalformed(
                executable, output, f"timed out after {self.timeout:g}s"
            ) from exc
        except OSError as exc:
            raise IdentityProbeMalformed(executable, "", str(exc)) from exc

        if result.returncode != 0:
            stderr = result.stderr.strip()
            raise IdentityProbeMalformed(
                executable,
                result.stdout,
                f"exit status {result.returncode}" + (f": {stderr}" if stderr else ""),
            )
        return parse_identity(executable, result.stdout)
