"""Environment stores: named variables plus the executable search path.

The reconciler never touches ``os.environ`` directly.  It is handed an
``EnvironmentStore`` so the same logic can mutate the live process
(``ProcessEnvironmentStore``) or a detached snapshot whose final state is
rendered as shell statements (``MemoryEnvironmentStore``).
"""

from __future__ import annotations

import os
from collections.abc import Mapping, MutableMapping
from typing import Protocol, runtime_checkable

PATH_VAR = "PATH"


@runtime_checkable
class EnvironmentStore(Protocol):
    """Named variables and an ordered, duplicate-free search path."""

    def get(self, name: str) -> str | None: ...

    def set(self, name: str, value: str) -> None: ...

    def unset(self, name: str) -> None: ...

    def search_path(self) -> list[str]: ...

    def add_path(self, entry: str) -> bool: ...

    def remove_path(self, entry: str) -> bool: ...


class MappingEnvironmentStore:
    """``EnvironmentStore`` over a mutable mapping of variables.

    The search path is kept in the mapping's ``PATH`` entry, split on
    ``os.pathsep``.  Added entries go to the front so the selected runtime
    shadows any system Ruby.
    """

    def __init__(self, environ: MutableMapping[str, str], pathsep: str = os.pathsep):
        self._environ = environ
        self._pathsep = pathsep

    def get(self, name: str) -> str | None:
        value = self._environ.get(name)
        return value or None

    def set(self, name: str, value: str) -> None:
        self._environ[name] = value

    def unset(self, name: str) -> None:
        self._environ.pop(name, None)

    def search_path(self) -> list[str]:
        raw = self._environ.get(PATH_VAR, "")
        return [entry for entry in raw.split(self._pathsep) if entry]

    def _write_path(self, entries: list[str]) -> None:
        self._environ[PATH_VAR] = self._pathsep.join(entries)

    def add_path(self, entry: str) -> bool:
        """Put *entry* at the head of the search path unless already present."""
        entries = self.search_path()
        if entry in entries:
            return False
        self._write_path([entry, *entries])
        return True

    def remove_path(self, entry: str) -> bool:
        """Remove the first occurrence of *entry*; absent entries are ignored."""
        entries = self.search_path()
        if entry not in entries:
            return False
        entries.remove(entry)
        self._write_path(entries)
        return True

    def snapshot(self) -> dict[str, str]:
        """Return a detached copy of every variable."""
        return dict(self._environ)


class ProcessEnvironmentStore(MappingEnvironmentStore):
    """Store bound to the live ``os.environ`` of this process."""

    def __init__(self) -> None:
        super().__init__(os.environ)


class MemoryEnvironmentStore(MappingEnvironmentStore):
    """Store over a private copy of *initial*; the source is never mutated."""

    def __init__(self, initial: Mapping[str, str] | None = None, pathsep: str = os.pathsep):
        super().__init__(dict(initial or {}), pathsep=pathsep)
