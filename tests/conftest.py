from __future__ import annotations

import logging
import stat
from pathlib import Path
from typing import Callable, Iterator

import pytest

from rubyswitch.runtime.exceptions import IdentityProbeMalformed
from rubyswitch.runtime.prober import parse_identity
from rubyswitch.runtime.types import RuntimeIdentity


class FakeFileSystem:
    """In-memory ``FileSystem`` recording every path it is asked about."""

    def __init__(self) -> None:
        self.files: dict[Path, str] = {}
        self.dirs: set[Path] = set()
        self.executables: set[Path] = set()
        self.calls: list[tuple[str, Path]] = []

    def add_file(self, path: str | Path, content: str = "", executable: bool = False) -> Path:
        path = Path(path)
        self.files[path] = content
        self.dirs.update(path.parents)
        if executable:
            self.executables.add(path)
        return path

    def add_dir(self, path: str | Path) -> Path:
        path = Path(path)
        self.dirs.add(path)
        self.dirs.update(path.parents)
        return path

    def is_file(self, path: Path) -> bool:
        self.calls.append(("is_file", path))
        return path in self.files

    def is_dir(self, path: Path) -> bool:
        self.calls.append(("is_dir", path))
        return path in self.dirs

    def is_executable(self, path: Path) -> bool:
        self.calls.append(("is_executable", path))
        return path in self.executables

    def read_text(self, path: Path) -> str:
        self.calls.append(("read_text", path))
        return self.files[path]

    def list_dir(self, path: Path) -> list[Path]:
        self.calls.append(("list_dir", path))
        children = {p for p in (*self.files, *self.dirs) if p.parent == path and p != path}
        return sorted(children)


class CannedProbe:
    """``RuntimeProbe`` returning fixed output per executable."""

    def __init__(self, outputs: dict[Path, str] | None = None) -> None:
        self.outputs = outputs or {}
        self.calls: list[Path] = []

    def identify(self, executable: Path) -> RuntimeIdentity:
        self.calls.append(executable)
        if executable not in self.outputs:
            raise IdentityProbeMalformed(executable, "", "no canned output")
        return parse_identity(executable, self.outputs[executable])


@pytest.fixture(autouse=True)
def clean_ruby_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("RUBY_ROOT", "GEM_HOME", "RUBYSWITCH_RUBIES_DIR", "RUBYSWITCH_GEM_BASE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def fake_fs() -> FakeFileSystem:
    return FakeFileSystem()


@pytest.fixture()
def canned_probe() -> CannedProbe:
    return CannedProbe()


@pytest.fixture()
def make_ruby(tmp_path: Path) -> Iterator[Callable[..., Path]]:
    """Create ``<rubies>/<name>/bin/ruby`` as a script printing *output*."""
    rubies = tmp_path / "rubies"
    rubies.mkdir()

    def _make(name: str, output: str = "ruby 3.2.1", executable: bool = True) -> Path:
        ruby_dir = rubies / name
        bin_dir = ruby_dir / "bin"
        bin_dir.mkdir(parents=True)
        ruby = bin_dir / "ruby"
        ruby.write_text(f"#!/bin/sh\nprintf '%s' '{output}'\n", encoding="utf-8")
        if executable:
            ruby.chmod(ruby.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return ruby_dir

    yield _make


@pytest.fixture(autouse=True)
def reset_rubyswitch_logger() -> Iterator[None]:
    """Undo handlers installed by CLI invocations so caplog sees records."""
    logger = logging.getLogger("rubyswitch")
    yield
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
