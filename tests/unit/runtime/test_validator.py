"""Tests for rubyswitch.runtime.validator -- installed-runtime checks."""

from __future__ import annotations

from pathlib import Path

import pytest

from rubyswitch.runtime.exceptions import (
    RuntimeExecutableMissing,
    RuntimeNotInstalled,
    RuntimeOutsideRoot,
)
from rubyswitch.runtime.types import SwitchStatus
from rubyswitch.runtime.validator import ruby_executable, validate_runtime

RUBIES = Path("/home/dev/.rubies")


class TestValidateRuntime:
    def test_valid_runtime_returns_candidate(self, fake_fs) -> None:
        fake_fs.add_file(RUBIES / "ruby-3.2.1" / "bin" / "ruby", executable=True)
        assert validate_runtime("ruby-3.2.1", RUBIES, fake_fs) == RUBIES / "ruby-3.2.1"

    def test_missing_directory(self, fake_fs) -> None:
        fake_fs.add_dir(RUBIES)
        with pytest.raises(RuntimeNotInstalled) as excinfo:
            validate_runtime("jruby-9.4.0", RUBIES, fake_fs)
        message = str(excinfo.value)
        assert "jruby-9.4.0" in message
        assert str(RUBIES) in message
        assert excinfo.value.status is SwitchStatus.RUNTIME_NOT_INSTALLED

    def test_directory_without_ruby_binary(self, fake_fs) -> None:
        fake_fs.add_dir(RUBIES / "ruby-3.2.1" / "bin")
        with pytest.raises(RuntimeExecutableMissing) as excinfo:
            validate_runtime("ruby-3.2.1", RUBIES, fake_fs)
        assert str(RUBIES / "ruby-3.2.1" / "bin" / "ruby") in str(excinfo.value)
        assert excinfo.value.status is SwitchStatus.RUNTIME_EXECUTABLE_MISSING

    def test_binary_not_executable(self, fake_fs) -> None:
        fake_fs.add_file(RUBIES / "ruby-3.2.1" / "bin" / "ruby", executable=False)
        with pytest.raises(RuntimeExecutableMissing):
            validate_runtime("ruby-3.2.1", RUBIES, fake_fs)

    def test_diagnostics_are_distinguishable(self, fake_fs) -> None:
        fake_fs.add_dir(RUBIES / "ruby-3.2.1")
        with pytest.raises(RuntimeNotInstalled) as missing:
            validate_runtime("ruby-9.9.9", RUBIES, fake_fs)
        with pytest.raises(RuntimeExecutableMissing) as no_binary:
            validate_runtime("ruby-3.2.1", RUBIES, fake_fs)
        assert str(missing.value) != str(no_binary.value)
        assert missing.value.status is not no_binary.value.status

    def test_real_tree(self, make_ruby, tmp_path: Path) -> None:
        make_ruby("ruby-3.2.1")
        make_ruby("ruby-broken", executable=False)
        rubies = tmp_path / "rubies"
        assert validate_runtime("ruby-3.2.1", rubies) == rubies / "ruby-3.2.1"
        with pytest.raises(RuntimeExecutableMissing):
            validate_runtime("ruby-broken", rubies)


# ---------------------------------------------------------------------------
# Identifiers confined to the rubies root
# ---------------------------------------------------------------------------


class TestIdentifierConfinement:
    @pytest.mark.parametrize(
        "identifier", ["/usr", "../ruby-3.2.1", "ruby-3.2.1/../..", "nested/ruby-3.2.1", "."]
    )
    def test_rejects_paths_outside_root(self, fake_fs, identifier: str) -> None:
        fake_fs.add_file("/usr/bin/ruby", executable=True)
        fake_fs.add_file(RUBIES.parent / "ruby-3.2.1" / "bin" / "ruby", executable=True)
        fake_fs.add_file(RUBIES / "nested" / "ruby-3.2.1" / "bin" / "ruby", executable=True)

        with pytest.raises(RuntimeOutsideRoot, match="outside") as excinfo:
            validate_runtime(identifier, RUBIES, fake_fs)
        assert excinfo.value.status is SwitchStatus.RUNTIME_NOT_INSTALLED
        assert fake_fs.calls == []

    def test_outside_root_is_a_not_installed_error(self, fake_fs) -> None:
        with pytest.raises(RuntimeNotInstalled):
            validate_runtime("/usr", RUBIES, fake_fs)

    def test_trailing_slash_on_root_is_accepted(self, fake_fs) -> None:
        fake_fs.add_file(RUBIES / "ruby-3.2.1" / "bin" / "ruby", executable=True)
        assert validate_runtime("ruby-3.2.1", Path(str(RUBIES) + "/"), fake_fs) == RUBIES / "ruby-3.2.1"


def test_ruby_executable_path() -> None:
    assert ruby_executable(Path("/r/ruby-3.2.1")) == Path("/r/ruby-3.2.1/bin/ruby")
