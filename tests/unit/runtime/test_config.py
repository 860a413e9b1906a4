"""Tests for rubyswitch.runtime.config -- directory defaults and overrides."""

from __future__ import annotations

from pathlib import Path

import pytest

from rubyswitch.runtime.config import SwitchConfig, get_gem_base_dir, get_rubies_dir


class TestGetRubiesDir:
    def test_unix_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("os.name", "posix")
        assert get_rubies_dir() == Path.home() / ".rubies"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("RUBYSWITCH_RUBIES_DIR", str(tmp_path / "rubies"))
        assert get_rubies_dir() == tmp_path / "rubies"

    def test_empty_env_var_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RUBYSWITCH_RUBIES_DIR", "")
        monkeypatch.setattr("os.name", "posix")
        assert get_rubies_dir() == Path.home() / ".rubies"

    def test_read_on_every_call(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("RUBYSWITCH_RUBIES_DIR", str(tmp_path / "a"))
        first = get_rubies_dir()
        monkeypatch.setenv("RUBYSWITCH_RUBIES_DIR", str(tmp_path / "b"))
        assert get_rubies_dir() != first


class TestGetGemBaseDir:
    def test_default(self) -> None:
        assert get_gem_base_dir() == Path.home() / ".gem"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("RUBYSWITCH_GEM_BASE", str(tmp_path))
        assert get_gem_base_dir() == tmp_path


class TestSwitchConfig:
    def test_explicit_values_win(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("RUBYSWITCH_RUBIES_DIR", "/from/env")
        config = SwitchConfig.from_environment(rubies_dir=tmp_path, gem_base_dir=tmp_path / "g")
        assert config.rubies_dir == tmp_path
        assert config.gem_base_dir == tmp_path / "g"

    def test_defaults_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RUBYSWITCH_RUBIES_DIR", "/from/env")
        config = SwitchConfig.from_environment()
        assert config.rubies_dir == Path("/from/env")
        assert config.gem_base_dir == Path.home() / ".gem"
        assert config.probe_timeout == 5.0


class TestRelativePaths:
    def test_relative_env_value_is_made_absolute(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("RUBYSWITCH_RUBIES_DIR", "rubies")
        monkeypatch.setenv("RUBYSWITCH_GEM_BASE", "gems")
        assert get_rubies_dir() == tmp_path / "rubies"
        assert get_gem_base_dir() == tmp_path / "gems"

    def test_relative_explicit_values_are_made_absolute(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.chdir(tmp_path)
        config = SwitchConfig.from_environment(rubies_dir=Path("r"), gem_base_dir=Path("g"))
        assert config.rubies_dir == tmp_path / "r"
        assert config.gem_base_dir == tmp_path / "g"
        assert config.rubies_dir.is_absolute()

    def test_unchanged_after_directory_change(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.chdir(tmp_path)
        config = SwitchConfig.from_environment(rubies_dir=Path("r"))
        (tmp_path / "elsewhere").mkdir()
        monkeypatch.chdir(tmp_path / "elsewhere")
        assert config.rubies_dir == tmp_path / "r"
