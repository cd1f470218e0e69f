"""Tests for the JSON config singleton, host parsing and path helpers."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from taslaunch.config import Config
from taslaunch.core.path_resolver import canonicalize, expand_path, resolve_working_dir, to_portable_path
from taslaunch.models.host import HostPlatform


class TestConfig:
    def test_defaults(self, tmp_path: Path) -> None:
        cfg = Config()
        assert cfg.data_dir == tmp_path / "taslaunch-home"
        assert cfg.path == cfg.data_dir / "config.json"
        assert cfg.log_level == "INFO"
        assert cfg.host_platform is HostPlatform.current()
        assert cfg.get_emulator_settings("bizhawk") == {}
        assert cfg.get_working_dir("bizhawk") is None

    def test_is_singleton(self) -> None:
        assert Config() is Config()

    def test_loads_existing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "log_level": "debug",
            "host_platform": "windows",
            "emulators": {"gens": {"working_dir": "/opt/gens", "version": "11a"}},
        }), encoding="utf-8")

        cfg = Config(path)
        assert cfg.log_level == "DEBUG"
        assert cfg.host_platform is HostPlatform.WINDOWS
        assert cfg.get_working_dir("gens") == Path("/opt/gens")
        assert cfg.get_emulator_settings("gens")["version"] == "11a"

    def test_invalid_file_falls_back_to_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        assert Config(path).log_level == "INFO"

    def test_set_working_dir_persists_portable_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        path = tmp_path / "config.json"
        cfg = Config(path)

        cfg.set_working_dir("fceux", tmp_path / "emus" / "fceux")

        saved = json.loads(path.read_text(encoding="utf-8"))
        assert saved["emulators"]["fceux"]["working_dir"] == "${HOME}/emus/fceux"
        assert cfg.get_working_dir("fceux") == tmp_path / "emus" / "fceux"

    def test_settings_copy_is_detached(self, tmp_path: Path) -> None:
        cfg = Config(tmp_path / "config.json")
        cfg.set_emulator_settings("gens", {"version": "11b"})
        settings = cfg.get_emulator_settings("gens")
        settings["version"] = "11a"
        assert cfg.get_emulator_settings("gens")["version"] == "11b"

    def test_emulator_settings_survive_reload(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        Config(path).set_emulator_settings("gens", {"version": "11a", "start_paused": True})

        Config.reset()
        cfg = Config(path)
        assert cfg.get_emulator_settings("gens") == {"version": "11a", "start_paused": True}


class TestHostPlatform:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [("windows", HostPlatform.WINDOWS), ("UNIX", HostPlatform.UNIX), (HostPlatform.UNIX, HostPlatform.UNIX)],
    )
    def test_parse(self, value, expected: HostPlatform) -> None:
        assert HostPlatform.parse(value) is expected

    @pytest.mark.parametrize("value", [None, "", "auto"])
    def test_auto(self, value) -> None:
        assert HostPlatform.parse(value) is HostPlatform.current()

    def test_current_follows_platform_system(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("platform.system", lambda: "Windows")
        assert HostPlatform.current() is HostPlatform.WINDOWS
        monkeypatch.setattr("platform.system", lambda: "Darwin")
        assert HostPlatform.current() is HostPlatform.UNIX

    def test_unknown(self) -> None:
        with pytest.raises(ValueError):
            HostPlatform.parse("amiga")


class TestPathResolver:
    def test_canonicalize_missing_path_is_kept(self) -> None:
        assert canonicalize("does/not/exist.nes") == Path("does/not/exist.nes")

    def test_canonicalize_resolves_symlinks(self, tmp_path: Path) -> None:
        target = tmp_path / "real.nes"
        target.write_bytes(b"x")
        link = tmp_path / "link.nes"
        link.symlink_to(target)
        assert canonicalize(link) == target.resolve()

    def test_resolve_working_dir_from_file(self, tmp_path: Path) -> None:
        exe = tmp_path / "Gens.exe"
        exe.write_bytes(b"")
        assert resolve_working_dir(exe) == tmp_path.resolve()

    def test_expand_home_placeholder(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        assert expand_path("${HOME}/BizHawk") == tmp_path / "BizHawk"

    def test_expand_environment_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TAS_ROOT", "/srv/tas")
        assert expand_path("$TAS_ROOT/fceux") == Path("/srv/tas/fceux")

    def test_portable_path_outside_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        assert to_portable_path("/opt/gens") == "/opt/gens"
