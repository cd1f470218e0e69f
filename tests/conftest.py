"""Shared fixtures: isolated config, fake emulator installs, fake spawning."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest
from loguru import logger

from taslaunch.config import Config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point the config singleton at a throwaway data directory."""
    monkeypatch.setenv("TASLAUNCH_HOME", str(tmp_path / "taslaunch-home"))
    Config.reset()
    yield
    Config.reset()
    # main() installs its own sinks; restore a plain stderr sink.
    logger.remove()
    logger.add(sys.stderr, level="DEBUG")


class FakeSpawn:
    """Records ``subprocess.run`` calls instead of starting processes."""

    def __init__(self) -> None:
        self.calls: list[dict] = []
        self.returncode = 0
        self.stdout = b"emulator output\n"
        self.stderr = b""

    def __call__(self, argv, **kwargs) -> subprocess.CompletedProcess:
        self.calls.append({"argv": list(argv), **kwargs})
        return subprocess.CompletedProcess(
            argv, self.returncode, stdout=self.stdout, stderr=self.stderr,
        )


@pytest.fixture
def fake_spawn(monkeypatch: pytest.MonkeyPatch) -> FakeSpawn:
    fake = FakeSpawn()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


@pytest.fixture
def make_install(tmp_path: Path):
    """Factory creating ``tmp_path/<name>`` holding the given executables."""

    def _make(name: str, *executables: str, content: bytes = b"MZ fake") -> Path:
        install = tmp_path / name
        install.mkdir()
        for exe in executables:
            (install / exe).write_bytes(content)
        return install

    return _make


@pytest.fixture
def make_file(tmp_path: Path):
    """Factory writing a file under ``tmp_path``; returns its absolute path."""

    def _make(relative: str, content: bytes = b"data") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _make
