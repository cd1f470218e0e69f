"""Application configuration management."""

import json
import os
import platform
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from taslaunch.core.path_resolver import expand_path, to_portable_path
from taslaunch.models.host import HostPlatform


def _default_data_dir() -> Path:
    """Return the default data directory for the application.

    ``TASLAUNCH_HOME`` overrides the per-OS location.
    """
    override = os.environ.get("TASLAUNCH_HOME")
    if override:
        return expand_path(override)
    if platform.system() == "Windows":
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
        return base / "taslaunch"
    elif platform.system() == "Darwin":
        return Path.home() / "Library" / "Application Support" / "taslaunch"
    else:
        return Path.home() / ".config" / "taslaunch"


_DEFAULT_CONFIG: dict[str, Any] = {
    "log_level": "INFO",
    "host_platform": "auto",
    "emulators": {},
}


class Config:
    """Singleton application configuration.

    Per-emulator settings live under ``emulators.<name>``, e.g.::

        {"emulators": {"gens": {"working_dir": "${HOME}/tas/gens",
                                "version": "11b", "start_paused": true}}}
    """

    _instance: Optional["Config"] = None
    _data: dict[str, Any]
    _path: Path
    _data_dir: Path

    def __new__(cls, config_path: Optional[Path] = None) -> "Config":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        if self._initialized:  # type: ignore[has-type]
            return
        self._initialized = True
        self._data_dir = _default_data_dir()
        self._path = config_path or (self._data_dir / "config.json")
        self._data = json.loads(json.dumps(_DEFAULT_CONFIG))
        self._load()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    @property
    def path(self) -> Path:
        return self._path

    @property
    def log_level(self) -> str:
        return str(self._data.get("log_level", "INFO")).upper()

    @property
    def host_platform(self) -> HostPlatform:
        return HostPlatform.parse(self._data.get("host_platform", "auto"))

    def get_emulator_settings(self, emulator_name: str) -> dict[str, Any]:
        """Settings for one emulator (a copy; use the setter to persist)."""
        emu_cfg = self._data.get("emulators", {})
        return dict(emu_cfg.get(emulator_name, {}))

    def set_emulator_settings(self, emulator_name: str, settings: dict[str, Any]) -> None:
        self._data.setdefault("emulators", {})[emulator_name] = dict(settings)
        self._save()

    def get_working_dir(self, emulator_name: str) -> Path | None:
        """Configured working directory for *emulator_name*, if any."""
        value = self.get_emulator_settings(emulator_name).get("working_dir")
        return expand_path(value) if value else None

    def set_working_dir(self, emulator_name: str, working_dir: Path) -> None:
        settings = self.get_emulator_settings(emulator_name)
        settings["working_dir"] = to_portable_path(working_dir)
        self.set_emulator_settings(emulator_name, settings)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _load(self) -> None:
        if self._path.exists():
            try:
                with open(self._path, "r", encoding="utf-8") as f:
                    saved = json.load(f)
                self._data.update(saved)
                logger.info("Configuration loaded from {}", self._path)
            except (OSError, ValueError) as e:
                logger.warning("Failed to load config, using defaults: {}", e)

    def _save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        try:
            with open(self._path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=4, ensure_ascii=False)
        except OSError as e:
            logger.error("Failed to save config: {}", e)

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton (for testing)."""
        cls._instance = None
