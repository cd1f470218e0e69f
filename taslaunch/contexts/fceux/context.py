"""FCEUX launch context.

FCEUX ships as several executables with different command-line dialects
and different notions of where ``fceux.cfg`` lives:

- ``fceux``: native build, reads ``$HOME/.fceux/fceux.cfg``;
- ``fceux.exe`` / ``fceux64.exe``: win32/win64 builds, take ``-cfg <path>``;
- ``qfceux.exe``: win64 Qt/SDL build, reads ``fceux.cfg`` beside itself.

The first candidate found in the working directory decides both.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from taslaunch.contexts.base import EmulatorContext
from taslaunch.core.path_resolver import resolve_working_dir
from taslaunch.errors import (
    IncompatibleOSVersion,
    LaunchIOError,
    MissingConfig,
    MissingExecutable,
    MissingLua,
    MissingMovie,
    MissingRom,
)
from taslaunch.models.host import HostPlatform

NATIVE_EXECUTABLE = "fceux"
QT_EXECUTABLE = "qfceux.exe"

# Probe order; the first existing file wins.
EXECUTABLE_CANDIDATES: tuple[str, ...] = (
    NATIVE_EXECUTABLE, "fceux.exe", "fceux64.exe", QT_EXECUTABLE,
)

# Executables taking ``-cfg``/``-playmovie``/``-lua``; the rest take
# ``--playmov``/``--loadlua``.
WIN32_DIALECT = frozenset({"fceux.exe", "fceux64.exe"})

CONFIG_NAME = "fceux.cfg"
HOME_DIR = ".fceux"
WINE_PREFIX_DIR = ".wine"


@dataclass
class FceuxContext(EmulatorContext):
    """Launches FCEUX natively, or a Windows build through Wine."""

    name = "fceux"
    display_name = "FCEUX"

    working_dir: Path
    host: HostPlatform = field(default_factory=HostPlatform.current)
    config: Path | None = None
    movie: Path | None = None
    lua: Path | None = None
    rom: Path | None = None

    @classmethod
    def from_working_dir(
        cls, working_dir: str | Path, *, host: HostPlatform | None = None,
    ) -> "FceuxContext":
        working_dir = resolve_working_dir(working_dir)
        if not working_dir.is_dir():
            raise MissingExecutable(working_dir)
        if not any((working_dir / exe).is_file() for exe in EXECUTABLE_CANDIDATES):
            raise MissingExecutable(working_dir / NATIVE_EXECUTABLE)
        return cls(working_dir=working_dir, host=host or HostPlatform.current())

    def with_config(self, config: str | Path) -> "FceuxContext":
        return self._with_path("config", config)

    def with_movie(self, movie: str | Path) -> "FceuxContext":
        return self._with_path("movie", movie)

    def with_lua(self, lua: str | Path) -> "FceuxContext":
        return self._with_path("lua", lua)

    def with_rom(self, rom: str | Path) -> "FceuxContext":
        return self._with_path("rom", rom)

    def determine_executable(self) -> str | None:
        """Filename of the first candidate executable present, if any."""
        for exe in EXECUTABLE_CANDIDATES:
            if (self.working_dir / exe).is_file():
                return exe
        return None

    def _uses_wine(self, exe: str | None) -> bool:
        return not self.host.is_windows and exe is not None and exe != NATIVE_EXECUTABLE

    # ------------------------------------------------------------------
    # Launch contract
    # ------------------------------------------------------------------

    def cmd_name(self) -> str:
        exe = self.determine_executable()
        if self.host.is_windows:
            return str(self.working_dir / (exe or "fceux.exe"))
        if self._uses_wine(exe):
            return "wine"
        return f"./{NATIVE_EXECUTABLE}"

    def args(self) -> list[str]:
        exe = self.determine_executable()
        args: list[str] = []
        if self._uses_wine(exe):
            args.append(str(self.working_dir / exe))

        if exe in WIN32_DIALECT:
            if self.config is not None:
                args += ["-cfg", str(self.config)]
            if self.movie is not None:
                args += ["-playmovie", str(self.movie)]
            if self.lua is not None:
                args += ["-lua", str(self.lua)]
        elif exe is not None:
            # Config is staged on disk for these builds rather than passed.
            if self.movie is not None:
                args += ["--playmov", str(self.movie)]
            if self.lua is not None:
                args += ["--loadlua", str(self.lua)]

        if self.rom is not None:
            args.append(str(self.rom))
        return args

    def env(self) -> dict[str, str]:
        env: dict[str, str] = {}
        if self._uses_wine(self.determine_executable()):
            env["WINEPREFIX"] = str(self.working_dir / WINE_PREFIX_DIR)
        env["HOME"] = str(self.working_dir / HOME_DIR)
        return env

    def prepare(self) -> None:
        exe = self.determine_executable()
        if self.host.is_windows and exe == NATIVE_EXECUTABLE:
            raise IncompatibleOSVersion(
                f"{self.working_dir / exe} is a native build and cannot run on Windows"
            )

        if self.config is not None:
            self._prepare_config(self.config, exe)
        self._check_input(self.movie, MissingMovie)
        self._check_input(self.lua, MissingLua)
        self._check_input(self.rom, MissingRom)

    def _prepare_config(self, config: Path, exe: str | None) -> None:
        self._require_file(config, MissingConfig)

        if exe == NATIVE_EXECUTABLE:
            dest_dir = self.working_dir / HOME_DIR
            try:
                dest_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise LaunchIOError(f"Failed to create {dest_dir}: {e}") from e
            self._stage(config, dest_dir / CONFIG_NAME)
        elif exe == QT_EXECUTABLE:
            self._stage(config, self.working_dir / CONFIG_NAME)
        else:
            self._require_absolute(config)
