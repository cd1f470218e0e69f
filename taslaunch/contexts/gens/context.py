"""Gens (re-recording) launch context."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any

from taslaunch.contexts.base import EmulatorContext
from taslaunch.core.path_resolver import resolve_working_dir
from taslaunch.errors import MissingExecutable, MissingFile, MissingLua, MissingMovie, MissingRom
from taslaunch.models.host import HostPlatform

EXECUTABLE = "Gens.exe"
WINE_PREFIX_DIR = ".wine"


class GensVersion(str, Enum):
    """Known Gens re-recording builds."""

    VER_11A = "11a"
    VER_11B = "11b"
    GIT_A2425B5 = "git-a2425b5"


DEFAULT_VERSION = GensVersion.VER_11B


@dataclass
class GensContext(EmulatorContext):
    """Launches ``Gens.exe``, through Wine on anything but Windows.

    Gens has no native port.  It resolves roms relative to itself, so the
    rom is always copied into ``working_dir``; movies and scripts work from
    an absolute path and are only copied when given as relative paths.
    Paths are therefore stored exactly as attached, not canonicalized.
    """

    name = "gens"
    display_name = "Gens"

    working_dir: Path
    version: GensVersion
    host: HostPlatform = field(default_factory=HostPlatform.current)
    start_paused: bool = False
    rom: Path | None = None
    movie: Path | None = None
    lua: Path | None = None

    @classmethod
    def from_working_dir(
        cls,
        working_dir: str | Path,
        *,
        host: HostPlatform | None = None,
        version: GensVersion = DEFAULT_VERSION,
    ) -> "GensContext":
        working_dir = resolve_working_dir(working_dir)
        exe = working_dir / EXECUTABLE
        if not working_dir.is_dir() or not exe.is_file():
            raise MissingExecutable(exe)
        return cls(
            working_dir=working_dir,
            version=GensVersion(version),
            host=host or HostPlatform.current(),
        )

    @classmethod
    def from_settings(
        cls,
        working_dir: str | Path,
        settings: Mapping[str, Any] | None = None,
        *,
        host: HostPlatform | None = None,
    ) -> "GensContext":
        settings = settings or {}
        ctx = cls.from_working_dir(
            working_dir,
            host=host,
            version=GensVersion(settings.get("version", DEFAULT_VERSION)),
        )
        return ctx.with_pause(bool(settings.get("start_paused", False)))

    def with_pause(self, start_paused: bool) -> "GensContext":
        return replace(self, start_paused=start_paused)

    def with_rom(self, rom: str | Path) -> "GensContext":
        return self._with_path("rom", rom, resolve=False)

    def with_movie(self, movie: str | Path) -> "GensContext":
        return self._with_path("movie", movie, resolve=False)

    def with_lua(self, lua: str | Path) -> "GensContext":
        return self._with_path("lua", lua, resolve=False)

    # ------------------------------------------------------------------
    # Launch contract
    # ------------------------------------------------------------------

    def cmd_name(self) -> str:
        if self.host.is_windows:
            return str(self.working_dir / EXECUTABLE)
        return "wine"

    def args(self) -> list[str]:
        args: list[str] = []
        if not self.host.is_windows:
            args.append(str(self.working_dir / EXECUTABLE))

        if self.start_paused:
            args += ["-pause", "0"]
        if self.rom is not None:
            args += ["-rom", str(self.rom)]
        if self.movie is not None:
            args += ["-play", str(self.movie)]
        if self.lua is not None:
            args += ["-lua", str(self.lua)]
        return args

    def env(self) -> dict[str, str]:
        if self.host.is_windows:
            return {}
        return {"WINEPREFIX": str(self.working_dir / WINE_PREFIX_DIR)}

    def prepare(self) -> None:
        if self.rom is not None and not self._is_staged(self.rom):
            self._require_file(self.rom, MissingRom)
            self._stage(self.rom, self.working_dir / self.rom.name)
            self.rom = Path(self.rom.name)

        if self.movie is not None:
            self.movie = self._localize(self.movie, MissingMovie)
        if self.lua is not None:
            self.lua = self._localize(self.lua, MissingLua)

    def _is_staged(self, path: Path) -> bool:
        """True for a bare name already copied into ``working_dir`` by an
        earlier :meth:`prepare` and not present in the current directory."""
        return (
            path.parent == Path(".")
            and not path.is_file()
            and (self.working_dir / path).is_file()
        )

    def _localize(self, path: Path, error: type[MissingFile]) -> Path:
        """Keep an absolute *path*; copy a relative one into ``working_dir``."""
        if self._is_staged(path):
            return path
        self._require_file(path, error)
        if path.is_absolute():
            return path
        self._stage(path, self.working_dir / path.name)
        return Path(path.name)
