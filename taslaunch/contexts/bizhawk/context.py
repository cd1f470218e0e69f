"""BizHawk (EmuHawk) launch context."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from taslaunch.contexts.base import EmulatorContext
from taslaunch.contexts.bizhawk.versions import (
    KNOWN_VERSIONS,
    LEGACY_VERSIONS,
    UNSUPPORTED_VERSIONS,
)
from taslaunch.core.fingerprint import detect_file_version
from taslaunch.core.path_resolver import resolve_working_dir
from taslaunch.core.staging import copy_if_different
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

EXECUTABLE = "EmuHawk.exe"
BOOTSTRAP_SCRIPT = "start-bizhawk.sh"
BOOTSTRAP_SCRIPT_PRE290 = "start-bizhawk-pre290.sh"


@dataclass
class BizHawkContext(EmulatorContext):
    """Launches EmuHawk directly on Windows, or via a Mono bootstrap script.

    BizHawk accepts configs, movies, scripts and roms from anywhere, but
    they must be absolute since the child runs inside ``working_dir``.
    """

    name = "bizhawk"
    display_name = "BizHawk"

    working_dir: Path
    host: HostPlatform = field(default_factory=HostPlatform.current)
    config: Path | None = None
    movie: Path | None = None
    lua: Path | None = None
    rom: Path | None = None

    @classmethod
    def from_working_dir(
        cls, working_dir: str | Path, *, host: HostPlatform | None = None,
    ) -> "BizHawkContext":
        working_dir = resolve_working_dir(working_dir)
        exe = working_dir / EXECUTABLE
        if not working_dir.is_dir() or not exe.is_file():
            raise MissingExecutable(exe)
        return cls(working_dir=working_dir, host=host or HostPlatform.current())

    def with_config(self, config: str | Path) -> "BizHawkContext":
        return self._with_path("config", config)

    def with_movie(self, movie: str | Path) -> "BizHawkContext":
        return self._with_path("movie", movie)

    def with_lua(self, lua: str | Path) -> "BizHawkContext":
        return self._with_path("lua", lua)

    def with_rom(self, rom: str | Path) -> "BizHawkContext":
        return self._with_path("rom", rom)

    # ------------------------------------------------------------------
    # Launch contract
    # ------------------------------------------------------------------

    def cmd_name(self) -> str:
        if self.host.is_windows:
            return str(self.working_dir / EXECUTABLE)
        return "bash"

    def args(self) -> list[str]:
        args: list[str] = []
        if not self.host.is_windows:
            args.append(BOOTSTRAP_SCRIPT)
        if self.config is not None:
            args.append(f"--config={self.config}")
        if self.movie is not None:
            args.append(f"--movie={self.movie}")
        if self.lua is not None:
            args.append(f"--lua={self.lua}")
        if self.rom is not None:
            args.append(str(self.rom))
        return args

    def env(self) -> dict[str, str]:
        return {}

    def prepare(self) -> None:
        self._check_input(self.config, MissingConfig)
        self._check_input(self.movie, MissingMovie)
        self._check_input(self.lua, MissingLua)
        self._check_input(self.rom, MissingRom)

        if self.host.is_windows:
            return

        script = self.select_bootstrap()
        dest = self.working_dir / BOOTSTRAP_SCRIPT
        try:
            if copy_if_different(self.bootstrap_payload(script), dest):
                logger.info("Wrote {} from {}", dest, script)
        except OSError as e:
            raise LaunchIOError(f"Failed to write {dest}: {e}") from e

    # ------------------------------------------------------------------
    # Version handling
    # ------------------------------------------------------------------

    def detect_version(self) -> str | None:
        """Identify the release by the SHA-1 of ``EmuHawk.exe``.

        Returns ``None`` for builds missing from the fingerprint table.
        """
        exe = self.working_dir / EXECUTABLE
        try:
            return detect_file_version(exe, KNOWN_VERSIONS)
        except OSError as e:
            raise LaunchIOError(f"Failed to read {exe}: {e}") from e

    def select_bootstrap(self) -> str:
        """Return the bootstrap script filename matching the installed build.

        Raises :class:`IncompatibleOSVersion` for releases that cannot run
        outside Windows.
        """
        version = self.detect_version()
        if version is None:
            logger.warning("Unrecognized EmuHawk.exe in {}, assuming a current release", self.working_dir)
            return BOOTSTRAP_SCRIPT
        logger.debug("Detected BizHawk {}", version)
        if version in UNSUPPORTED_VERSIONS:
            raise IncompatibleOSVersion(
                f"BizHawk {version} cannot be launched on {self.host.value}"
            )
        if version in LEGACY_VERSIONS:
            return BOOTSTRAP_SCRIPT_PRE290
        return BOOTSTRAP_SCRIPT

    @classmethod
    def bootstrap_payload(cls, script: str) -> bytes:
        """Bytes of a bundled bootstrap script."""
        return (cls._plugin_dir() / script).read_bytes()
