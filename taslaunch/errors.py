"""Exceptions raised while preparing or launching an emulator."""

from __future__ import annotations

from pathlib import Path


class LaunchError(Exception):
    """Base class for every failure reported by taslaunch."""


class MissingExecutable(LaunchError):
    """The working directory does not contain the emulator's executable."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Emulator executable not found: {path}")
        self.path = path


class MissingFile(LaunchError):
    """An attached path does not reference an existing regular file."""

    kind = "file"

    def __init__(self, path: Path) -> None:
        super().__init__(f"Missing {self.kind}: {path}")
        self.path = path


class MissingConfig(MissingFile):
    kind = "config"


class MissingRom(MissingFile):
    kind = "rom"


class MissingMovie(MissingFile):
    kind = "movie"


class MissingLua(MissingFile):
    kind = "lua script"


class AbsolutePathFailed(LaunchError):
    """An attached path exists but is relative where an absolute path is required."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Path must be absolute: {path}")
        self.path = path


class IncompatibleOSVersion(LaunchError):
    """The detected emulator build cannot be launched on this host."""


class LaunchIOError(LaunchError):
    """Wraps an ``OSError`` raised while staging files or spawning the process."""
