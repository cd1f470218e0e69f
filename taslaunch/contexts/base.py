"""Abstract base class for emulator launch contexts."""

from __future__ import annotations

import dataclasses
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any, ClassVar, TypeVar

from loguru import logger

from taslaunch.core import launcher
from taslaunch.core.path_resolver import canonicalize
from taslaunch.core.staging import stage_file
from taslaunch.errors import AbsolutePathFailed, LaunchIOError, MissingFile
from taslaunch.models.host import HostPlatform

C = TypeVar("C", bound="EmulatorContext")


class EmulatorContext(ABC):
    """Base class that every emulator context must implement.

    A context is created by :meth:`from_working_dir` (which verifies the
    emulator is actually installed there), extended with ``with_*``
    builders that each return a **new** context, and consumed by
    :meth:`run`::

        ctx = BizHawkContext.from_working_dir("~/BizHawk").with_rom(rom)
        output = ctx.run()

    Concrete contexts are dataclasses and must provide the fields
    ``working_dir`` (directory the child process runs in) and ``host``
    (the :class:`HostPlatform` whose launch strategy is used).
    """

    name: ClassVar[str]
    """Registry key (e.g. ``"bizhawk"``)."""

    display_name: ClassVar[str]

    working_dir: Path
    host: HostPlatform

    # ------------------------------------------------------------------
    # Launch contract
    # ------------------------------------------------------------------

    @abstractmethod
    def cmd_name(self) -> str:
        """Name of the program to execute.

        A binary inside the working directory must be given as
        ``./name`` so it is not looked up on ``PATH``.
        """
        ...

    @abstractmethod
    def args(self) -> list[str]:
        """Argument vector passed after :meth:`cmd_name`."""
        ...

    @abstractmethod
    def env(self) -> dict[str, str]:
        """Environment variables set for the child process."""
        ...

    @abstractmethod
    def prepare(self) -> None:
        """Validate attached files and stage anything the emulator needs.

        Raises on the first failure.  May rewrite the context's own path
        fields to point at staged copies.
        """
        ...

    def run(self) -> subprocess.CompletedProcess:
        """Prepare the context, then spawn and wait for the emulator."""
        return launcher.run(self)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    @abstractmethod
    def from_working_dir(
        cls: type[C], working_dir: str | Path, *, host: HostPlatform | None = None,
    ) -> C:
        """Detect the emulator in *working_dir* and return a bare context.

        *working_dir* may also be a file inside the directory.
        """
        ...

    @classmethod
    def from_settings(
        cls: type[C],
        working_dir: str | Path,
        settings: Mapping[str, Any] | None = None,
        *,
        host: HostPlatform | None = None,
    ) -> C:
        """Build a context from a per-emulator config mapping.

        Contexts with extra construction parameters override this.
        """
        return cls.from_working_dir(working_dir, host=host)

    # ------------------------------------------------------------------
    # Helpers for subclasses
    # ------------------------------------------------------------------

    @classmethod
    def _plugin_dir(cls) -> Path:
        """Return filesystem path of the concrete context's package."""
        import inspect
        return Path(inspect.getfile(cls)).parent

    def _with_path(self: C, field_name: str, path: str | Path, *, resolve: bool = True) -> C:
        value = canonicalize(path) if resolve else Path(path)
        return dataclasses.replace(self, **{field_name: value})

    @staticmethod
    def _require_file(path: Path, error: type[MissingFile]) -> None:
        if not path.is_file():
            raise error(path)

    @staticmethod
    def _require_absolute(path: Path) -> None:
        # The child runs in working_dir, so a relative path would resolve
        # against the wrong base.
        if not path.is_absolute():
            raise AbsolutePathFailed(path)

    def _check_input(self, path: Path | None, error: type[MissingFile]) -> None:
        """Existing-regular-file-and-absolute rule for an optional field."""
        if path is None:
            return
        self._require_file(path, error)
        self._require_absolute(path)

    @staticmethod
    def _stage(source: Path, dest: Path) -> None:
        try:
            written = stage_file(source, dest)
        except OSError as e:
            raise LaunchIOError(f"Failed to stage {source} -> {dest}: {e}") from e
        if written:
            logger.info("Staged {} -> {}", source, dest)
