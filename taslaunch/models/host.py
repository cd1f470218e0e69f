"""Host operating-system family used to pick launch strategies."""

from __future__ import annotations

import platform
from enum import Enum


class HostPlatform(str, Enum):
    """Operating-system family an emulator is launched on."""

    WINDOWS = "windows"
    UNIX = "unix"

    @classmethod
    def current(cls) -> "HostPlatform":
        """Return the family of the running interpreter's OS."""
        if platform.system() == "Windows":
            return cls.WINDOWS
        return cls.UNIX

    @classmethod
    def parse(cls, value: "str | HostPlatform | None") -> "HostPlatform":
        """Resolve a config/CLI value (``auto``, ``windows``, ``unix``)."""
        if isinstance(value, HostPlatform):
            return value
        if value is None or value.strip().lower() in ("", "auto"):
            return cls.current()
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown host platform: {value!r}") from None

    @property
    def is_windows(self) -> bool:
        return self is HostPlatform.WINDOWS
