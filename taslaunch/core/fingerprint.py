"""Identify emulator builds from the SHA-1 of their executable."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from taslaunch.core.staging import file_digest


def lookup_version(digest: str, table: Mapping[str, str]) -> str | None:
    """Return the version label for *digest*, or ``None`` if unknown."""
    return table.get(digest.strip().lower())


def detect_version(data: bytes, table: Mapping[str, str]) -> str | None:
    """Fingerprint a full executable image against *table*."""
    return lookup_version(file_digest(data), table)


def detect_file_version(path: Path, table: Mapping[str, str]) -> str | None:
    """Read *path* and fingerprint it.  ``OSError`` propagates."""
    return detect_version(Path(path).read_bytes(), table)
