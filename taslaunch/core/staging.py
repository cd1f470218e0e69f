"""Copy-on-difference staging of files into an emulator's working directory.

A destination is only rewritten when its SHA-1 differs from the new
content, so repeated launches leave unchanged files (and their mtimes)
alone.  Writes go through a temporary sibling that is renamed over the
destination, so a half-written file is never visible.
"""

from __future__ import annotations

import hashlib
import os
import tempfile
from pathlib import Path

from loguru import logger


def file_digest(data: bytes) -> str:
    """Return the lower-case SHA-1 hex digest of *data*."""
    return hashlib.sha1(data).hexdigest()


def copy_if_different(data: bytes, dest: Path) -> bool:
    """Write *data* to *dest* unless it already holds identical content.

    Returns ``True`` if the file was written.  Missing parent directories
    are **not** created.
    """
    dest = Path(dest)
    if dest.is_file():
        if file_digest(dest.read_bytes()) == file_digest(data):
            logger.debug("Unchanged, skipping write: {}", dest)
            return False

    # mkstemp creates 0600 files; keep the destination's mode or use 0644.
    mode = dest.stat().st_mode & 0o777 if dest.exists() else 0o644

    fd, tmp_name = tempfile.mkstemp(prefix=f".{dest.name}.", dir=dest.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, dest)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.debug("Staged {} bytes -> {}", len(data), dest)
    return True


def stage_file(source: Path, dest: Path) -> bool:
    """Copy *source* to *dest* using :func:`copy_if_different`."""
    return copy_if_different(Path(source).read_bytes(), dest)
