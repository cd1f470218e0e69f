"""Path helpers: canonicalization and portable config paths.

Placeholders
~~~~~~~~~~~~
Paths persisted in the config may start with ``${HOME}`` (or ``~``) and
may reference environment variables, so one config file works across
machines::

    expand_path("${HOME}/tas/BizHawk")   # Path("/home/me/tas/BizHawk")
    to_portable_path("/home/me/tas")     # "${HOME}/tas"
"""

from __future__ import annotations

import os
from pathlib import Path

from loguru import logger

_HOME_PLACEHOLDER = "${HOME}"


def canonicalize(path: str | Path) -> Path:
    """Return the absolute, symlink-free form of *path*.

    Canonicalization failure (e.g. the file does not exist yet) is not an
    error: the original path is returned unchanged.
    """
    path = Path(path)
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        logger.debug("Could not canonicalize {}: {}", path, e)
        return path


def resolve_working_dir(path: str | Path) -> Path:
    """Turn a directory, or a file inside one, into a canonical directory."""
    path = Path(path)
    if path.is_file():
        path = path.parent
    return canonicalize(path)


def expand_path(value: str | Path) -> Path:
    """Expand ``${HOME}``, ``~`` and environment variables in *value*."""
    text = str(value)
    if text.startswith(_HOME_PLACEHOLDER):
        rest = text[len(_HOME_PLACEHOLDER):].lstrip("/").lstrip("\\")
        return Path.home() / rest
    return Path(os.path.expandvars(os.path.expanduser(text)))


def to_portable_path(absolute: str | Path) -> str:
    """Replace the home-directory prefix of *absolute* with ``${HOME}``."""
    abs_str = str(Path(absolute)).replace("\\", "/")
    home_str = str(Path.home()).replace("\\", "/")
    if abs_str.lower().startswith(home_str.lower() + "/"):
        return f"{_HOME_PLACEHOLDER}/{abs_str[len(home_str):].lstrip('/')}"
    if abs_str.lower() == home_str.lower():
        return _HOME_PLACEHOLDER
    return abs_str
