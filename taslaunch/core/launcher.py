"""Assemble and spawn the process described by an :class:`EmulatorContext`."""

from __future__ import annotations

import os
import shlex
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from taslaunch.errors import LaunchIOError

if TYPE_CHECKING:
    from taslaunch.contexts.base import EmulatorContext


@dataclass
class LaunchCommand:
    """A fully resolved process invocation."""

    program: str
    args: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)
    """Overrides layered on top of the inherited environment."""

    cwd: Path = field(default_factory=Path.cwd)

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def describe(self) -> str:
        """Shell-like rendering, e.g. ``HOME=/x ./fceux --playmov m.fm2``."""
        parts = [f"{k}={shlex.quote(v)}" for k, v in self.env.items()]
        parts.extend(shlex.quote(part) for part in self.argv)
        return " ".join(parts)


def command(ctx: "EmulatorContext") -> LaunchCommand:
    """Build a :class:`LaunchCommand` from the context's accessors."""
    return LaunchCommand(
        program=ctx.cmd_name(),
        args=list(ctx.args()),
        env=dict(ctx.env()),
        cwd=ctx.working_dir,
    )


def spawn(cmd: LaunchCommand) -> subprocess.CompletedProcess:
    """Run *cmd* to completion and return its captured output."""
    logger.info("Launching in {}: {}", cmd.cwd, cmd.describe())
    try:
        result = subprocess.run(
            cmd.argv,
            cwd=cmd.cwd,
            env={**os.environ, **cmd.env},
            capture_output=True,
            check=False,
        )
    except OSError as e:
        raise LaunchIOError(f"Failed to start {cmd.program}: {e}") from e

    logger.info("{} exited with status {}", cmd.program, result.returncode)
    return result


def run(ctx: "EmulatorContext") -> subprocess.CompletedProcess:
    """Prepare *ctx* and spawn its command, blocking until the child exits.

    Nothing is spawned if preparation fails.
    """
    ctx.prepare()
    return spawn(command(ctx))
