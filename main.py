"""Command-line entry point for taslaunch."""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from taslaunch.config import Config
from taslaunch.contexts.gens import GensContext, GensVersion
from taslaunch.contexts.registry import ContextRegistry
from taslaunch.core.launcher import command, spawn
from taslaunch.errors import LaunchError
from taslaunch.logger import setup_logger
from taslaunch.models.host import HostPlatform


def build_parser(emulators: Sequence[str]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taslaunch",
        description="Run a ROM with a movie, config and Lua script in a TAS emulator.",
    )
    parser.add_argument("emulator", choices=list(emulators))
    parser.add_argument(
        "-w", "--working-dir", type=Path,
        help="emulator directory (defaults to the configured one)",
    )
    parser.add_argument("--config", type=Path, help="emulator settings file")
    parser.add_argument("--movie", type=Path, help="input movie to play back")
    parser.add_argument("--lua", type=Path, help="Lua script to load")
    parser.add_argument("--rom", type=Path, help="game image")
    parser.add_argument("--pause", action="store_true", help="start paused (Gens)")
    parser.add_argument(
        "--gens-version", choices=[v.value for v in GensVersion],
        help="Gens build in the working directory",
    )
    parser.add_argument(
        "--platform", choices=["auto", *(h.value for h in HostPlatform)],
        help="launch strategy to use (defaults to the configured one)",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="prepare and print the command without running it",
    )
    parser.add_argument(
        "--remember", action="store_true",
        help="save --working-dir as the default for this emulator",
    )
    parser.add_argument("--log-level", help="console log level")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    # ---- 1. Config ----
    config = Config()

    # ---- 2. Context discovery ----
    registry = ContextRegistry()
    registry.discover()

    args = build_parser(registry.names()).parse_args(argv)

    # ---- 3. Logger ----
    setup_logger(level=(args.log_level or config.log_level).upper())

    # ---- 4. Build the context ----
    context_cls = registry.get(args.emulator)
    if args.pause and not hasattr(context_cls, "with_pause"):
        logger.error("{} does not accept --pause", context_cls.display_name)
        return 2
    if args.gens_version and context_cls is not GensContext:
        logger.error("{} does not accept --gens-version", context_cls.display_name)
        return 2

    settings = config.get_emulator_settings(args.emulator)
    if args.gens_version:
        settings["version"] = args.gens_version
    if args.pause:
        settings["start_paused"] = True

    working_dir = args.working_dir or config.get_working_dir(args.emulator)
    if working_dir is None:
        logger.error("No working directory given or configured for {}", args.emulator)
        return 2

    try:
        host = HostPlatform.parse(args.platform) if args.platform else config.host_platform
    except ValueError as e:
        logger.error("Invalid host_platform in {}: {}", config.path, e)
        return 2

    try:
        ctx = context_cls.from_settings(working_dir, settings, host=host)
        for field_name in ("config", "movie", "lua", "rom"):
            value = getattr(args, field_name)
            if value is None:
                continue
            builder = getattr(ctx, f"with_{field_name}", None)
            if builder is None:
                logger.error("{} does not accept --{}", context_cls.display_name, field_name)
                return 2
            ctx = builder(value)

        if args.remember and args.working_dir:
            config.set_working_dir(args.emulator, ctx.working_dir)

        # ---- 5. Prepare and launch ----
        ctx.prepare()
        cmd = command(ctx)
        if args.dry_run:
            print(cmd.describe())
            return 0
        result = spawn(cmd)
    except LaunchError as e:
        logger.error("{}", e)
        return 1

    sys.stdout.buffer.write(result.stdout or b"")
    sys.stderr.buffer.write(result.stderr or b"")
    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
