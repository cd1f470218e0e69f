"""Prepare and run tool-assisted-speedrun emulators."""

from taslaunch.contexts import BizHawkContext, EmulatorContext, FceuxContext, GensContext, GensVersion
from taslaunch.core.launcher import LaunchCommand, command, run
from taslaunch.errors import LaunchError
from taslaunch.models.host import HostPlatform

__all__ = [
    "BizHawkContext",
    "EmulatorContext",
    "FceuxContext",
    "GensContext",
    "GensVersion",
    "HostPlatform",
    "LaunchCommand",
    "LaunchError",
    "command",
    "run",
]
