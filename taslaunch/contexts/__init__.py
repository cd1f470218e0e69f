"""Emulator launch contexts, one sub-package per emulator family."""

from taslaunch.contexts.base import EmulatorContext
from taslaunch.contexts.bizhawk import BizHawkContext
from taslaunch.contexts.fceux import FceuxContext
from taslaunch.contexts.gens import GensContext, GensVersion

__all__ = [
    "BizHawkContext",
    "EmulatorContext",
    "FceuxContext",
    "GensContext",
    "GensVersion",
]
