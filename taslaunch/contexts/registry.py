"""Context discovery and lookup by emulator name."""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path

from loguru import logger

from taslaunch.contexts.base import EmulatorContext


class ContextRegistry:
    """Discovers and manages emulator context classes."""

    def __init__(self) -> None:
        self._contexts: dict[str, type[EmulatorContext]] = {}

    def discover(self) -> None:
        """Auto-discover all contexts in the ``taslaunch.contexts`` package.

        Scans sub-packages for a ``context`` module holding classes that
        inherit from ``EmulatorContext`` and registers them.
        """
        contexts_dir = Path(__file__).parent
        for finder, module_name, is_pkg in pkgutil.iter_modules([str(contexts_dir)]):
            if not is_pkg:
                continue
            full_module = f"taslaunch.contexts.{module_name}.context"
            try:
                mod = importlib.import_module(full_module)
            except ImportError as e:
                logger.warning("Failed to load context {}: {}", full_module, e)
                continue
            for attr_name in dir(mod):
                attr = getattr(mod, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, EmulatorContext)
                    and attr is not EmulatorContext
                    and attr.__module__ == full_module
                ):
                    self.register(attr)
                    logger.debug("Discovered context: {} ({})", attr.name, full_module)

    def register(self, context_cls: type[EmulatorContext]) -> None:
        """Manually register a context class."""
        self._contexts[context_cls.name] = context_cls

    def get(self, name: str) -> type[EmulatorContext] | None:
        """Get a registered context class by name (case-insensitive)."""
        return self._contexts.get(name.lower())

    def all(self) -> list[type[EmulatorContext]]:
        """Return all registered context classes."""
        return list(self._contexts.values())

    def names(self) -> list[str]:
        """Return names of all registered contexts, sorted."""
        return sorted(self._contexts)
