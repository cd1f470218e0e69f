"""Tests for context discovery."""

from __future__ import annotations

from taslaunch.contexts import BizHawkContext, FceuxContext, GensContext
from taslaunch.contexts.registry import ContextRegistry


class TestContextRegistry:
    def test_discovers_all_emulators(self) -> None:
        registry = ContextRegistry()
        registry.discover()
        assert registry.names() == ["bizhawk", "fceux", "gens"]
        assert registry.get("bizhawk") is BizHawkContext
        assert registry.get("FCEUX") is FceuxContext
        assert registry.get("gens") is GensContext

    def test_unknown_name(self) -> None:
        registry = ContextRegistry()
        registry.discover()
        assert registry.get("snes9x") is None

    def test_manual_registration(self) -> None:
        registry = ContextRegistry()
        registry.register(GensContext)
        assert registry.all() == [GensContext]
