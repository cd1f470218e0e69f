from .context import GensContext, GensVersion

__all__ = ["GensContext", "GensVersion"]
