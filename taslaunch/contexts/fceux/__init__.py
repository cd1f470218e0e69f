from .context import FceuxContext

__all__ = ["FceuxContext"]
