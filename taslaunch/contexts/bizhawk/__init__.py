"""BizHawk launch context and release fingerprints."""

from .context import BizHawkContext
from .versions import KNOWN_VERSIONS, LEGACY_VERSIONS, UNSUPPORTED_VERSIONS

__all__ = [
    "BizHawkContext",
    "KNOWN_VERSIONS",
    "LEGACY_VERSIONS",
    "UNSUPPORTED_VERSIONS",
]
