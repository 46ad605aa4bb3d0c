"""cryptgen: procedural dungeon levels and grid line-of-sight.

Public entry points live in :mod:`cryptgen.dungeon`.
"""

from .logging_utils import get_logger, log  # noqa: F401

__version__ = "0.1.0"

__all__ = ["get_logger", "log", "__version__"]
