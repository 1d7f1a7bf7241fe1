"""Graph widget configuration schema and loadout migration."""

from .version import __version__

__all__ = ["__version__"]
