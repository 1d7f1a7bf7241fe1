"""
Pydantic-based graph widget configuration.

This package provides:
- Type-safe graph widget models with documented defaults
- Version ordering of release strings
- Version-ordered graph migrations
- Loadout file loading, migration and saving
- JSON schema generation
"""

from .errors import (
    InvalidVersionError,
    LoadoutError,
    LoadoutFormatError,
    MigrationRefusedError,
    SignatureError,
)
from .loader import Loadout, LoadoutLoader, Signature
from .migrations import GRAPH_MIGRATIONS, MigrationRegistry, compare_versions, migrate_graph
from .models import GraphConfig, make_default_graph

__all__ = [
    "GRAPH_MIGRATIONS",
    "GraphConfig",
    "InvalidVersionError",
    "Loadout",
    "LoadoutError",
    "LoadoutFormatError",
    "LoadoutLoader",
    "MigrationRefusedError",
    "MigrationRegistry",
    "Signature",
    "SignatureError",
    "compare_versions",
    "make_default_graph",
    "migrate_graph",
]
