"""Graph configuration migrations."""

from .baseline_0_13_0 import refuse_below_0_13_0
from .migrator import Migration, MigrationRegistry, MigrationResult, Refusal, load_graph, migrate_graph
from .versions import compare_versions, parse_version

# Built once at import; add a Migration here for every release that changes
# the graph schema.
GRAPH_MIGRATIONS = MigrationRegistry([
    Migration(version="0.13.0", migrate=refuse_below_0_13_0),
])

__all__ = [
    "GRAPH_MIGRATIONS",
    "Migration",
    "MigrationRegistry",
    "MigrationResult",
    "Refusal",
    "compare_versions",
    "load_graph",
    "migrate_graph",
    "parse_version",
]
