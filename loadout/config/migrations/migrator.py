"""
Graph widget migration utilities.

A migration rule pairs the software version that changed the graph schema
with a function that upgrades a stored graph record to that shape. Rules
work on the record as it was saved (a dict keyed by the stored field
names) because an old record need not validate against the current
GraphConfig. MigrationRegistry holds the rules in ascending version order,
migrate_graph applies every rule newer than the version a record was saved
with and load_graph validates the result.
"""

import logging
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Iterator, Optional

from pydantic import BaseModel, Field, ConfigDict

from ..errors import MigrationRefusedError
from ..models.graph import GraphConfig
from .versions import compare_versions, parse_version

logger = logging.getLogger(__name__)


class Refusal(BaseModel):
    """Returned by a migration function that cannot upgrade a graph."""

    message: str
    notice: bool = True

    model_config = ConfigDict(frozen=True)


class Migration(BaseModel):
    """A schema change and the function that upgrades a stored graph to it."""

    version: str
    migrate: Callable[[dict[str, Any]], Optional[Refusal]]

    model_config = ConfigDict(frozen=True)


class MigrationResult(BaseModel):
    """Outcome of migrating one graph."""

    source_version: str
    applied: list[str] = Field(default_factory=list)
    refused_by: Optional[str] = None
    refusal: Optional[Refusal] = None

    @property
    def ok(self) -> bool:
        return self.refusal is None

    def raise_for_refusal(self) -> None:
        """Raise MigrationRefusedError if a rule refused the graph."""
        if self.refusal is not None:
            raise MigrationRefusedError(
                self.refusal.message,
                version=self.refused_by,
                notice_override=self.refusal.notice,
            )


class MigrationRegistry:
    """
    Immutable collection of migrations sorted by ascending version.

    Raises:
        InvalidVersionError: If a migration version is malformed
        ValueError: If two migrations share a version
    """

    def __init__(self, migrations: Iterable[Migration]):
        migrations = list(migrations)
        for mig in migrations:
            parse_version(mig.version)

        ordered = sorted(migrations, key=cmp_to_key(lambda a, b: compare_versions(a.version, b.version)))
        for prev, cur in zip(ordered, ordered[1:]):
            if compare_versions(prev.version, cur.version) == 0:
                raise ValueError(
                    f"Duplicate migration version {cur.version} (also registered as {prev.version})"
                )
        self._migrations = tuple(ordered)

    @property
    def migrations(self) -> tuple[Migration, ...]:
        return self._migrations

    @property
    def newest_version(self) -> Optional[str]:
        """Version of the newest migration, None when empty."""
        return self._migrations[-1].version if self._migrations else None

    def pending(self, source_version: str) -> list[Migration]:
        """Migrations that apply to a graph saved with source_version, in order."""
        parse_version(source_version)
        return [mig for mig in self._migrations if compare_versions(mig.version, source_version) > 0]

    def __iter__(self) -> Iterator[Migration]:
        return iter(self._migrations)

    def __len__(self) -> int:
        return len(self._migrations)


def migrate_graph(
    record: dict[str, Any],
    source_version: str,
    registry: Optional[MigrationRegistry] = None,
) -> MigrationResult:
    """
    Migrate a stored graph record in place from source_version to the current schema.

    Migrations stop at the first refusal. Changes made by earlier
    migrations are kept.

    Args:
        record: Stored graph, owned by the caller for the duration of the call
        source_version: Software version the graph was saved with
        registry: Migrations to apply (defaults to GRAPH_MIGRATIONS)

    Returns:
        MigrationResult listing the applied versions and any refusal

    Raises:
        InvalidVersionError: If source_version is malformed
    """
    if registry is None:
        # Import here to avoid circular imports
        from . import GRAPH_MIGRATIONS
        registry = GRAPH_MIGRATIONS

    result = MigrationResult(source_version=source_version)
    key = record.get("key", "<no key>")
    for mig in registry.pending(source_version):
        refusal = mig.migrate(record)
        if refusal is not None:
            logger.warning(f"Migration to {mig.version} refused graph {key}: {refusal.message}")
            result.refused_by = mig.version
            result.refusal = refusal
            return result

        logger.info(f"Migrated graph {key} to {mig.version}")
        result.applied.append(mig.version)

    return result


def load_graph(
    record: dict[str, Any],
    source_version: str,
    registry: Optional[MigrationRegistry] = None,
) -> GraphConfig:
    """
    Migrate a stored graph record and validate it as a GraphConfig.

    Raises:
        InvalidVersionError: If source_version is malformed
        MigrationRefusedError: If a migration refused the record
        ValidationError: If the migrated record does not fit the schema
    """
    migrate_graph(record, source_version, registry).raise_for_refusal()
    return GraphConfig.model_validate(record)
