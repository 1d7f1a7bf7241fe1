"""
Loadout file loader with signature checking and graph migration.
"""

import json
import logging
import shutil
from pathlib import Path
from typing import Any, Union

from pydantic import BaseModel, Field, ConfigDict, field_validator

from ..version import __version__
from .errors import LoadoutFormatError, SignatureError
from .migrations import load_graph
from .migrations.versions import compare_versions, parse_version
from .models.graph import GraphConfig
from .models.widget import WidgetType

logger = logging.getLogger(__name__)

# Signature code every loadout file must carry
LOADOUT_SIGNATURE_CODE = "loadout"


class Signature(BaseModel):
    """Identifies a loadout file and the software version that wrote it."""

    code: str = Field(description="File kind marker")
    version: str = Field(description="Software version that last saved the file")

    model_config = ConfigDict(extra='allow')

    @field_validator('version', mode='after')
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Check the version parses."""
        parse_version(v)
        return v


class Loadout(BaseModel):
    """A loadout after migration: graphs as models, other widgets as raw dicts."""

    signature: Signature
    widgets: list[Union[GraphConfig, dict[str, Any]]] = Field(default_factory=list)

    model_config = ConfigDict(extra='allow')

    @property
    def graphs(self) -> list[GraphConfig]:
        return [w for w in self.widgets if isinstance(w, GraphConfig)]


class LoadoutLoader:
    """
    Loads and saves loadout files, migrating graph widgets on load.

    Features:
    - Signature and version check
    - Graph migration from the saved version to the current schema
    - Backup creation before migrating an older file
    - Non-graph widgets passed through unchanged
    """

    def __init__(self, path: Path):
        """
        Initialize the loader.

        Args:
            path: Path to the loadout JSON file
        """
        self.path = Path(path)

    def load_raw(self) -> dict[str, Any]:
        """
        Load the raw loadout without validation.

        Returns:
            Raw loadout dictionary
        """
        if not self.path.exists():
            raise FileNotFoundError(f"Loadout file not found: {self.path}")

        with open(self.path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        logger.info(f"Loaded loadout from {self.path}")
        return data

    def load_and_migrate(self) -> Loadout:
        """
        Load the loadout and migrate its graph widgets to the current version.

        Returns:
            Migrated Loadout tagged with the current version

        Raises:
            SignatureError: If the file is not a loadout
            InvalidVersionError: If the signature version is malformed
            LoadoutFormatError: If the widget list is malformed
            MigrationRefusedError: If a graph is too old to migrate
        """
        data = self.load_raw()

        if not isinstance(data, dict) or not isinstance(data.get("signature"), dict):
            raise SignatureError(f"{self.path} has no loadout signature")
        raw_signature = data["signature"]
        if raw_signature.get("code") != LOADOUT_SIGNATURE_CODE:
            raise SignatureError(
                f"{self.path} has signature code {raw_signature.get('code')!r}, "
                f"expected {LOADOUT_SIGNATURE_CODE!r}"
            )
        # Checked separately so a bad version surfaces as InvalidVersionError
        source_version = raw_signature.get("version")
        parse_version(source_version)

        order = compare_versions(source_version, __version__)
        if order < 0:
            logger.info(f"Loadout needs migration from {source_version} to {__version__}")
            self._create_backup()
        elif order > 0:
            logger.warning(
                f"Loadout was saved by newer version {source_version} "
                f"(running {__version__}); loading without migration"
            )

        raw_widgets = data.get("widgets", [])
        if not isinstance(raw_widgets, list):
            raise LoadoutFormatError(
                f"{self.path}: 'widgets' must be a list, got {type(raw_widgets).__name__}"
            )

        widgets = []
        for index, raw_widget in enumerate(raw_widgets):
            if not isinstance(raw_widget, dict):
                raise LoadoutFormatError(
                    f"{self.path}: widget {index} must be an object, got {type(raw_widget).__name__}"
                )
            if raw_widget.get("widgetType") != WidgetType.GRAPH.value:
                widgets.append(raw_widget)
                continue

            # Migrate the stored record first; old shapes need not validate
            widgets.append(load_graph(raw_widget, source_version))

        signature = Signature.model_validate({**raw_signature, "version": __version__})
        return Loadout(signature=signature, widgets=widgets)

    def save(self, loadout: Loadout) -> None:
        """
        Save the loadout to disk tagged with the current version.

        Args:
            loadout: Loadout to save
        """
        save_data = loadout.model_dump(mode='json', by_alias=True)
        save_data["signature"]["version"] = __version__

        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(save_data, f, indent=2, ensure_ascii=False)

        logger.info(f"Saved loadout to {self.path}")

    def _create_backup(self) -> None:
        """Create a backup of the current loadout file."""
        if not self.path.exists():
            return

        backup_path = self.path.with_suffix('.json.backup')

        # Don't overwrite existing backup
        if backup_path.exists():
            logger.info(f"Backup already exists: {backup_path}")
            return

        shutil.copy2(self.path, backup_path)
        logger.info(f"Created backup: {backup_path}")
