"""
Content Database.

Handles loading and validation of static combat content (actions,
enemy moves, enemies, regions).
"""

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema

# folder under database/ -> schema file under schemas/
CATEGORIES: dict[str, str] = {
    "actions": "action.schema.json",
    "enemy_actions": "enemy_action.schema.json",
    "enemies": "enemy.schema.json",
    "regions": "region.schema.json",
}


class Database:
    """
    Central storage for static combat content.

    Layout under data_path:
        schemas/<name>.schema.json
        database/<category>/*.json   (one record or a list of records per file)
    """

    def __init__(self, data_path: Path | str):
        self._data_path = Path(data_path)
        self._schemas: dict[str, Any] = {}

        # Data stores
        self.actions: dict[str, Any] = {}
        self.enemy_actions: dict[str, Any] = {}
        self.enemies: dict[str, Any] = {}
        self.regions: dict[str, Any] = {}

        self.logger = logging.getLogger(__name__)

    @property
    def data_path(self) -> Path:
        return self._data_path

    def load_all(self) -> None:
        """Load all data from disk."""
        self._load_schemas()

        for folder, schema_name in CATEGORIES.items():
            setattr(self, folder, self._load_category(folder, schema_name))

        self.logger.info(
            f"Loaded {len(self.actions)} actions, {len(self.enemy_actions)} enemy actions, "
            f"{len(self.enemies)} enemies, {len(self.regions)} regions."
        )

    def _load_schemas(self) -> None:
        """Load JSON schemas."""
        schema_dir = self._data_path / "schemas"
        if not schema_dir.exists():
            self.logger.warning(f"Schema directory not found: {schema_dir}")
            return

        for schema_file in schema_dir.glob("*.schema.json"):
            try:
                with open(schema_file, 'r') as f:
                    self._schemas[schema_file.name] = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                self.logger.error(f"Failed to load schema {schema_file}: {e}")

    def _load_category(self, folder: str, schema_name: str) -> dict[str, Any]:
        """Load all JSON files in a category folder."""
        category_dir = self._data_path / "database" / folder
        data_store: dict[str, Any] = {}

        if not category_dir.exists():
            self.logger.warning(f"Data directory not found: {category_dir}")
            return data_store

        schema = self._schemas.get(schema_name)
        if not schema:
            self.logger.warning(f"No schema found for {folder} ({schema_name})")
            return data_store

        for file_path in sorted(category_dir.glob("*.json")):
            try:
                with open(file_path, 'r') as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                self.logger.error(f"Failed to load {file_path}: {e}")
                continue

            records = data if isinstance(data, list) else [data]
            for record in records:
                try:
                    jsonschema.validate(instance=record, schema=schema)
                except jsonschema.ValidationError as e:
                    self.logger.error(f"Validation error in {file_path}: {e.message}")
                    continue

                record_id = record.get('id') if isinstance(record, dict) else None
                if record_id is None:
                    continue
                if record_id in data_store:
                    self.logger.warning(
                        f"Duplicate {folder} id {record_id!r} in {file_path} overrides earlier record"
                    )
                data_store[record_id] = record

        return data_store

    def get_action(self, action_id: str) -> dict[str, Any] | None:
        return self.actions.get(action_id)

    def get_enemy_action(self, action_id: str) -> dict[str, Any] | None:
        return self.enemy_actions.get(action_id)

    def get_enemy(self, enemy_id: str) -> dict[str, Any] | None:
        return self.enemies.get(enemy_id)

    def get_region(self, region_id: str) -> dict[str, Any] | None:
        return self.regions.get(region_id)
