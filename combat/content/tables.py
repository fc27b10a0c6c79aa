"""
Content tables - read-only lookup over combat definitions.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from engine.resources.database import Database
from combat.content.definitions import (
    ActionDefinition,
    EnemyActionDefinition,
    EnemyDefinition,
    RegionDefinition,
)

logger = logging.getLogger(__name__)

BUNDLED_DATA_PATH = Path(__file__).resolve().parent.parent / "data"

M = TypeVar("M", bound=BaseModel)


class ContentTables:
    """
    Catalog of actions, enemy moves, enemies and regions.

    Lookups return None for unknown ids; deciding what an absent record
    means is the caller's job.
    """

    def __init__(
        self,
        actions: Iterable[ActionDefinition] = (),
        enemy_actions: Iterable[EnemyActionDefinition] = (),
        enemies: Iterable[EnemyDefinition] = (),
        regions: Iterable[RegionDefinition] = (),
    ):
        self._actions: dict[str, ActionDefinition] = {}
        self._enemy_actions: dict[str, EnemyActionDefinition] = {}
        self._enemies: dict[str, EnemyDefinition] = {}
        self._regions: dict[str, RegionDefinition] = {}

        for action in actions:
            self.register_action(action)
        for enemy_action in enemy_actions:
            self.register_enemy_action(enemy_action)
        for enemy in enemies:
            self.register_enemy(enemy)
        for region in regions:
            self.register_region(region)

    @classmethod
    def from_database(cls, database: Database) -> ContentTables:
        """
        Build tables from a loaded Database.

        Records that pass the JSON schema but fail model validation are
        logged and skipped.
        """
        return cls(
            actions=_build_all(ActionDefinition, database.actions),
            enemy_actions=_build_all(EnemyActionDefinition, database.enemy_actions),
            enemies=_build_all(EnemyDefinition, database.enemies),
            regions=_build_all(RegionDefinition, database.regions),
        )

    @classmethod
    def load(cls, data_path: Path | str | None = None) -> ContentTables:
        """Load and validate a content pack (defaults to the bundled one)."""
        database = Database(data_path if data_path is not None else BUNDLED_DATA_PATH)
        database.load_all()
        return cls.from_database(database)

    def register_action(self, action: ActionDefinition) -> None:
        """Register a player action."""
        self._actions[action.id] = action

    def register_enemy_action(self, action: EnemyActionDefinition) -> None:
        """Register an enemy action."""
        self._enemy_actions[action.id] = action

    def register_enemy(self, enemy: EnemyDefinition) -> None:
        """Register an enemy type."""
        self._enemies[enemy.id] = enemy

    def register_region(self, region: RegionDefinition) -> None:
        """Register a region."""
        self._regions[region.id] = region

    def get_action(self, action_id: str) -> Optional[ActionDefinition]:
        return self._actions.get(action_id)

    def get_enemy_action(self, action_id: str) -> Optional[EnemyActionDefinition]:
        return self._enemy_actions.get(action_id)

    def get_enemy(self, enemy_id: str) -> Optional[EnemyDefinition]:
        return self._enemies.get(enemy_id)

    def get_region(self, region_id: str) -> Optional[RegionDefinition]:
        return self._regions.get(region_id)

    @property
    def actions(self) -> list[ActionDefinition]:
        """All player actions, in registration order."""
        return list(self._actions.values())

    @property
    def enemies(self) -> list[EnemyDefinition]:
        return list(self._enemies.values())

    @property
    def regions(self) -> list[RegionDefinition]:
        return list(self._regions.values())

    def validate_references(self) -> list[str]:
        """
        Find ids that are referenced but not defined.

        Returns:
            One message per dangling reference (empty when consistent)
        """
        problems = []

        for enemy in self._enemies.values():
            for action_id in enemy.actions:
                if action_id not in self._enemy_actions:
                    problems.append(
                        f"Enemy {enemy.id} references unknown enemy action {action_id}"
                    )
            if enemy.region_affinity and enemy.region_affinity not in self._regions:
                problems.append(
                    f"Enemy {enemy.id} has unknown region affinity {enemy.region_affinity}"
                )

        for region in self._regions.values():
            for entry in region.enemy_weights:
                if entry.enemy_id not in self._enemies:
                    problems.append(
                        f"Region {region.id} references unknown enemy {entry.enemy_id}"
                    )

        for problem in problems:
            logger.warning(problem)

        return problems


def _build_all(model: type[M], records: dict[str, Any]) -> list[M]:
    """Convert validated dicts into content models."""
    built = []
    for record_id, record in records.items():
        try:
            built.append(model.model_validate(record))
        except ValidationError as e:
            logger.error(f"Invalid {model.__name__} {record_id!r}: {e}")
    return built
