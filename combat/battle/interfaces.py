"""
Collaborator interfaces the battle engine consumes but does not implement.
"""

from __future__ import annotations

from typing import Optional, Protocol

from combat.content.definitions import (
    ActionDefinition,
    EnemyActionDefinition,
    EnemyDefinition,
    RegionDefinition,
)


class ResourceLedger(Protocol):
    """Protocol for the host's resource store."""

    def has_sufficient(self, kind: str, amount: float) -> bool:
        ...

    def apply_delta(self, kind: str, amount: float) -> None:
        """Credit (positive) or debit (negative) a resource pool."""
        ...

    def get_amount(self, kind: str) -> float:
        """Current amount of a pool (0 when the pool is unknown)."""
        ...


class ContentLookup(Protocol):
    """Protocol for read-only content tables."""

    @property
    def actions(self) -> list[ActionDefinition]:
        """Every player action, in registration order."""
        ...

    def get_action(self, action_id: str) -> Optional[ActionDefinition]:
        ...

    def get_enemy_action(self, action_id: str) -> Optional[EnemyActionDefinition]:
        ...

    def get_enemy(self, enemy_id: str) -> Optional[EnemyDefinition]:
        ...

    def get_region(self, region_id: str) -> Optional[RegionDefinition]:
        ...
