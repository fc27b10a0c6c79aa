"""
Content module - static definitions consumed by the combat engine.
"""

from combat.content.definitions import (
    ActionCategory,
    ActionDefinition,
    ActionEffect,
    ConditionType,
    EnemyActionDefinition,
    EnemyDefinition,
    EnemyWeight,
    LootEntry,
    RegionDefinition,
    ResourceCost,
    ResourceDelta,
    StatusEffectSpec,
    UseCondition,
)
from combat.content.tables import BUNDLED_DATA_PATH, ContentTables

__all__ = [
    "ActionCategory",
    "ActionDefinition",
    "ActionEffect",
    "ConditionType",
    "EnemyActionDefinition",
    "EnemyDefinition",
    "EnemyWeight",
    "LootEntry",
    "RegionDefinition",
    "ResourceCost",
    "ResourceDelta",
    "StatusEffectSpec",
    "UseCondition",
    "BUNDLED_DATA_PATH",
    "ContentTables",
]
