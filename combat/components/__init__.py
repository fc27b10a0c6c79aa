"""
Combat components - data records for combat state.

All components are Pydantic models. Resolution logic lives in
combat.battle; components only carry clamped mutation helpers.
"""

from combat.components.stats import (
    CombatantStats,
    StatusEffectInstance,
    StatusKind,
)
from combat.components.session import (
    BattleLogEntry,
    CombatSession,
    LogEntryType,
    Outcome,
)

__all__ = [
    # Stats
    "CombatantStats",
    "StatusEffectInstance",
    "StatusKind",
    # Session
    "BattleLogEntry",
    "CombatSession",
    "LogEntryType",
    "Outcome",
]
