"""
Battle module - turn-based combat resolution.

Provides:
- Session lifecycle (start, player actions, retreat, end)
- Action resolution (shield absorption, repairs, status effects)
- Enemy decision making
- Status effect decay
- Encounter rolls and weighted enemy selection
- Loot resolution
"""

from combat.battle.interfaces import ContentLookup, ResourceLedger
from combat.battle.results import (
    ActionResult,
    AvailableAction,
    CombatError,
    CommandResult,
    EndResult,
    RetreatResult,
    StartResult,
)
from combat.battle.actions import (
    ActionOutcome,
    apply_action,
    describe_enemy_action,
    describe_player_action,
)
from combat.battle.status import (
    StatusEffectProcessor,
    create_effect,
    damage_bonus,
    incoming_damage,
)
from combat.battle.encounters import EncounterSelector, weighted_choice
from combat.battle.enemy_ai import EnemyDecisionModule
from combat.battle.rewards import RewardResolver
from combat.battle.system import (
    CombatEvent,
    CombatSessionManager,
    END_MESSAGES,
)

__all__ = [
    # Interfaces
    "ContentLookup",
    "ResourceLedger",
    # Results
    "ActionResult",
    "AvailableAction",
    "CombatError",
    "CommandResult",
    "EndResult",
    "RetreatResult",
    "StartResult",
    # Actions
    "ActionOutcome",
    "apply_action",
    "describe_enemy_action",
    "describe_player_action",
    # Status
    "StatusEffectProcessor",
    "create_effect",
    "damage_bonus",
    "incoming_damage",
    # Encounters
    "EncounterSelector",
    "weighted_choice",
    # Enemy AI
    "EnemyDecisionModule",
    # Rewards
    "RewardResolver",
    # System
    "CombatEvent",
    "CombatSessionManager",
    "END_MESSAGES",
]
