"""
Battle results - typed outcomes of session operations.

Failed operations are reported through ``error`` and never change the
session.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

from combat.components.session import CombatSession, Outcome
from combat.content.definitions import ResourceCost, ResourceDelta, StatusEffectSpec

if TYPE_CHECKING:
    from combat.battle.actions import ActionOutcome


class CombatError(Enum):
    """Why a combat operation was rejected."""
    NOT_ACTIVE = auto()
    ALREADY_ACTIVE = auto()
    UNKNOWN_ENEMY = auto()
    UNKNOWN_ACTION = auto()
    ON_COOLDOWN = auto()
    INSUFFICIENT_RESOURCE = auto()
    ACTION_IN_PROGRESS = auto()


@dataclass
class CommandResult:
    """Result of a session operation."""
    success: bool = True
    error: Optional[CombatError] = None
    message: str = ""

    @classmethod
    def failure(cls, error: CombatError, message: str, **kwargs) -> CommandResult:
        return cls(success=False, error=error, message=message, **kwargs)


@dataclass
class StartResult(CommandResult):
    """Result of starting a session."""
    session: Optional[CombatSession] = None


@dataclass
class ActionResult(CommandResult):
    """Result of a player action, including the enemy's reply."""
    action_id: str = ""
    damage_dealt: int = 0
    shield_damage: int = 0
    health_repaired: int = 0
    shield_repaired: int = 0
    status_effect_applied: Optional[StatusEffectSpec] = None
    resources_consumed: list[ResourceCost] = field(default_factory=list)
    enemy_action: Optional[str] = None
    enemy_outcome: Optional[ActionOutcome] = None
    outcome: Optional[Outcome] = None
    loot: list[ResourceDelta] = field(default_factory=list)


@dataclass
class RetreatResult(CommandResult):
    """Result of retreating from a session."""
    penalties: dict[str, int] = field(default_factory=dict)


@dataclass
class EndResult(CommandResult):
    """Result of ending a session."""
    outcome: Optional[Outcome] = None
    loot: list[ResourceDelta] = field(default_factory=list)


@dataclass
class AvailableAction:
    """A player action as a host menu would show it."""
    action_id: str
    name: str
    cooldown: int = 0
    affordable: bool = True

    @property
    def usable(self) -> bool:
        return self.cooldown == 0 and self.affordable
