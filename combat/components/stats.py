"""
Combatant components - hull, shields, timed status effects.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import Field

from engine.core.component import Component, register_component


class StatusKind(str, Enum):
    """Status effect kinds carried by combatants."""
    WEAKEN = "WEAKEN"
    STUN = "STUN"
    EXPOSE = "EXPOSE"
    DISABLE = "DISABLE"


@register_component
class StatusEffectInstance(Component):
    """
    A single applied status effect.

    Attributes:
        kind: Type of status
        remaining_turns: Rounds left before the effect expires
        magnitude: Strength of effect (WEAKEN: extra damage fraction)
    """
    kind: StatusKind
    remaining_turns: int = Field(default=0, ge=0)
    magnitude: float = 0.0


@register_component
class CombatantStats(Component):
    """
    Hull and shield state for one side of a fight.

    Attributes:
        health: Current hull points
        max_health: Maximum hull points
        shield: Current shield points
        max_shield: Maximum shield points
        status_effects: Active effects, in application order
    """
    health: int = Field(default=100, ge=0)
    max_health: int = Field(default=100, ge=0)
    shield: int = Field(default=0, ge=0)
    max_shield: int = Field(default=0, ge=0)
    status_effects: list[StatusEffectInstance] = Field(default_factory=list)

    def model_post_init(self, __context) -> None:
        """Ensure current values don't exceed their maximums."""
        if self.health > self.max_health:
            self.health = self.max_health
        if self.shield > self.max_shield:
            self.shield = self.max_shield

    @property
    def health_fraction(self) -> float:
        """Hull as a fraction of maximum (0-1)."""
        if self.max_health <= 0:
            return 0.0
        return self.health / self.max_health

    @property
    def shield_fraction(self) -> float:
        """Shield as a fraction of maximum (0-1)."""
        if self.max_shield <= 0:
            return 0.0
        return self.shield / self.max_shield

    @property
    def is_defeated(self) -> bool:
        return self.health <= 0

    def has_status(self, kind: StatusKind) -> bool:
        """Check if any instance of a status is active."""
        return any(e.kind == kind for e in self.status_effects)

    def first_status(self, kind: StatusKind) -> Optional[StatusEffectInstance]:
        """Oldest active instance of a status, if any."""
        for effect in self.status_effects:
            if effect.kind == kind:
                return effect
        return None

    def take_shield_damage(self, amount: int) -> int:
        """
        Remove shield points.

        Returns:
            Shield actually removed
        """
        actual = min(max(0, amount), self.shield)
        self.shield -= actual
        return actual

    def take_hull_damage(self, amount: int) -> int:
        """
        Remove hull points, never below zero.

        Returns:
            Hull actually removed
        """
        actual = min(max(0, amount), self.health)
        self.health -= actual
        return actual

    def repair_shield(self, amount: int) -> int:
        """Restore shield up to maximum. Returns amount restored."""
        actual = min(max(0, amount), self.max_shield - self.shield)
        self.shield += actual
        return actual

    def repair_hull(self, amount: int) -> int:
        """Restore hull up to maximum. Returns amount restored."""
        actual = min(max(0, amount), self.max_health - self.health)
        self.health += actual
        return actual

    def clear_statuses(self) -> None:
        """Remove all status effects."""
        self.status_effects = []
