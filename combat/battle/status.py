"""
Status effect processing - round decay and effect-driven modifiers.
"""

from __future__ import annotations

import logging
import math

from combat.components.session import CombatSession
from combat.components.stats import CombatantStats, StatusEffectInstance, StatusKind
from combat.content.definitions import StatusEffectSpec

logger = logging.getLogger(__name__)


def create_effect(spec: StatusEffectSpec) -> StatusEffectInstance:
    """Instantiate a status effect from its content spec."""
    return StatusEffectInstance(
        kind=spec.kind,
        remaining_turns=spec.duration,
        magnitude=spec.magnitude,
    )


def damage_bonus(kind: StatusKind, magnitude: float, damage: int) -> int:
    """
    Extra incoming damage contributed by one status kind.

    Only WEAKEN modifies damage. STUN, EXPOSE and DISABLE are carried,
    decayed and reported, but have no resolution effect.
    """
    if kind == StatusKind.WEAKEN:
        return math.floor(damage * magnitude)
    elif kind in (StatusKind.STUN, StatusKind.EXPOSE, StatusKind.DISABLE):
        return 0
    raise ValueError(f"Unhandled status kind: {kind}")


def incoming_damage(target: CombatantStats, damage: int) -> int:
    """
    Damage after the target's status modifiers.

    Only the oldest instance of each kind counts.
    """
    total = damage
    for kind in StatusKind:
        effect = target.first_status(kind)
        if effect is not None:
            total += damage_bonus(kind, effect.magnitude, damage)
    return max(0, total)


class StatusEffectProcessor:
    """
    Decays timed status effects once per completed round.

    Usage:
        processor = StatusEffectProcessor()
        processor.process_round(session)
    """

    def decay(self, stats: CombatantStats) -> list[StatusEffectInstance]:
        """
        Tick every effect down by one round and drop the finished ones.

        Returns:
            Expired effects
        """
        expired = []
        remaining = []
        for effect in stats.status_effects:
            if effect.remaining_turns <= 1:
                effect.remaining_turns = 0
                expired.append(effect)
            else:
                effect.remaining_turns -= 1
                remaining.append(effect)
        stats.status_effects = remaining
        return expired

    def process_round(self, session: CombatSession) -> dict[str, list[StatusEffectInstance]]:
        """Decay effects on both combatants."""
        expired = {
            "player": self.decay(session.player),
            "enemy": self.decay(session.enemy),
        }
        for side, effects in expired.items():
            for effect in effects:
                logger.debug(f"{effect.kind.value} expired on {side} (session {session.id})")
        return expired
