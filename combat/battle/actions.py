"""
Action resolution - damage, shields, repairs and status application.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from combat.components.stats import CombatantStats
from combat.content.definitions import ActionEffect, StatusEffectSpec
from combat.battle.status import create_effect, incoming_damage


@dataclass
class ActionOutcome:
    """What one action did to its actor and target."""
    damage: int = 0  # Effective damage after modifiers, before absorption
    shield_damage: int = 0
    damage_dealt: int = 0  # Hull damage actually taken
    health_repaired: int = 0
    shield_repaired: int = 0
    status_effect_applied: Optional[StatusEffectSpec] = None
    target_defeated: bool = False


def apply_action(
    actor: CombatantStats,
    target: CombatantStats,
    action: ActionEffect,
) -> ActionOutcome:
    """
    Apply an action's effects.

    Shared by player actions (actor=player, target=enemy) and enemy
    moves (actor=enemy, target=player). Damage is modified by the
    target's status effects, then absorbed by shields before reaching
    the hull. Repairs apply to the actor; status effects to the target.

    Args:
        actor: Stats of the combatant performing the action
        target: Stats of the combatant receiving it
        action: Player action or enemy move definition

    Returns:
        ActionOutcome describing the applied amounts
    """
    outcome = ActionOutcome()

    if action.damage:
        damage = incoming_damage(target, action.damage)
        outcome.damage = damage

        if target.shield > 0:
            absorbed = target.take_shield_damage(damage)
            outcome.shield_damage += absorbed
            remaining = damage - absorbed
            if remaining > 0:
                outcome.damage_dealt = target.take_hull_damage(remaining)
        else:
            outcome.damage_dealt = target.take_hull_damage(damage)

    if action.shield_damage:
        outcome.shield_damage += target.take_shield_damage(action.shield_damage)

    if action.shield_repair:
        outcome.shield_repaired = actor.repair_shield(action.shield_repair)

    if action.hull_repair:
        outcome.health_repaired = actor.repair_hull(action.hull_repair)

    if action.status_effect:
        target.status_effects.append(create_effect(action.status_effect))
        outcome.status_effect_applied = action.status_effect

    outcome.target_defeated = target.is_defeated
    return outcome


def describe_player_action(name: str, outcome: ActionOutcome) -> str:
    """Battle log text for a player action."""
    parts = []
    if outcome.damage:
        if outcome.shield_damage and outcome.damage_dealt:
            parts.append(
                f"damaged enemy shields for {outcome.shield_damage} "
                f"and hull for {outcome.damage_dealt}"
            )
        elif outcome.shield_damage:
            parts.append(f"damaged enemy shields for {outcome.shield_damage}")
        else:
            parts.append(f"damaged enemy hull for {outcome.damage_dealt}")
    if outcome.shield_repaired:
        parts.append(f"restored {outcome.shield_repaired} shields")
    if outcome.health_repaired:
        parts.append(f"repaired {outcome.health_repaired} hull integrity")

    message = f"{name} {' and '.join(parts)}" if parts else f"Used {name}"
    if outcome.status_effect_applied:
        message += f", applying {outcome.status_effect_applied.kind.value} effect"
    return message


def describe_enemy_action(enemy_name: str, move_name: str, outcome: ActionOutcome) -> str:
    """Battle log text for an enemy move."""
    hits = []
    if outcome.shield_damage:
        hits.append(f"{outcome.shield_damage} damage to your shields")
    if outcome.damage_dealt:
        hits.append(f"{outcome.damage_dealt} damage to your hull")

    message = f"{enemy_name} used {move_name}"
    if hits:
        message += f" dealing {' and '.join(hits)}"
    if outcome.status_effect_applied:
        message += f", applying {outcome.status_effect_applied.kind.value} effect"
    return message + "!"
