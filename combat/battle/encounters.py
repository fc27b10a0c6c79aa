"""
Encounter selection - region encounter rolls and weighted enemy picks.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence, TypeVar

from combat.content.definitions import RegionDefinition

logger = logging.getLogger(__name__)

T = TypeVar("T")


def weighted_choice(options: Sequence[T], weights: Sequence[float], rng: random.Random) -> T:
    """
    Pick one option with probability proportional to its weight.

    Draws a value in [0, total) and subtracts weights in order until the
    remainder is <= 0. If rounding leaves nothing selected, the last
    option is returned.

    Raises:
        ValueError: if options is empty or lengths differ
    """
    if not options:
        raise ValueError("weighted_choice requires at least one option")
    if len(options) != len(weights):
        raise ValueError("options and weights must have the same length")

    total = sum(weights)
    remainder = rng.random() * total
    logger.debug(f"Weighted draw {remainder:.4f} of {total}")

    for option, weight in zip(options, weights):
        remainder -= weight
        if remainder <= 0:
            return option

    return options[-1]


class EncounterSelector:
    """
    Decides whether a jump triggers combat and which enemy spawns.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def roll_encounter(self, region: RegionDefinition) -> bool:
        """Roll the region's encounter chance."""
        draw = self._rng.random()
        triggered = draw < region.encounter_chance
        logger.debug(
            f"Encounter roll in {region.id}: {draw:.4f} vs {region.encounter_chance} "
            f"-> {'encounter' if triggered else 'clear'}"
        )
        return triggered

    def select_enemy(self, region: RegionDefinition) -> str:
        """
        Pick an enemy id from the region's weighted spawn list.

        The caller must check that ``region.enemy_weights`` is non-empty.
        """
        entries = region.enemy_weights
        chosen = weighted_choice(entries, [e.weight for e in entries], self._rng)
        logger.debug(f"Selected enemy {chosen.enemy_id} in {region.id}")
        return chosen.enemy_id

    def generate_encounter(self, region: RegionDefinition) -> Optional[str]:
        """
        Roll for an encounter and pick its enemy.

        Returns:
            Enemy id, or None when no encounter happens
        """
        if not region.enemy_weights:
            logger.debug(f"No enemies spawn in {region.id}")
            return None
        if not self.roll_encounter(region):
            return None
        return self.select_enemy(region)
