"""
Victory rewards - probabilistic loot rolls.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from combat.content.definitions import EnemyDefinition, ResourceDelta

logger = logging.getLogger(__name__)


class RewardResolver:
    """Rolls an enemy's loot table once per victory."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def resolve_loot(self, enemy: EnemyDefinition) -> list[ResourceDelta]:
        """
        Roll every loot entry once.

        An entry is granted when its draw is below its probability;
        entries without a probability are always granted.

        Returns:
            Granted resource deltas, in loot table order
        """
        granted = []
        for entry in enemy.loot:
            draw = self._rng.random()
            if entry.probability is not None and draw >= entry.probability:
                logger.debug(
                    f"Loot {entry.resource_kind} x{entry.amount} missed "
                    f"({draw:.3f} >= {entry.probability})"
                )
                continue
            granted.append(ResourceDelta(resource_kind=entry.resource_kind, amount=entry.amount))
        return granted
