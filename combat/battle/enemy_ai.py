"""
Enemy decision making - which move an enemy performs on its turn.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from combat.components.session import CombatSession
from combat.content.definitions import (
    ConditionType,
    EnemyActionDefinition,
    EnemyDefinition,
)
from combat.battle.encounters import weighted_choice
from combat.battle.interfaces import ContentLookup

logger = logging.getLogger(__name__)


class EnemyDecisionModule:
    """
    Chooses enemy moves.

    Each move's use condition is evaluated as an eligibility filter.
    One eligible move is used directly; several are resolved by a weighted
    draw on their probabilities; with none eligible the enemy falls back
    to the first move in its list.
    """

    def __init__(
        self,
        content: ContentLookup,
        rng: Optional[random.Random] = None,
        default_weight: float = 0.5,
    ):
        self._content = content
        self._rng = rng or random.Random()
        self._default_weight = default_weight

    def resolve_actions(self, enemy: EnemyDefinition) -> list[EnemyActionDefinition]:
        """Look up an enemy's moves, skipping ids missing from content."""
        actions = []
        for action_id in enemy.actions:
            action = self._content.get_enemy_action(action_id)
            if action is None:
                logger.warning(f"Enemy {enemy.id} references unknown action {action_id}")
                continue
            actions.append(action)
        return actions

    def is_eligible(self, action: EnemyActionDefinition, session: CombatSession) -> bool:
        """Evaluate one move's use condition against the enemy's state."""
        condition = action.use_condition

        if condition.type == ConditionType.ALWAYS:
            return True
        elif condition.type == ConditionType.RANDOM:
            return self._rng.random() < condition.probability
        elif condition.type == ConditionType.HEALTH_THRESHOLD:
            return session.enemy.health_fraction <= condition.threshold
        elif condition.type == ConditionType.SHIELD_THRESHOLD:
            return session.enemy.shield_fraction <= condition.threshold
        raise ValueError(f"Unhandled condition type: {condition.type}")

    def weight_of(self, action: EnemyActionDefinition) -> float:
        probability = action.use_condition.probability
        return probability if probability is not None else self._default_weight

    def select_action(
        self,
        enemy: EnemyDefinition,
        session: CombatSession,
    ) -> Optional[EnemyActionDefinition]:
        """
        Pick the move the enemy performs this turn.

        Returns:
            The chosen move, or None if the enemy has no resolvable moves
        """
        actions = self.resolve_actions(enemy)
        if not actions:
            logger.warning(f"Enemy {enemy.id} has no usable actions")
            return None

        eligible = [a for a in actions if self.is_eligible(a, session)]
        logger.debug(f"Eligible actions for {enemy.id}: {[a.id for a in eligible]}")

        if len(eligible) == 1:
            return eligible[0]
        if eligible:
            return weighted_choice(eligible, [self.weight_of(a) for a in eligible], self._rng)

        return actions[0]
