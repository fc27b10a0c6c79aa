"""
Engine configuration.
"""

from __future__ import annotations

from typing import Optional, Sequence

DEFAULT_PENALIZED_RESOURCES = ("energy", "insight", "crew", "scrap")


class CombatConfig:
    """Configuration for the combat engine."""

    def __init__(
        self,
        retreat_penalty: float = 0.25,
        penalized_resources: Optional[Sequence[str]] = None,
        battle_log_limit: int = 50,
        default_action_weight: float = 0.5,
        default_player_health: int = 100,
        default_player_shield: int = 50,
    ):
        if not 0.0 <= retreat_penalty <= 1.0:
            raise ValueError(f"retreat_penalty must be in [0, 1], got {retreat_penalty}")
        if battle_log_limit < 1:
            raise ValueError(f"battle_log_limit must be positive, got {battle_log_limit}")
        if default_action_weight <= 0:
            raise ValueError(
                f"default_action_weight must be positive, got {default_action_weight}"
            )

        self.retreat_penalty = retreat_penalty
        self.penalized_resources = tuple(
            penalized_resources if penalized_resources is not None
            else DEFAULT_PENALIZED_RESOURCES
        )
        self.battle_log_limit = battle_log_limit
        self.default_action_weight = default_action_weight
        self.default_player_health = default_player_health
        self.default_player_shield = default_player_shield
