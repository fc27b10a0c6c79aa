"""
Content definitions - immutable catalog records for actions, enemies, regions.

Definitions are loaded once (from the content database or built in code)
and never mutated by the engine.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from combat.components.stats import StatusKind


class ContentModel(BaseModel):
    """Base for read-only content records."""

    model_config = ConfigDict(frozen=True, extra='forbid')


class ActionCategory(str, Enum):
    """Player action categories."""
    SHIELD = "SHIELD"
    WEAPON = "WEAPON"
    REPAIR = "REPAIR"
    SABOTAGE = "SABOTAGE"


class ConditionType(str, Enum):
    """When an enemy action may be chosen."""
    ALWAYS = "ALWAYS"
    RANDOM = "RANDOM"
    HEALTH_THRESHOLD = "HEALTH_THRESHOLD"
    SHIELD_THRESHOLD = "SHIELD_THRESHOLD"


class ResourceCost(ContentModel):
    """Resource paid to perform a player action."""
    resource_kind: str
    amount: int = Field(default=0, ge=0)


class ResourceDelta(ContentModel):
    """A signed change to one resource pool."""
    resource_kind: str
    amount: int


class StatusEffectSpec(ContentModel):
    """Status effect an action applies to its target."""
    kind: StatusKind
    duration: int = Field(ge=0)
    magnitude: float = 0.0


class ActionEffect(ContentModel):
    """
    Effect fields shared by player actions and enemy moves.

    Attributes:
        damage: Hull damage, absorbed by shields first
        shield_damage: Damage applied to shields only
        shield_repair: Shield restored to the actor
        hull_repair: Hull restored to the actor
        status_effect: Effect pushed onto the target
        cooldown: Rounds before the action can be used again
    """
    damage: Optional[int] = Field(default=None, ge=0)
    shield_damage: Optional[int] = Field(default=None, ge=0)
    shield_repair: Optional[int] = Field(default=None, ge=0)
    hull_repair: Optional[int] = Field(default=None, ge=0)
    status_effect: Optional[StatusEffectSpec] = None
    cooldown: int = Field(default=0, ge=0)


class ActionDefinition(ActionEffect):
    """A player combat action."""
    id: str
    name: str = ""
    description: str = ""
    category: ActionCategory = ActionCategory.WEAPON
    cost: ResourceCost

    @property
    def display_name(self) -> str:
        return self.name or self.id


class UseCondition(ContentModel):
    """
    Eligibility rule for an enemy action.

    Attributes:
        type: Condition kind
        probability: RANDOM eligibility chance; also the action's draw weight
        threshold: Fraction (0-1) at or below which a threshold action unlocks
    """
    type: ConditionType = ConditionType.ALWAYS
    probability: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    threshold: Optional[float] = Field(default=None, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _check_parameters(self) -> UseCondition:
        if self.type == ConditionType.RANDOM and self.probability is None:
            raise ValueError("RANDOM condition requires a probability")
        if self.type in (ConditionType.HEALTH_THRESHOLD, ConditionType.SHIELD_THRESHOLD):
            if self.threshold is None:
                raise ValueError(f"{self.type.value} condition requires a threshold")
        return self


class EnemyActionDefinition(ActionEffect):
    """A move an enemy can perform on its turn."""
    id: str
    name: str = ""
    description: str = ""
    use_condition: UseCondition = Field(default_factory=UseCondition)

    @property
    def display_name(self) -> str:
        return self.name or self.id


class LootEntry(ContentModel):
    """A possible reward for defeating an enemy."""
    resource_kind: str
    amount: int = Field(ge=0)
    probability: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class EnemyDefinition(ContentModel):
    """Static data for an enemy type."""
    id: str
    name: str = ""
    description: str = ""
    max_health: int = Field(gt=0)
    max_shield: int = Field(default=0, ge=0)
    actions: list[str] = Field(default_factory=list)
    loot: list[LootEntry] = Field(default_factory=list)
    region_affinity: Optional[str] = None
    is_boss: bool = False

    @property
    def display_name(self) -> str:
        return self.name or self.id


class EnemyWeight(ContentModel):
    """Relative spawn weight of an enemy in a region."""
    enemy_id: str
    weight: float = Field(gt=0)


class RegionDefinition(ContentModel):
    """A region of space and the enemies that spawn there."""
    id: str
    name: str = ""
    description: str = ""
    encounter_chance: float = Field(default=0.0, ge=0.0, le=1.0)
    enemy_weights: list[EnemyWeight] = Field(default_factory=list)

    @property
    def display_name(self) -> str:
        return self.name or self.id
