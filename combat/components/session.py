"""
Session components - the combat aggregate and its battle log.
"""

from __future__ import annotations

import time
import uuid
from enum import Enum
from typing import Any, Optional

from pydantic import Field

from engine.core.component import Component, register_component
from combat.components.stats import CombatantStats


class Outcome(str, Enum):
    """How a combat session ended."""
    VICTORY = "VICTORY"
    DEFEAT = "DEFEAT"
    RETREAT = "RETREAT"


class LogEntryType(str, Enum):
    """Battle log entry categories."""
    SYSTEM = "SYSTEM"
    PLAYER = "PLAYER"
    ENEMY = "ENEMY"
    ANALYSIS = "ANALYSIS"


def _new_id() -> str:
    return str(uuid.uuid4())


@register_component
class BattleLogEntry(Component):
    """One line of the battle log."""
    id: str = Field(default_factory=_new_id)
    type: LogEntryType = LogEntryType.SYSTEM
    text: str = ""
    timestamp: float = Field(default_factory=time.time)


@register_component
class CombatSession(Component):
    """
    State of one encounter between the player and a single enemy.

    A session is created active and becomes terminal exactly once, when an
    outcome is recorded. ``active`` is True iff ``outcome`` is None.

    Attributes:
        id: Unique session id
        active: Whether actions may still be performed
        turn: Current round, starting at 1
        player: Player hull/shield (carried over between sessions)
        enemy: Enemy hull/shield (fresh per session)
        enemy_id: Content id of the enemy
        region_id: Region the encounter happened in, if known
        cooldowns: Player action id -> rounds until usable again
        enemy_cooldowns: Enemy action id -> rounds, for display only
        battle_log: Most recent log entries, oldest first
        outcome: Set when the session ends
        last_action_result: Result of the latest player action (not snapshotted)
    """
    id: str = Field(default_factory=_new_id)
    active: bool = True
    turn: int = Field(default=1, ge=1)
    player: CombatantStats = Field(default_factory=CombatantStats)
    enemy: CombatantStats = Field(default_factory=CombatantStats)
    enemy_id: str = ""
    region_id: Optional[str] = None
    cooldowns: dict[str, int] = Field(default_factory=dict)
    enemy_cooldowns: dict[str, int] = Field(default_factory=dict)
    battle_log: list[BattleLogEntry] = Field(default_factory=list)
    outcome: Optional[Outcome] = None
    last_action_result: Optional[Any] = Field(default=None, exclude=True)

    def model_post_init(self, __context) -> None:
        """Keep ``active`` consistent with ``outcome``."""
        active = self.outcome is None
        if self.active != active:
            self.active = active

    @property
    def is_terminal(self) -> bool:
        return not self.active

    def cooldown_for(self, action_id: str) -> int:
        """Remaining cooldown for a player action (0 when ready)."""
        return self.cooldowns.get(action_id, 0)

    def add_log(self, entry_type: LogEntryType, text: str, limit: int = 50) -> BattleLogEntry:
        """
        Append a battle log entry, evicting the oldest past ``limit``.

        Returns:
            The new entry
        """
        entry = BattleLogEntry(type=entry_type, text=text)
        self.battle_log.append(entry)
        if len(self.battle_log) > limit:
            del self.battle_log[:len(self.battle_log) - limit]
        return entry

    def entries_of(self, entry_type: LogEntryType) -> list[BattleLogEntry]:
        """Log entries of a single type, oldest first."""
        return [e for e in self.battle_log if e.type == entry_type]
