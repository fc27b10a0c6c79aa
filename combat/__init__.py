"""
Dawn combat

Turn-based combat between the Dawn and a single enemy: action
resolution, enemy decisions, status effects, encounters and loot.

Quick Start:
    from combat import CombatSessionManager, ContentTables

    content = ContentTables.load()
    manager = CombatSessionManager(content, ledger)
    manager.start("scavenger", region_id="void")
    result = manager.perform_player_action("plasma-cannon")
"""

__version__ = "0.1.0"

from combat.content import ContentTables
from combat.components import CombatSession, CombatantStats, LogEntryType, Outcome
from combat.battle import (
    ActionResult,
    CombatError,
    CombatEvent,
    CombatSessionManager,
    ContentLookup,
    ResourceLedger,
)

__all__ = [
    # Content
    "ContentTables",
    # State
    "CombatSession",
    "CombatantStats",
    "LogEntryType",
    "Outcome",
    # Battle
    "ActionResult",
    "CombatError",
    "CombatEvent",
    "CombatSessionManager",
    "ContentLookup",
    "ResourceLedger",
]
