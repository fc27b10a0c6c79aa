"""
Engine infrastructure shared by the combat packages.

Quick Start:
    from engine.core import EventBus, CombatConfig
    from engine.resources.database import Database

    events = EventBus()
    config = CombatConfig(battle_log_limit=100)
    database = Database("combat/data")
    database.load_all()
"""

__version__ = "0.1.0"

from engine.core import (
    CombatConfig,
    Component,
    register_component,
    EventBus,
    Event,
)

__all__ = [
    # Config
    "CombatConfig",
    # Components
    "Component",
    "register_component",
    # Events
    "EventBus",
    "Event",
]
