"""
Core engine module.

Exports:
- CombatConfig: Engine configuration
- Component, register_component: Component base and registration
- EventBus, Event: Event system
"""

from engine.core.config import CombatConfig
from engine.core.component import (
    Component,
    register_component,
    get_component_type,
    get_all_component_types,
)
from engine.core.events import EventBus, Event

__all__ = [
    # Config
    "CombatConfig",
    # Components
    "Component",
    "register_component",
    "get_component_type",
    "get_all_component_types",
    # Events
    "EventBus",
    "Event",
]
