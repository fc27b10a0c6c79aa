"""
Component base class for combat state records.

Components are validated data containers. Combat state (combatant stats,
status effects, the session aggregate) is expressed as components so that:
- Invalid values are rejected on construction and assignment
- A session can be snapshotted and restored through JSON
- Tests can build state directly without going through the engine

Usage:
    class Hull(Component):
        current: int
        maximum: int

    @register_component
    class Shield(Component):
        current: int = 0
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


class Component(BaseModel):
    """
    Base class for all combat state components.

    Components use Pydantic for:
    - Automatic validation
    - JSON serialization (snapshot/restore)
    - Type hints
    - Default values

    Components carry read helpers and small clamped mutators (damage,
    repair, clearing statuses); the battle systems decide when to call them.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
        extra='forbid',
    )

    # Key under which register_component files the class
    _type_name: ClassVar[str] = ""

    @classmethod
    def get_type_name(cls) -> str:
        """Get the component type name for serialization."""
        return cls._type_name or cls.__name__

    def clone(self) -> Component:
        """Create a deep copy of this component."""
        return self.model_copy(deep=True)

    def snapshot(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict."""
        return self.model_dump(mode="json")

    @classmethod
    def restore(cls, data: dict[str, Any]) -> Component:
        """Rebuild a component from a snapshot."""
        return cls.model_validate(data)


# Registry of component types for deserialization
_component_registry: dict[str, type[Component]] = {}


def register_component(cls: type[Component]) -> type[Component]:
    """
    Decorator to register a component type.

    Usage:
        @register_component
        class Hull(Component):
            current: int
    """
    type_name = cls.get_type_name()
    _component_registry[type_name] = cls
    return cls


def get_component_type(type_name: str) -> type[Component] | None:
    """Get component class by type name."""
    return _component_registry.get(type_name)


def get_all_component_types() -> dict[str, type[Component]]:
    """Get all registered component types."""
    return _component_registry.copy()
