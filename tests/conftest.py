import os
import random
import sys

import pytest

# Ensure engine modules can be imported
sys.path.append(os.getcwd())

from combat.battle import CombatSessionManager
from combat.content import (
    ActionDefinition,
    ContentTables,
    EnemyActionDefinition,
    EnemyDefinition,
    RegionDefinition,
)


class FakeLedger:
    """In-memory resource ledger recording every delta it receives."""

    def __init__(self, pools=None):
        self.pools = dict(pools or {})
        self.deltas = []

    def has_sufficient(self, kind, amount):
        return self.pools.get(kind, 0) >= amount

    def apply_delta(self, kind, amount):
        self.pools[kind] = self.pools.get(kind, 0) + amount
        self.deltas.append((kind, amount))

    def get_amount(self, kind):
        return self.pools.get(kind, 0)


class StubRandom(random.Random):
    """Random whose draws come from a fixed list, then a default value."""

    def __init__(self, values=(), default=0.0):
        super().__init__(0)
        self.values = list(values)
        self.default = default

    def random(self):
        if self.values:
            return self.values.pop(0)
        return self.default


def build_content():
    return ContentTables(
        actions=[
            ActionDefinition.model_validate({
                "id": "cannon", "name": "Cannon", "category": "WEAPON",
                "damage": 20, "cooldown": 1,
                "cost": {"resource_kind": "scrap", "amount": 15},
            }),
            ActionDefinition.model_validate({
                "id": "heavy-shot", "name": "Heavy Shot", "category": "WEAPON",
                "damage": 45, "cooldown": 2,
                "cost": {"resource_kind": "scrap", "amount": 10},
            }),
            ActionDefinition.model_validate({
                "id": "patch", "name": "Patch", "category": "REPAIR",
                "hull_repair": 30,
                "cost": {"resource_kind": "scrap", "amount": 10},
            }),
            ActionDefinition.model_validate({
                "id": "recharge", "name": "Recharge", "category": "SHIELD",
                "shield_repair": 20,
                "cost": {"resource_kind": "energy", "amount": 10},
            }),
            ActionDefinition.model_validate({
                "id": "sabotage", "name": "Sabotage", "category": "SABOTAGE",
                "status_effect": {"kind": "WEAKEN", "duration": 2, "magnitude": 0.5},
                "cost": {"resource_kind": "insight", "amount": 10},
            }),
            ActionDefinition.model_validate({
                "id": "overload", "name": "Overload", "category": "WEAPON",
                "damage": 100,
                "cost": {"resource_kind": "energy", "amount": 500},
            }),
        ],
        enemy_actions=[
            EnemyActionDefinition.model_validate({
                "id": "laser", "name": "Laser", "damage": 10,
                "use_condition": {"type": "ALWAYS"},
            }),
            EnemyActionDefinition.model_validate({
                "id": "disruptor", "name": "Disruptor", "shield_damage": 15,
                "use_condition": {"type": "RANDOM", "probability": 0.3},
            }),
            EnemyActionDefinition.model_validate({
                "id": "last-stand", "name": "Last Stand", "damage": 30, "cooldown": 2,
                "use_condition": {"type": "HEALTH_THRESHOLD", "threshold": 0.3},
            }),
        ],
        enemies=[
            EnemyDefinition.model_validate({
                "id": "scavenger", "name": "Scavenger",
                "description": "A patched-together salvage vessel.",
                "max_health": 30, "max_shield": 15,
                "actions": ["laser"],
                "loot": [
                    {"resource_kind": "scrap", "amount": 10},
                    {"resource_kind": "energy", "amount": 5, "probability": 0.5},
                ],
                "region_affinity": "void",
            }),
            EnemyDefinition.model_validate({
                "id": "drone", "name": "Drone",
                "max_health": 50,
                "actions": ["laser", "disruptor", "last-stand"],
            }),
            EnemyDefinition.model_validate({
                "id": "warden", "name": "Warden",
                "max_health": 200, "max_shield": 50,
                "actions": ["laser"],
                "is_boss": True,
            }),
            EnemyDefinition.model_validate({
                "id": "ghost", "name": "Ghost",
                "max_health": 60,
                "actions": ["missing-move"],
            }),
        ],
        regions=[
            RegionDefinition.model_validate({
                "id": "void", "name": "The Void", "encounter_chance": 0.5,
                "enemy_weights": [
                    {"enemy_id": "scavenger", "weight": 1},
                    {"enemy_id": "drone", "weight": 1},
                ],
            }),
            RegionDefinition.model_validate({
                "id": "nebula", "name": "Nebula", "encounter_chance": 1.0,
            }),
        ],
    )


@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from engine.core.events import EventBus
    return EventBus()


@pytest.fixture
def content():
    """Small in-memory content set."""
    return build_content()


@pytest.fixture(scope="session")
def bundled_content():
    """Content pack shipped with the package."""
    return ContentTables.load()


@pytest.fixture
def ledger():
    return FakeLedger({"energy": 100, "insight": 40, "crew": 10, "scrap": 50})


@pytest.fixture
def make_rng():
    """Factory for RNGs with scripted draws."""
    return StubRandom


@pytest.fixture
def stub_rng():
    return StubRandom()


@pytest.fixture
def manager(content, ledger, event_bus, stub_rng):
    """Session manager over the in-memory content with deterministic draws."""
    return CombatSessionManager(content, ledger, events=event_bus, rng=stub_rng)
