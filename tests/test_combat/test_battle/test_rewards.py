import random

from combat.battle.rewards import RewardResolver
from combat.content import EnemyDefinition, ResourceDelta


def test_guaranteed_and_probable_loot(content, make_rng):
    scavenger = content.get_enemy("scavenger")

    loot = RewardResolver(make_rng([0.9, 0.4])).resolve_loot(scavenger)
    assert loot == [
        ResourceDelta(resource_kind="scrap", amount=10),
        ResourceDelta(resource_kind="energy", amount=5),
    ]

def test_draw_at_probability_misses(content, make_rng):
    loot = RewardResolver(make_rng([0.0, 0.5])).resolve_loot(content.get_enemy("scavenger"))
    assert loot == [ResourceDelta(resource_kind="scrap", amount=10)]

def test_one_draw_per_entry(content, make_rng):
    rng = make_rng([0.1, 0.1, 0.1])
    RewardResolver(rng).resolve_loot(content.get_enemy("scavenger"))
    assert rng.values == [0.1]

def test_no_loot_table(content):
    assert RewardResolver().resolve_loot(content.get_enemy("drone")) == []

def test_loot_frequency():
    enemy = EnemyDefinition.model_validate({
        "id": "cache", "max_health": 1,
        "loot": [{"resource_kind": "insight", "amount": 1, "probability": 0.25}],
    })
    resolver = RewardResolver(random.Random(7))
    hits = sum(len(resolver.resolve_loot(enemy)) for _ in range(10_000))

    assert abs(hits / 10_000 - 0.25) < 0.03
