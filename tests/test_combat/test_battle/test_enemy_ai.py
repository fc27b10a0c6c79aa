import logging
import random
from collections import Counter

import pytest

from combat.battle.enemy_ai import EnemyDecisionModule
from combat.components import CombatantStats, CombatSession
from combat.content import ContentTables, EnemyActionDefinition, EnemyDefinition


def session_with(health=50, max_health=50, shield=0, max_shield=0):
    return CombatSession(
        enemy_id="drone",
        enemy=CombatantStats(health=health, max_health=max_health, shield=shield, max_shield=max_shield),
    )


def test_single_always_action(content, make_rng):
    ai = EnemyDecisionModule(content, make_rng())
    move = ai.select_action(content.get_enemy("scavenger"), session_with(30, 30))
    assert move.id == "laser"

def test_failed_random_roll_filters_action(content, make_rng):
    # 0.5 >= 0.3, so the disruptor is not eligible
    ai = EnemyDecisionModule(content, make_rng([0.5]))
    move = ai.select_action(content.get_enemy("drone"), session_with())
    assert move.id == "laser"

def test_weighted_draw_between_eligible(content, make_rng):
    # Eligibility roll passes, then the draw lands in the disruptor's weight
    ai = EnemyDecisionModule(content, make_rng([0.1, 0.9]))
    move = ai.select_action(content.get_enemy("drone"), session_with())
    assert move.id == "disruptor"

    ai = EnemyDecisionModule(content, make_rng([0.1, 0.1]))
    move = ai.select_action(content.get_enemy("drone"), session_with())
    assert move.id == "laser"

def test_health_threshold_unlocks_action(content, make_rng):
    ai = EnemyDecisionModule(content, make_rng([0.9]))
    drone = content.get_enemy("drone")

    assert not ai.is_eligible(content.get_enemy_action("last-stand"), session_with(health=20))
    assert ai.is_eligible(content.get_enemy_action("last-stand"), session_with(health=15))
    assert ai.is_eligible(content.get_enemy_action("last-stand"), session_with(health=10))

    # laser (0.5) + last-stand (0.5); draw 0.9 of 1.0 picks last-stand
    ai = EnemyDecisionModule(content, make_rng([0.9, 0.9]))
    move = ai.select_action(drone, session_with(health=10))
    assert move.id == "last-stand"

def test_shield_threshold():
    action = EnemyActionDefinition.model_validate({
        "id": "brace", "shield_repair": 10,
        "use_condition": {"type": "SHIELD_THRESHOLD", "threshold": 0.5},
    })
    ai = EnemyDecisionModule(ContentTables(enemy_actions=[action]))

    assert ai.is_eligible(action, session_with(shield=5, max_shield=20))
    assert not ai.is_eligible(action, session_with(shield=15, max_shield=20))

def test_no_eligible_falls_back_to_first(make_rng):
    actions = [
        EnemyActionDefinition.model_validate({
            "id": f"gamble-{i}", "damage": 5,
            "use_condition": {"type": "RANDOM", "probability": 0.1},
        })
        for i in range(2)
    ]
    enemy = EnemyDefinition(id="gambler", max_health=10, actions=["gamble-1", "gamble-0"])
    ai = EnemyDecisionModule(ContentTables(enemy_actions=actions), make_rng([0.9, 0.9]))

    assert ai.select_action(enemy, session_with()).id == "gamble-1"

def test_missing_actions_skipped(content, make_rng, caplog):
    ai = EnemyDecisionModule(content, make_rng())

    with caplog.at_level(logging.WARNING, logger="combat.battle.enemy_ai"):
        move = ai.select_action(content.get_enemy("ghost"), session_with())

    assert move is None
    assert "missing-move" in caplog.text

def test_default_weight_used_without_probability(content):
    ai = EnemyDecisionModule(content, default_weight=0.7)
    assert ai.weight_of(content.get_enemy_action("laser")) == 0.7
    assert ai.weight_of(content.get_enemy_action("disruptor")) == 0.3

def test_equal_default_weights_are_uniform():
    actions = [
        EnemyActionDefinition.model_validate({
            "id": move, "damage": 5, "use_condition": {"type": "ALWAYS"},
        })
        for move in ("strike", "volley", "ram")
    ]
    enemy = EnemyDefinition(id="raider", max_health=10, actions=["strike", "volley", "ram"])
    ai = EnemyDecisionModule(ContentTables(enemy_actions=actions), random.Random(31))
    session = session_with()

    counts = Counter(ai.select_action(enemy, session).id for _ in range(10_000))

    assert set(counts) == {"strike", "volley", "ram"}
    for move in ("strike", "volley", "ram"):
        assert abs(counts[move] / 10_000 - 1 / 3) < 0.03
