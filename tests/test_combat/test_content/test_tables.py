import json

import pytest
from pydantic import ValidationError

from combat.content import (
    ContentTables,
    LootEntry,
    RegionDefinition,
    UseCondition,
)
from combat.content.tables import BUNDLED_DATA_PATH


def test_lookups(content):
    assert content.get_action("cannon").damage == 20
    assert content.get_enemy_action("laser").use_condition.type.value == "ALWAYS"
    assert content.get_enemy("scavenger").max_shield == 15
    assert content.get_region("void").encounter_chance == 0.5

def test_missing_lookups_return_none(content):
    assert content.get_action("nope") is None
    assert content.get_enemy_action("nope") is None
    assert content.get_enemy("nope") is None
    assert content.get_region("nope") is None

def test_definitions_are_frozen(content):
    with pytest.raises(ValidationError):
        content.get_enemy("scavenger").max_health = 1

def test_random_condition_requires_probability():
    with pytest.raises(ValidationError):
        UseCondition(type="RANDOM")

def test_threshold_condition_requires_threshold():
    with pytest.raises(ValidationError):
        UseCondition(type="SHIELD_THRESHOLD")

def test_loot_probability_bounds():
    with pytest.raises(ValidationError):
        LootEntry(resource_kind="scrap", amount=1, probability=1.5)

def test_validate_references_reports_dangling_ids(content):
    assert content.validate_references() == [
        "Enemy ghost references unknown enemy action missing-move",
    ]

def test_validate_references_region_to_enemy():
    tables = ContentTables(regions=[
        RegionDefinition(id="x", enemy_weights=[{"enemy_id": "missing", "weight": 1}]),
    ])
    assert tables.validate_references() == ["Region x references unknown enemy missing"]

def test_bundled_content_is_consistent(bundled_content):
    assert bundled_content.validate_references() == []
    assert len(bundled_content.enemies) == 10
    assert len(bundled_content.regions) == 5
    assert any(enemy.is_boss for enemy in bundled_content.enemies)

def test_bundled_scenario_enemy(bundled_content):
    scavenger = bundled_content.get_enemy("scavenger")
    assert scavenger.max_health == 30
    assert scavenger.max_shield == 15

def test_from_database_skips_model_errors(tmp_path):
    schemas = tmp_path / "schemas"
    schemas.mkdir()
    for schema in BUNDLED_DATA_PATH.joinpath("schemas").glob("*.schema.json"):
        (schemas / schema.name).write_text(schema.read_text())

    enemies = tmp_path / "database" / "enemies"
    enemies.mkdir(parents=True)
    with open(enemies / "enemies.json", "w") as f:
        json.dump([
            {"id": "good", "name": "Good", "max_health": 10, "max_shield": 0, "actions": []},
            {"id": "bad", "name": "Bad", "max_health": 10, "actions": [], "colour": "red"},
        ], f)

    tables = ContentTables.load(tmp_path)

    assert tables.get_enemy("good") is not None
    assert tables.get_enemy("bad") is None
