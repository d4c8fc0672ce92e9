"""Tests for the JSON hunt result schema."""

import json

import pytest
from pydantic import ValidationError

from treasure_hunt.models import (
    Adventurer,
    EntitySet,
    MapSize,
    Mountain,
    Orientation,
    Treasure,
)
from treasure_hunt.schemas.results import (
    AdventurerModel,
    HuntResult,
    TreasureModel,
    save_result_json,
)


def create_final_board():
    """Create a board as exported after the reference hunt."""
    return EntitySet.from_entities(
        [
            MapSize(3, 4),
            Mountain(1, 0),
            Mountain(2, 1),
            Treasure(0, 3, 0),
            Treasure(1, 3, 2),
            Adventurer("Lara", 0, 3, Orientation.SOUTH, "", treasure=3),
        ]
    )


def test_from_entity_set():
    """Test building a result from exported entities."""
    result = HuntResult.from_entity_set(create_final_board(), rounds=9)

    assert result.map.rows == 3
    assert result.map.cols == 4
    assert [(m.row, m.col) for m in result.mountains] == [(1, 0), (2, 1)]
    assert [t.count for t in result.treasures] == [0, 2]
    assert result.adventurers == [
        AdventurerModel(name="Lara", row=0, col=3, orientation="S", treasure=3)
    ]
    assert result.rounds == 9


def test_from_entity_set_without_map_size():
    """Test that a result needs a map size."""
    with pytest.raises(ValueError, match="without a map size"):
        HuntResult.from_entity_set(EntitySet())


def test_negative_count_rejected():
    """Test field validation on treasures."""
    with pytest.raises(ValidationError):
        TreasureModel(row=0, col=0, count=-1)


def test_orientation_symbol_validated():
    """Test that only N, E, S, O are accepted."""
    with pytest.raises(ValidationError):
        AdventurerModel(name="Lara", row=0, col=0, orientation="W", treasure=0)


def test_save_result_json(tmp_path):
    """Test writing the result to disk."""
    result = HuntResult.from_entity_set(create_final_board(), rounds=9)
    path = tmp_path / "json" / "result.json"

    save_result_json(result, path)

    data = json.loads(path.read_text())
    assert data["map"] == {"rows": 3, "cols": 4}
    assert data["adventurers"][0]["name"] == "Lara"
    assert data["adventurers"][0]["treasure"] == 3
    assert data["rounds"] == 9
    assert HuntResult.model_validate(data) == result
