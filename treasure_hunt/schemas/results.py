"""Pydantic schemas for the JSON hunt result."""

from pathlib import Path

from pydantic import BaseModel, Field

from ..models.entity_set import EntitySet


class MapSizeModel(BaseModel):
    """Grid extent."""

    rows: int = Field(gt=0)
    cols: int = Field(gt=0)


class MountainModel(BaseModel):
    """Mountain position."""

    row: int = Field(ge=0)
    col: int = Field(ge=0)


class TreasureModel(BaseModel):
    """Treasure pile and what is left of it."""

    row: int = Field(ge=0)
    col: int = Field(ge=0)
    count: int = Field(ge=0)


class AdventurerModel(BaseModel):
    """Final adventurer state."""

    name: str
    row: int = Field(ge=0)
    col: int = Field(ge=0)
    orientation: str = Field(pattern="^[NESO]$")
    treasure: int = Field(ge=0)


class HuntResult(BaseModel):
    """Final board state plus run statistics."""

    map: MapSizeModel
    mountains: list[MountainModel] = Field(default_factory=list)
    treasures: list[TreasureModel] = Field(default_factory=list)
    adventurers: list[AdventurerModel] = Field(default_factory=list)
    rounds: int = Field(default=0, ge=0)

    @classmethod
    def from_entity_set(cls, entity_set: EntitySet, rounds: int = 0) -> "HuntResult":
        """Build a result from exported board entities.

        Raises:
            ValueError: If the entity set has no map size
        """
        if not entity_set.map_sizes:
            raise ValueError("Cannot build a hunt result without a map size")
        map_size = entity_set.map_sizes[0]
        return cls(
            map=MapSizeModel(rows=map_size.rows, cols=map_size.cols),
            mountains=[MountainModel(row=m.row, col=m.col) for m in entity_set.mountains],
            treasures=[
                TreasureModel(row=t.row, col=t.col, count=t.count)
                for t in entity_set.treasures
            ],
            adventurers=[
                AdventurerModel(
                    name=a.name,
                    row=a.row,
                    col=a.col,
                    orientation=a.orientation.symbol,
                    treasure=a.treasure,
                )
                for a in entity_set.adventurers
            ],
            rounds=rounds,
        )


def save_result_json(result: HuntResult, filepath: str | Path) -> None:
    """Write a hunt result as indented JSON, creating parent directories as needed."""
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(result.model_dump_json(indent=2))
