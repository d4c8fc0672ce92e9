"""Board entities: terrain cells and the map-size marker.

Every entity carries a position, so ``entity.position()`` is always
defined. Grid cells are ``Empty``, ``Mountain`` or ``Treasure``;
``MapSize`` only appears when loading or saving a board, and its
"position" is the grid extent ``(rows, cols)``.
"""

from dataclasses import dataclass
from typing import Union

from .adventurer import Adventurer


@dataclass
class Empty:
    """Plain ground."""

    row: int
    col: int

    def __post_init__(self):
        if self.row < 0 or self.col < 0:
            raise ValueError(f"Invalid empty cell position: ({self.row}, {self.col})")

    def position(self) -> tuple[int, int]:
        return (self.row, self.col)


@dataclass
class Mountain:
    """Impassable terrain."""

    row: int
    col: int

    def __post_init__(self):
        if self.row < 0 or self.col < 0:
            raise ValueError(f"Invalid mountain position: ({self.row}, {self.col})")

    def position(self) -> tuple[int, int]:
        return (self.row, self.col)


@dataclass
class Treasure:
    """A pile of treasures, decremented each time an adventurer collects one."""

    row: int
    col: int
    count: int  # Remaining treasures, never negative

    def __post_init__(self):
        if self.row < 0 or self.col < 0:
            raise ValueError(f"Invalid treasure position: ({self.row}, {self.col})")
        if self.count < 0:
            raise ValueError(f"Invalid treasure count: {self.count} (must be >= 0)")

    @property
    def depleted(self) -> bool:
        return self.count == 0

    def position(self) -> tuple[int, int]:
        return (self.row, self.col)


@dataclass
class MapSize:
    """Grid extent marker (the ``C`` record of a board file)."""

    rows: int
    cols: int

    def __post_init__(self):
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Invalid map size: {self.rows}x{self.cols} (must be > 0)")

    def position(self) -> tuple[int, int]:
        return (self.rows, self.cols)


Cell = Union[Empty, Mountain, Treasure]
Entity = Union[MapSize, Mountain, Treasure, Adventurer, Empty]


def entity_position(entity: Entity) -> tuple[int, int]:
    """Return the position of any entity variant.

    Raises:
        TypeError: If given something that is not an entity
    """
    if isinstance(entity, (MapSize, Mountain, Treasure, Adventurer, Empty)):
        return entity.position()
    raise TypeError(f"Not a board entity: {entity!r}")
