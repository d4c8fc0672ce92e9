"""Grid state container.

The grid owns the terrain of the map: a fixed ``rows x cols`` matrix of
cells (Empty, Mountain or Treasure). Adventurers are not stored in the
matrix; they are kept in a separate list by the simulation.
"""

import copy
import logging
from collections.abc import Iterable, Iterator

from .adventurer import Adventurer
from .entities import Cell, Empty, Entity, MapSize, Mountain, Treasure
from .entity_set import EntitySet

logger = logging.getLogger(__name__)


class GridIndexError(IndexError):
    """Raised when a position falls outside the grid."""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        self.row = row
        self.col = col
        super().__init__(
            f"Position ({row}, {col}) is outside the {rows}x{cols} grid"
        )


class Grid:
    """Fixed-size terrain matrix.

    Dimensions never change after construction. The only mutation is
    ``consume_treasure``, which decrements a treasure cell in place.
    """

    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Invalid grid size: {rows}x{cols} (must be > 0)")
        self._rows = rows
        self._cols = cols
        self._cells: list[list[Cell]] = [
            [Empty(row, col) for col in range(cols)] for row in range(rows)
        ]

    @classmethod
    def construct(cls, rows: int, cols: int, entities: Iterable[Entity]) -> "Grid":
        """Build a grid and overlay terrain entities onto it.

        Mountains and treasures are applied in the order given; when two of
        them share a position, the last one wins. Adventurers are only
        bound-checked. Map-size markers and empty cells are ignored.

        Args:
            rows: Extent of the first axis
            cols: Extent of the second axis
            entities: Board entities, in file order

        Returns:
            New grid

        Raises:
            GridIndexError: If any positioned entity lies outside the grid
        """
        grid = cls(rows, cols)
        placed: set[tuple[int, int]] = set()

        for entity in entities:
            if isinstance(entity, (Mountain, Treasure)):
                row, col = entity.position()
                grid._check_bounds(row, col)
                if (row, col) in placed:
                    logger.warning(
                        "Duplicate terrain at (%d, %d): %r replaces %r",
                        row,
                        col,
                        entity,
                        grid._cells[row][col],
                    )
                # Copy so that depleting the grid never touches the caller's entities
                grid._cells[row][col] = copy.copy(entity)
                placed.add((row, col))
            elif isinstance(entity, Adventurer):
                grid._check_bounds(*entity.position())
            elif isinstance(entity, (MapSize, Empty)):
                continue
            else:
                raise TypeError(f"Not a board entity: {entity!r}")

        return grid

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether (row, col) lies inside the grid."""
        return 0 <= row < self._rows and 0 <= col < self._cols

    def cell_at(self, row: int, col: int) -> Cell:
        """Return the cell at (row, col).

        Raises:
            GridIndexError: If the position is outside the grid
        """
        self._check_bounds(row, col)
        return self._cells[row][col]

    def consume_treasure(self, row: int, col: int) -> bool:
        """Take one treasure from the cell at (row, col).

        The count saturates at zero: consuming a depleted treasure, or a
        cell that holds no treasure, changes nothing.

        Returns:
            True if a treasure was taken, False otherwise
        """
        cell = self.cell_at(row, col)
        if not isinstance(cell, Treasure) or cell.depleted:
            return False
        cell.count -= 1
        return True

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in self._cells:
            yield from row

    def export(self, adventurers: Iterable[Adventurer]) -> EntitySet:
        """Rebuild the board entities from the current grid state.

        Args:
            adventurers: Adventurer list to attach, in the order given

        Returns:
            EntitySet with one MapSize, every mountain and treasure cell
            (treasures keep their current count, including 0) in row-major
            order, and the adventurers
        """
        entity_set = EntitySet(map_sizes=[MapSize(self._rows, self._cols)])
        for cell in self.cells():
            if isinstance(cell, (Mountain, Treasure)):
                entity_set.add(copy.copy(cell))
        for adventurer in adventurers:
            entity_set.add(adventurer)
        return entity_set

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise GridIndexError(row, col, self._rows, self._cols)

    def __str__(self) -> str:
        mountains = sum(1 for cell in self.cells() if isinstance(cell, Mountain))
        treasures = sum(
            cell.count for cell in self.cells() if isinstance(cell, Treasure)
        )
        return (
            f"Grid: {self._rows}x{self._cols} "
            f"({mountains} mountains, {treasures} treasures left)"
        )
