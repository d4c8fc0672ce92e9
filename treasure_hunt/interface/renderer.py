"""ASCII map rendering.

This module renders the grid as text, one line per row, with adventurers
drawn over the terrain they stand on.
"""

from collections.abc import Iterable

from ..models.adventurer import Adventurer
from ..models.entities import Empty, Mountain, Treasure
from ..models.grid import Grid


class MapRenderer:
    """Renders a grid and its adventurers as ASCII art."""

    def render(self, grid: Grid, adventurers: Iterable[Adventurer] = ()) -> str:
        """Render the map.

        Output format (3x4 grid):
        .       M       .       .
        .       A(Lara) .       .
        T(2)    .       .       M

        Legend:
        - '.' = empty ground
        - 'M' = mountain
        - 'T(n)' = treasure pile with n treasures left
        - 'A(name)' = adventurer (hides the terrain below it)

        Args:
            grid: Grid to render
            adventurers: Adventurers to place on the map

        Returns:
            Multi-line string, one line per row, cells padded to equal width
        """
        cells = [
            [self._render_cell(grid, row, col) for col in range(grid.cols)]
            for row in range(grid.rows)
        ]

        # Later adventurers on the same cell are listed after earlier ones
        for adventurer in adventurers:
            row, col = adventurer.position()
            if not grid.in_bounds(row, col):
                continue
            label = f"A({adventurer.name})"
            if cells[row][col].startswith("A("):
                cells[row][col] = f"{cells[row][col]}+{label}"
            else:
                cells[row][col] = label

        width = max(len(cell) for line in cells for cell in line)
        return "\n".join(
            " ".join(cell.ljust(width) for cell in line).rstrip() for line in cells
        )

    def _render_cell(self, grid: Grid, row: int, col: int) -> str:
        cell = grid.cell_at(row, col)
        if isinstance(cell, Mountain):
            return "M"
        if isinstance(cell, Treasure):
            return f"T({cell.count})"
        if isinstance(cell, Empty):
            return "."
        raise TypeError(f"Unexpected cell at ({row}, {col}): {cell!r}")
