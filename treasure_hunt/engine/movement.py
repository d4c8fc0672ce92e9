"""Single-command movement resolution.

This module handles:
1. Popping the next command off an adventurer's queue
2. Turning (left/right) and advancing along the facing direction
3. Rejecting moves that leave the grid or hit a mountain
4. Collecting a treasure when stepping onto a non-depleted treasure cell

Displacement table for an advance:

    North -> (0, -1)    South -> (0, +1)
    West  -> (-1, 0)    East  -> (+1, 0)

The first component shifts ``row`` and the second shifts ``col``.
"""

import logging
from dataclasses import dataclass, replace

from ..models.adventurer import Adventurer
from ..models.entities import Empty, Mountain, Treasure
from ..models.grid import Grid
from ..models.orientation import Command, Orientation

logger = logging.getLogger(__name__)

ADVANCE_VECTORS: dict[Orientation, tuple[int, int]] = {
    Orientation.NORTH: (0, -1),
    Orientation.SOUTH: (0, 1),
    Orientation.WEST: (-1, 0),
    Orientation.EAST: (1, 0),
}


class EmptyCommandQueueError(RuntimeError):
    """Raised when resolving a command for an adventurer with none left."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Adventurer {name} has no command left to resolve")


@dataclass
class Step:
    """Outcome of decoding one command against an orientation.

    Attributes:
        dx: Displacement along the row axis
        dy: Displacement along the column axis
        orientation: Orientation after the command
    """

    dx: int
    dy: int
    orientation: Orientation


def pop_command(adventurer: Adventurer) -> tuple[Command, tuple[Command, ...]]:
    """Split an adventurer's queue into its front command and the rest.

    Raises:
        EmptyCommandQueueError: If the queue is empty
    """
    if not adventurer.commands:
        raise EmptyCommandQueueError(adventurer.name)
    return adventurer.commands[0], adventurer.commands[1:]


def compute_step(orientation: Orientation, command: Command) -> Step:
    """Decode a command into a displacement and a new orientation.

    Args:
        orientation: Current facing
        command: Command to apply

    Returns:
        Step with (dx, dy) and the resulting orientation
    """
    if command is Command.ADVANCE:
        dx, dy = ADVANCE_VECTORS[orientation]
        return Step(dx, dy, orientation)
    if command is Command.TURN_LEFT:
        return Step(0, 0, orientation.turned_left())
    if command is Command.TURN_RIGHT:
        return Step(0, 0, orientation.turned_right())
    return Step(0, 0, orientation)


def apply_displacement(adventurer: Adventurer, grid: Grid, dx: int, dy: int) -> Adventurer:
    """Move an adventurer by (dx, dy) if the destination allows it.

    Off-grid and mountain destinations leave the adventurer where it was.
    A treasure cell with treasures left is depleted by one and credited to
    the adventurer. Depleted treasures behave like plain ground.

    Args:
        adventurer: Adventurer before the move
        grid: Shared grid (mutated when a treasure is collected)
        dx: Row displacement
        dy: Column displacement

    Returns:
        Adventurer after the move
    """
    if dx == 0 and dy == 0:
        return adventurer

    row, col = adventurer.row + dx, adventurer.col + dy
    if not grid.in_bounds(row, col):
        logger.debug("%s blocked by the edge at (%d, %d)", adventurer.name, row, col)
        return adventurer

    cell = grid.cell_at(row, col)
    if isinstance(cell, Mountain):
        logger.debug("%s blocked by a mountain at (%d, %d)", adventurer.name, row, col)
        return adventurer
    if isinstance(cell, Treasure):
        moved = adventurer.moved_to(row, col)
        if grid.consume_treasure(row, col):
            logger.debug(
                "%s collected a treasure at (%d, %d), %d left",
                adventurer.name,
                row,
                col,
                cell.count,
            )
            return moved.with_treasure()
        return moved
    if isinstance(cell, Empty):
        return adventurer.moved_to(row, col)
    raise TypeError(f"Unexpected cell at ({row}, {col}): {cell!r}")


def resolve_command(adventurer: Adventurer, grid: Grid) -> Adventurer:
    """Resolve the front command of an adventurer's queue.

    The command is always consumed and the orientation change always
    applies, even when the move itself is rejected.

    Args:
        adventurer: Adventurer with at least one pending command
        grid: Shared grid

    Returns:
        Updated adventurer (new position, orientation, treasure and
        remaining commands)

    Raises:
        EmptyCommandQueueError: If the adventurer has no command left
    """
    command, remaining = pop_command(adventurer)
    step = compute_step(adventurer.orientation, command)
    moved = apply_displacement(adventurer, grid, step.dx, step.dy)

    logger.debug(
        "%s: %s %s -> (%d, %d) facing %s",
        adventurer.name,
        command.name,
        adventurer.position(),
        moved.row,
        moved.col,
        step.orientation.name,
    )
    return replace(moved, orientation=step.orientation, commands=remaining)
