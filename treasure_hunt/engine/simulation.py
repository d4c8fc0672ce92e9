"""Round-robin simulation loop.

Each round visits the adventurers in their input order. Every adventurer
that still has commands resolves exactly one of them against the shared
grid, so a treasure collected by an earlier adventurer in a round is no
longer available to a later one in the same round. The loop stops at the
first round that starts with every command queue empty.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ..models.adventurer import Adventurer
from ..models.entity_set import EntitySet
from ..models.grid import Grid
from .movement import resolve_command

logger = logging.getLogger(__name__)


@dataclass
class HuntSummary:
    """Outcome of a complete hunt.

    Attributes:
        rounds: Number of rounds in which at least one command was resolved
        commands: Total number of commands resolved
        adventurers: Final adventurer states, in input order
    """

    rounds: int
    commands: int
    adventurers: list[Adventurer]

    @property
    def treasure_collected(self) -> int:
        return sum(adventurer.treasure for adventurer in self.adventurers)


class HuntSimulation:
    """Drives adventurers over a shared grid until every queue is drained."""

    def __init__(self, grid: Grid, adventurers: Iterable[Adventurer]):
        """Initialize the simulation.

        Args:
            grid: Terrain shared by every adventurer (mutated as treasures are collected)
            adventurers: Adventurers in visitation order
        """
        self.grid = grid
        self.adventurers = list(adventurers)
        self.rounds = 0
        self.commands_resolved = 0

    @property
    def finished(self) -> bool:
        return not any(adventurer.has_commands for adventurer in self.adventurers)

    def execute_round(self) -> int:
        """Resolve one command for every adventurer that still has one.

        Returns:
            Number of commands resolved this round (0 once the hunt is over)
        """
        resolved = 0
        for index, adventurer in enumerate(self.adventurers):
            if not adventurer.has_commands:
                continue
            self.adventurers[index] = resolve_command(adventurer, self.grid)
            resolved += 1

        if resolved:
            self.rounds += 1
            self.commands_resolved += resolved
            logger.debug("Round %d: %d command(s) resolved", self.rounds, resolved)
        return resolved

    def run(self) -> HuntSummary:
        """Play rounds until no adventurer has a command left.

        Returns:
            HuntSummary with the final adventurer states
        """
        logger.info(
            "Starting hunt on %s with %d adventurer(s)", self.grid, len(self.adventurers)
        )
        while self.execute_round():
            pass

        summary = HuntSummary(
            rounds=self.rounds,
            commands=self.commands_resolved,
            adventurers=list(self.adventurers),
        )
        logger.info(
            "Hunt finished after %d round(s): %d treasure(s) collected",
            summary.rounds,
            summary.treasure_collected,
        )
        return summary

    def export(self) -> EntitySet:
        """Current board state, ready for the board file writer."""
        return self.grid.export(self.adventurers)


def run_hunt(grid: Grid, adventurers: Iterable[Adventurer]) -> HuntSummary:
    """Run a complete hunt on ``grid`` and return its summary."""
    return HuntSimulation(grid, adventurers).run()
