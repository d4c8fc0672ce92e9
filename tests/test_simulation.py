"""Tests for the round-robin simulation loop."""

from unittest.mock import patch

from treasure_hunt.engine import movement
from treasure_hunt.engine.simulation import HuntSimulation, run_hunt
from treasure_hunt.models import (
    Adventurer,
    Grid,
    MapSize,
    Mountain,
    Orientation,
    Treasure,
)


def create_exercise_grid():
    """Create the 3x4 reference board."""
    return Grid.construct(
        3,
        4,
        [
            MapSize(3, 4),
            Mountain(1, 0),
            Mountain(2, 1),
            Treasure(0, 3, 2),
            Treasure(1, 3, 3),
        ],
    )


def test_reference_hunt():
    """Test the full reference board end to end."""
    grid = create_exercise_grid()
    lara = Adventurer("Lara", 1, 1, Orientation.SOUTH, "AADADAGGA")

    summary = run_hunt(grid, [lara])

    assert summary.adventurers == [
        Adventurer("Lara", 0, 3, Orientation.SOUTH, "", treasure=3)
    ]
    assert summary.rounds == 9
    assert summary.commands == 9
    assert summary.treasure_collected == 3
    assert grid.cell_at(0, 3) == Treasure(0, 3, 0)
    assert grid.cell_at(1, 3) == Treasure(1, 3, 2)


def test_round_robin_with_uneven_queues():
    """Test that a short queue drops out while the longer one keeps going."""
    grid = Grid(5, 5)
    simulation = HuntSimulation(
        grid,
        [
            Adventurer("Lara", 0, 0, Orientation.EAST, "AAA"),
            Adventurer("Indiana", 0, 4, Orientation.EAST, "A"),
        ],
    )

    assert simulation.execute_round() == 2
    assert simulation.adventurers[1].commands == ()

    assert simulation.execute_round() == 1
    assert simulation.execute_round() == 1
    assert simulation.finished
    assert simulation.execute_round() == 0

    assert simulation.adventurers[0].position() == (3, 0)
    assert simulation.adventurers[1].position() == (1, 4)
    assert simulation.rounds == 3
    assert simulation.commands_resolved == 4


def test_run_stops_when_all_queues_are_empty():
    """Test that run() resolves each command exactly once."""
    grid = Grid(5, 5)
    adventurers = [
        Adventurer("Lara", 0, 0, Orientation.EAST, "AAGDA"),
        Adventurer("Indiana", 2, 2, Orientation.NORTH, "GG"),
    ]

    with patch(
        "treasure_hunt.engine.simulation.resolve_command",
        wraps=movement.resolve_command,
    ) as resolve:
        summary = HuntSimulation(grid, adventurers).run()

    assert resolve.call_count == 7
    assert summary.rounds == 5
    assert all(not a.has_commands for a in summary.adventurers)


def test_earlier_adventurer_takes_the_last_treasure():
    """Test that a treasure taken earlier in a round is gone for later adventurers."""
    grid = Grid.construct(3, 3, [Treasure(1, 1, 1)])
    first = Adventurer("Lara", 0, 1, Orientation.EAST, "A")
    second = Adventurer("Indiana", 1, 0, Orientation.SOUTH, "A")

    summary = run_hunt(grid, [first, second])

    assert summary.adventurers[0].treasure == 1
    assert summary.adventurers[1].treasure == 0
    # Both still reach the cell: adventurers may share a position
    assert summary.adventurers[0].position() == (1, 1)
    assert summary.adventurers[1].position() == (1, 1)
    assert grid.cell_at(1, 1) == Treasure(1, 1, 0)


def test_visitation_follows_input_order():
    """Test that swapping the input order swaps who gets the treasure."""
    grid = Grid.construct(3, 3, [Treasure(1, 1, 1)])
    first = Adventurer("Lara", 0, 1, Orientation.EAST, "A")
    second = Adventurer("Indiana", 1, 0, Orientation.SOUTH, "A")

    summary = run_hunt(grid, [second, first])

    assert summary.adventurers[0].name == "Indiana"
    assert summary.adventurers[0].treasure == 1
    assert summary.adventurers[1].treasure == 0


def test_adventurer_without_commands_is_left_alone():
    """Test that an adventurer with an empty queue never moves."""
    grid = Grid(3, 3)
    idle = Adventurer("Idle", 1, 1, Orientation.NORTH, "")
    busy = Adventurer("Busy", 0, 0, Orientation.SOUTH, "A")

    summary = run_hunt(grid, [idle, busy])

    assert summary.adventurers[0] == idle
    assert summary.adventurers[1].position() == (0, 1)
    assert summary.rounds == 1


def test_no_adventurers():
    """Test that a hunt without adventurers ends immediately."""
    summary = run_hunt(Grid(2, 2), [])

    assert summary.rounds == 0
    assert summary.commands == 0
    assert summary.adventurers == []


def test_export_after_run():
    """Test that the simulation exports the final board."""
    simulation = HuntSimulation(
        create_exercise_grid(),
        [Adventurer("Lara", 1, 1, Orientation.SOUTH, "AADADAGGA")],
    )
    simulation.run()

    entity_set = simulation.export()

    assert entity_set.map_sizes == [MapSize(3, 4)]
    assert entity_set.mountains == [Mountain(1, 0), Mountain(2, 1)]
    assert entity_set.treasures == [Treasure(0, 3, 0), Treasure(1, 3, 2)]
    assert entity_set.adventurers[0].treasure == 3
