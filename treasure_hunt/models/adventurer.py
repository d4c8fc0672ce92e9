"""Adventurer data model."""

from dataclasses import dataclass, field, replace

from .orientation import Command, Orientation


@dataclass
class Adventurer:
    """A mobile entity walking the map with a fixed list of commands.

    Adventurers live outside the grid matrix: their position is only
    recorded here. The movement engine never mutates an adventurer in
    place, it returns an updated copy after each command.
    """

    name: str  # Identifier printed in the result file (e.g., "Lara")
    row: int  # First axis, shifted by West/East moves
    col: int  # Second axis, shifted by North/South moves
    orientation: Orientation
    commands: tuple[Command, ...] = field(default_factory=tuple)  # Pending, front first
    treasure: int = 0  # Treasures collected so far

    def __post_init__(self):
        """Normalize the command sequence and validate adventurer data."""
        if isinstance(self.commands, str):
            self.commands = tuple(Command.from_char(char) for char in self.commands)
        else:
            self.commands = tuple(self.commands)
        if not self.name:
            raise ValueError("Adventurer name cannot be empty")
        if self.row < 0 or self.col < 0:
            raise ValueError(
                f"Invalid position for {self.name}: ({self.row}, {self.col}) (must be >= 0)"
            )
        if self.treasure < 0:
            raise ValueError(f"Invalid treasure: {self.treasure} (must be >= 0)")

    def position(self) -> tuple[int, int]:
        return (self.row, self.col)

    @property
    def has_commands(self) -> bool:
        return bool(self.commands)

    def moved_to(self, row: int, col: int) -> "Adventurer":
        """Return a copy standing on (row, col)."""
        return replace(self, row=row, col=col)

    def with_treasure(self) -> "Adventurer":
        """Return a copy holding one more treasure."""
        return replace(self, treasure=self.treasure + 1)
