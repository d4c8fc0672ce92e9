"""Orientation and command enums for adventurers."""

from enum import Enum


class InvalidOrientationError(ValueError):
    """Raised when an orientation symbol is not one of N, S, E, O."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Unknown orientation: {symbol!r}")


class Orientation(Enum):
    """Direction an adventurer is facing.

    Values are the single-letter symbols used in board files. West is
    written 'O' (Ouest).
    """

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "O"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Orientation":
        """Decode a board-file symbol.

        Args:
            symbol: One of 'N', 'S', 'E', 'O'

        Returns:
            Matching Orientation

        Raises:
            InvalidOrientationError: If the symbol is not recognised
        """
        try:
            return cls(symbol)
        except ValueError:
            raise InvalidOrientationError(symbol) from None

    @property
    def symbol(self) -> str:
        return self.value

    def turned_left(self) -> "Orientation":
        """Rotate a quarter turn counter-clockwise."""
        return _LEFT_OF[self]

    def turned_right(self) -> "Orientation":
        """Rotate a quarter turn clockwise."""
        return _RIGHT_OF[self]


_LEFT_OF = {
    Orientation.NORTH: Orientation.WEST,
    Orientation.WEST: Orientation.SOUTH,
    Orientation.SOUTH: Orientation.EAST,
    Orientation.EAST: Orientation.NORTH,
}

_RIGHT_OF = {
    Orientation.NORTH: Orientation.EAST,
    Orientation.EAST: Orientation.SOUTH,
    Orientation.SOUTH: Orientation.WEST,
    Orientation.WEST: Orientation.NORTH,
}


class Command(Enum):
    """A single adventurer directive.

    Board files spell these 'A' (avancer), 'G' (gauche) and 'D' (droite).
    Any other character is kept as UNKNOWN and resolves as a no-op.
    """

    ADVANCE = "A"
    TURN_LEFT = "G"
    TURN_RIGHT = "D"
    UNKNOWN = "?"

    @classmethod
    def from_char(cls, char: str) -> "Command":
        """Decode a command character, mapping anything unrecognised to UNKNOWN."""
        for command in (cls.ADVANCE, cls.TURN_LEFT, cls.TURN_RIGHT):
            if command.value == char:
                return command
        return cls.UNKNOWN
