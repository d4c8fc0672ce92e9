"""Board file loading and saving.

Board files hold one record per line, fields separated by ``-``:

    C - 3 - 4                   map size (rows, cols)
    M - 1 - 0                   mountain
    T - 0 - 3 - 2               treasure pile with 2 treasures
    A - Lara - 1 - 1 - S - AADADAGGA
                                adventurer (name, position, orientation, commands)

Whitespace is ignored on input. Lines of any other kind (blank lines,
``#`` comments) are skipped. Result files use the same layout, with the
adventurer's collected treasure count in place of its commands.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from ..models.adventurer import Adventurer
from ..models.entities import Entity, MapSize, Mountain, Treasure
from ..models.entity_set import EntitySet
from ..models.grid import Grid
from ..models.orientation import InvalidOrientationError, Orientation
from .constants import (
    FIELD_SEPARATOR,
    KIND_ADVENTURER,
    KIND_MAP,
    KIND_MOUNTAIN,
    KIND_TREASURE,
    OUTPUT_SEPARATOR,
    RECORD_FIELDS,
)

logger = logging.getLogger(__name__)


class BoardFormatError(ValueError):
    """Raised when a board file record cannot be parsed."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


def load_board(filepath: str | Path) -> EntitySet:
    """Load board entities from a text file.

    Args:
        filepath: Path to the board file

    Returns:
        EntitySet with entities in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        BoardFormatError: If a record is malformed
        InvalidOrientationError: If an adventurer has an unknown orientation
    """
    with open(filepath, encoding="utf-8") as f:
        return parse_board(f)


def parse_board(lines: Iterable[str]) -> EntitySet:
    """Parse board records into an EntitySet.

    Args:
        lines: Board file lines

    Returns:
        EntitySet with entities in line order
    """
    entity_set = EntitySet()
    for line_number, line in enumerate(lines, start=1):
        entity = parse_record(line, line_number)
        if entity is not None:
            entity_set.add(entity)
    return entity_set


def parse_record(line: str, line_number: int | None = None) -> Entity | None:
    """Parse a single board record.

    Args:
        line: Raw line from a board file
        line_number: Position in the file, used in error messages

    Returns:
        Parsed entity, or None if the record kind is not recognised

    Raises:
        BoardFormatError: If the record has missing or malformed fields
        InvalidOrientationError: If an adventurer has an unknown orientation
    """
    compact = "".join(line.split())
    fields = compact.split(FIELD_SEPARATOR)
    kind = fields[0]

    if kind not in RECORD_FIELDS:
        logger.info("Ignoring line %s: unknown record kind %r", line_number, kind)
        return None

    expected = RECORD_FIELDS[kind]
    if len(fields) < expected:
        raise BoardFormatError(
            f"{kind} record needs {expected - 1} fields, got {len(fields) - 1}: {compact!r}",
            line_number,
        )

    try:
        if kind == KIND_MAP:
            return MapSize(_parse_int(fields[1]), _parse_int(fields[2]))
        if kind == KIND_MOUNTAIN:
            return Mountain(_parse_int(fields[1]), _parse_int(fields[2]))
        if kind == KIND_TREASURE:
            return Treasure(
                _parse_int(fields[1]), _parse_int(fields[2]), _parse_int(fields[3])
            )
        return Adventurer(
            name=fields[1],
            row=_parse_int(fields[2]),
            col=_parse_int(fields[3]),
            orientation=Orientation.from_symbol(fields[4]),
            commands=fields[5],
        )
    except InvalidOrientationError:
        raise
    except ValueError as e:
        raise BoardFormatError(str(e), line_number) from e


def _parse_int(raw: str) -> int:
    """Parse a non-negative integer field."""
    if not raw.isdigit():
        raise ValueError(f"Expected a non-negative integer, got {raw!r}")
    return int(raw)


def build_hunt(entity_set: EntitySet) -> tuple[Grid, list[Adventurer]]:
    """Build the grid and the adventurer list from loaded entities.

    Args:
        entity_set: Loaded board entities

    Returns:
        Tuple of (grid, adventurers in file order)

    Raises:
        BoardFormatError: If no map size record is present
        GridIndexError: If an entity lies outside the map
    """
    if not entity_set.map_sizes:
        raise BoardFormatError("No map size record (C) found")
    if len(entity_set.map_sizes) > 1:
        logger.warning(
            "%d map size records found, using the first one",
            len(entity_set.map_sizes),
        )
    if not entity_set.adventurers:
        logger.warning("No adventurers on the map")

    map_size = entity_set.map_sizes[0]
    grid = Grid.construct(
        map_size.rows, map_size.cols, [*entity_set.terrain, *entity_set.adventurers]
    )
    return grid, list(entity_set.adventurers)


def format_board(entity_set: EntitySet) -> str:
    """Render entities as result file text (map, mountains, treasures, adventurers)."""
    lines = []
    for map_size in entity_set.map_sizes:
        lines.append(_join(KIND_MAP, map_size.rows, map_size.cols))
    for mountain in entity_set.mountains:
        lines.append(_join(KIND_MOUNTAIN, mountain.row, mountain.col))
    for treasure in entity_set.treasures:
        lines.append(_join(KIND_TREASURE, treasure.row, treasure.col, treasure.count))
    for adventurer in entity_set.adventurers:
        lines.append(
            _join(
                KIND_ADVENTURER,
                adventurer.name,
                adventurer.row,
                adventurer.col,
                adventurer.orientation.symbol,
                adventurer.treasure,
            )
        )
    return "".join(f"{line}\n" for line in lines)


def save_board(entity_set: EntitySet, filepath: str | Path) -> None:
    """Write entities to a result file, creating parent directories as needed."""
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_board(entity_set))


def _join(*fields) -> str:
    return OUTPUT_SEPARATOR.join(str(field) for field in fields)
