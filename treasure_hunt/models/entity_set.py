"""Ordered collection of board entities grouped by kind."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .adventurer import Adventurer
from .entities import Empty, Entity, MapSize, Mountain, Treasure


@dataclass
class EntitySet:
    """Board entities grouped by kind, each group kept in insertion order.

    This is the exchange format between the board file loader/writer and
    the simulation core. Groups are iterated in output order: map sizes,
    mountains, treasures, then adventurers. ``terrain`` keeps mountains and
    treasures interleaved in the order they were added, which decides who
    wins when two of them share a position.
    """

    map_sizes: list[MapSize] = field(default_factory=list)
    mountains: list[Mountain] = field(default_factory=list)
    treasures: list[Treasure] = field(default_factory=list)
    adventurers: list[Adventurer] = field(default_factory=list)
    terrain: list[Mountain | Treasure] = field(default_factory=list)

    def __post_init__(self):
        if not self.terrain:
            self.terrain = [*self.mountains, *self.treasures]

    @classmethod
    def from_entities(cls, entities: Iterable[Entity]) -> "EntitySet":
        """Group a flat sequence of entities, preserving their relative order."""
        entity_set = cls()
        for entity in entities:
            entity_set.add(entity)
        return entity_set

    def add(self, entity: Entity) -> None:
        """Append an entity to the group of its kind.

        Empty cells carry no information and are dropped.

        Raises:
            TypeError: If given something that is not an entity
        """
        if isinstance(entity, MapSize):
            self.map_sizes.append(entity)
        elif isinstance(entity, Mountain):
            self.mountains.append(entity)
            self.terrain.append(entity)
        elif isinstance(entity, Treasure):
            self.treasures.append(entity)
            self.terrain.append(entity)
        elif isinstance(entity, Adventurer):
            self.adventurers.append(entity)
        elif isinstance(entity, Empty):
            return
        else:
            raise TypeError(f"Not a board entity: {entity!r}")

    def __iter__(self) -> Iterator[Entity]:
        yield from self.map_sizes
        yield from self.mountains
        yield from self.treasures
        yield from self.adventurers

    def __len__(self) -> int:
        return (
            len(self.map_sizes)
            + len(self.mountains)
            + len(self.treasures)
            + len(self.adventurers)
        )
