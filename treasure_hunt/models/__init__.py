"""Data models for the treasure hunt."""

from .adventurer import Adventurer
from .entities import Cell, Empty, Entity, MapSize, Mountain, Treasure, entity_position
from .entity_set import EntitySet
from .grid import Grid, GridIndexError
from .orientation import Command, InvalidOrientationError, Orientation

__all__ = [
    "Adventurer",
    "Cell",
    "Command",
    "Empty",
    "Entity",
    "EntitySet",
    "Grid",
    "GridIndexError",
    "InvalidOrientationError",
    "MapSize",
    "Mountain",
    "Orientation",
    "Treasure",
    "entity_position",
]
