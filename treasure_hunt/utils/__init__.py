"""Utility functions and constants for the treasure hunt."""

from .constants import (
    DEFAULT_INPUT_PATH,
    DEFAULT_OUTPUT_PATH,
    FIELD_SEPARATOR,
    KIND_ADVENTURER,
    KIND_MAP,
    KIND_MOUNTAIN,
    KIND_TREASURE,
    OUTPUT_SEPARATOR,
)
from .serialization import (
    BoardFormatError,
    build_hunt,
    format_board,
    load_board,
    parse_board,
    parse_record,
    save_board,
)

__all__ = [
    "DEFAULT_INPUT_PATH",
    "DEFAULT_OUTPUT_PATH",
    "FIELD_SEPARATOR",
    "KIND_ADVENTURER",
    "KIND_MAP",
    "KIND_MOUNTAIN",
    "KIND_TREASURE",
    "OUTPUT_SEPARATOR",
    "BoardFormatError",
    "build_hunt",
    "format_board",
    "load_board",
    "parse_board",
    "parse_record",
    "save_board",
]
