"""Pydantic schemas for hunt results."""

from .results import (
    AdventurerModel,
    HuntResult,
    MapSizeModel,
    MountainModel,
    TreasureModel,
    save_result_json,
)

__all__ = [
    "AdventurerModel",
    "HuntResult",
    "MapSizeModel",
    "MountainModel",
    "TreasureModel",
    "save_result_json",
]
