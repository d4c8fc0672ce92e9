"""Treasure hunt simulation on a grid of mountains and treasures."""

__version__ = "0.1.0"
