"""Text rendering of the hunt map."""

from .renderer import MapRenderer

__all__ = ["MapRenderer"]
