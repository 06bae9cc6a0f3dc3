"""
Layout constants for generated grids.

This module centralizes spacing and padding so every grid, including the
sub-grids built for nested objects, looks the same.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class GridLayoutConfig:
    """Configuration for grid spacing and padding."""

    # Gaps between grid cells
    hgap: int = 5
    vgap: int = 5

    # Outer padding of the surface (left, top, right, bottom)
    padding: Tuple[int, int, int, int] = (10, 10, 10, 10)

    # Multi-line text elements never grow taller than this
    text_area_max_height: int = 120


# Default configuration
DEFAULT_LAYOUT = GridLayoutConfig()

COMPACT_LAYOUT = GridLayoutConfig(
    hgap=2,
    vgap=1,
    padding=(4, 4, 4, 4),
    text_area_max_height=80,
)

SPACIOUS_LAYOUT = GridLayoutConfig(
    hgap=8,
    vgap=8,
    padding=(12, 12, 12, 12),
    text_area_max_height=200,
)

# Current active configuration - change this to switch layouts globally
CURRENT_LAYOUT = DEFAULT_LAYOUT
