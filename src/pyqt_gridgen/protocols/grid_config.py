"""Base configuration for grid generation.

Provides the defaults every new grid starts from. Applications replace the
global instance once at startup; grids copy the values they need when they
are created, so changing the global config later does not touch live grids.
"""

from dataclasses import dataclass, field
from typing import Optional

from pyqt_gridgen.forms.layout_constants import CURRENT_LAYOUT, GridLayoutConfig
from pyqt_gridgen.forms.layout_engine import LabelDisplayOrder
from pyqt_gridgen.forms.naming_strategy import DefaultNamingStrategy, NamingStrategy


@dataclass
class GridGenConfig:
    """Defaults for grid generation behavior.

    Attributes:
        label_display_order: How label/element pairs are arranged
        node_width_limit: Maximum width of every generated input element
        field_naming: Converts field names into labels
        method_naming: Converts method names into labels
        layout: Spacing and padding of generated surfaces
        nested_heading_suffix: Appended to the heading of a nested object
        performance_logger_name: Logger that receives build timings
        timing_threshold_ms: Builds faster than this are not logged
    """

    label_display_order: LabelDisplayOrder = LabelDisplayOrder.SIDE_BY_SIDE
    node_width_limit: float = 300.0
    field_naming: NamingStrategy = field(
        default_factory=lambda: DefaultNamingStrategy.SPLIT_TO_CAPITALIZED_WORDS.strategy
    )
    method_naming: NamingStrategy = field(
        default_factory=lambda: DefaultNamingStrategy.SPLIT_TO_CAPITALIZED_WORDS.strategy
    )
    layout: GridLayoutConfig = CURRENT_LAYOUT
    nested_heading_suffix: str = ":"
    performance_logger_name: str = "pyqt_gridgen.performance"
    timing_threshold_ms: float = 0.0


# Global config instance (set by application)
_grid_config: Optional[GridGenConfig] = None


def set_grid_config(config: GridGenConfig) -> None:
    """Set the global grid generation configuration.

    Args:
        config: GridGenConfig instance
    """
    global _grid_config
    _grid_config = config


def get_grid_config() -> GridGenConfig:
    """Get the current grid generation configuration.

    Returns:
        Current GridGenConfig or default if not set
    """
    if _grid_config is None:
        return GridGenConfig()
    return _grid_config
