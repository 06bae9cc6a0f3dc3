"""
Extended widget implementations.

Specialized widget subclasses that build on the protocol layer.
"""

from .no_scroll_widgets import (
    NoScrollSpinBox,
    NoScrollDoubleSpinBox,
    NoScrollComboBox,
)
from .grid_separator import GridSeparator

__all__ = [
    "NoScrollSpinBox",
    "NoScrollDoubleSpinBox",
    "NoScrollComboBox",
    "GridSeparator",
]
