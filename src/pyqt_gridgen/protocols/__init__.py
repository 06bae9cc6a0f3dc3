"""
Widget protocol definitions, adapters and capability contracts.

ABC-based element contracts, the rendering capability the grid builder
depends on, the observer contracts for field writes, and the global
grid configuration.
"""

from .widget_protocols import (
    ValueGettable,
    ValueSettable,
    ChangeSignalEmitter,
    EditableConfigurable,
    ChoicePopulatable,
)
from .widget_adapters import (
    LineEditAdapter,
    PlainTextEditAdapter,
    SpinBoxAdapter,
    DoubleSpinBoxAdapter,
    ComboBoxAdapter,
    CheckBoxAdapter,
    ActionButtonAdapter,
    PyQtWidgetMeta,
)
from .rendering import ElementFactory, Surface, Placement, WidgetConstraints
from .change_listeners import ChangeListener, ObjectChangeListener
from .grid_config import GridGenConfig, set_grid_config, get_grid_config

__all__ = [
    "ValueGettable",
    "ValueSettable",
    "ChangeSignalEmitter",
    "EditableConfigurable",
    "ChoicePopulatable",
    "LineEditAdapter",
    "PlainTextEditAdapter",
    "SpinBoxAdapter",
    "DoubleSpinBoxAdapter",
    "ComboBoxAdapter",
    "CheckBoxAdapter",
    "ActionButtonAdapter",
    "PyQtWidgetMeta",
    "ElementFactory",
    "Surface",
    "Placement",
    "WidgetConstraints",
    "ChangeListener",
    "ObjectChangeListener",
    "GridGenConfig",
    "set_grid_config",
    "get_grid_config",
]
