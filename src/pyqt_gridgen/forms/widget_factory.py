"""
PyQt6 element factory with explicit type-based dispatch.

Implements the ElementFactory capability for the grid builder.

Design:
- NUMERIC_STEPPER_REGISTRY: number type → stepper class mapping
- Explicit dispatch (no hasattr checks)
- Custom number types can be registered; unregistered Integral types
  fall back to the int stepper, other Real types to the float stepper
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, Sequence, Type

from PyQt6.QtWidgets import QLabel

from pyqt_gridgen.protocols import (
    ActionButtonAdapter, CheckBoxAdapter, EditableConfigurable, ElementFactory,
    LineEditAdapter, PlainTextEditAdapter, SpinBoxAdapter, WidgetConstraints
)
from pyqt_gridgen.widgets import (
    GridSeparator, NoScrollComboBox, NoScrollDoubleSpinBox, NoScrollSpinBox
)

from .grid_surface import QtGridSurface
from .layout_constants import CURRENT_LAYOUT, GridLayoutConfig
from .member_type_utils import MemberTypeUtils

logger = logging.getLogger(__name__)

# Number type → stepper class
NUMERIC_STEPPER_REGISTRY: Dict[Type, Callable[[], Any]] = {
    int: NoScrollSpinBox,
    float: NoScrollDoubleSpinBox,
}


class QtElementFactory(ElementFactory):
    """
    Creates PyQt6 elements for generated grids.

    Example:
        factory = QtElementFactory()
        stepper = factory.create_numeric_stepper(int)
        # Returns NoScrollSpinBox instance
    """

    def __init__(self, layout_config: GridLayoutConfig = CURRENT_LAYOUT):
        self.layout_config = layout_config

    def create_surface(self) -> QtGridSurface:
        surface = QtGridSurface()
        cfg = self.layout_config
        surface.set_spacing(cfg.hgap, cfg.vgap, cfg.padding)
        return surface

    def create_label(self, text: str, tooltip: str = "") -> QLabel:
        label = QLabel(text)
        if tooltip:
            label.setToolTip(tooltip)
        return label

    def create_numeric_stepper(self, number_type: Type, value: Any = None) -> Any:
        factory_func = NUMERIC_STEPPER_REGISTRY.get(number_type)
        if factory_func is None:
            if not MemberTypeUtils.is_numeric_type(number_type):
                raise TypeError(
                    f"No numeric stepper for type {number_type}. "
                    f"Available types: {list(NUMERIC_STEPPER_REGISTRY.keys())}."
                )
            factory_func = (NoScrollSpinBox if MemberTypeUtils.is_integral_type(number_type)
                            else NoScrollDoubleSpinBox)
        if (isinstance(factory_func, type) and issubclass(factory_func, SpinBoxAdapter)
                and not factory_func.can_show(value)):
            return self._wide_integer_stepper(number_type, value)
        widget = factory_func()
        logger.debug(f"Created {type(widget).__name__} for number type {number_type.__name__}")
        return widget

    @staticmethod
    def _wide_integer_stepper(number_type: Type, value: Any) -> NoScrollDoubleSpinBox:
        """Integer stepper backed by a double spin box, for values QSpinBox cannot hold."""
        widget = NoScrollDoubleSpinBox()
        widget.setDecimals(0)
        logger.debug(f"Value {value} of {number_type.__name__} exceeds QSpinBox range, using wide stepper")
        return widget

    def create_enum_choice(self, enum_type: Type[Enum]) -> NoScrollComboBox:
        if not MemberTypeUtils.is_enum_type(enum_type):
            raise TypeError(f"{enum_type} is not an Enum type")
        widget = NoScrollComboBox()
        widget.populate_choices(list(enum_type))
        return widget

    def create_option_choice(self, options: Sequence[Any]) -> NoScrollComboBox:
        widget = NoScrollComboBox()
        widget.populate_choices(options)
        return widget

    def create_single_line_text(self) -> LineEditAdapter:
        return LineEditAdapter()

    def create_multi_line_text(self) -> PlainTextEditAdapter:
        widget = PlainTextEditAdapter()
        widget.setMaximumHeight(self.layout_config.text_area_max_height)
        return widget

    def create_boolean_toggle(self) -> CheckBoxAdapter:
        return CheckBoxAdapter()

    def create_action_trigger(self, text: str, action: Callable[[], None]) -> ActionButtonAdapter:
        return ActionButtonAdapter(text, action)

    def create_separator(self) -> GridSeparator:
        return GridSeparator()

    def apply_constraints(self, element: Any, constraints: WidgetConstraints) -> None:
        if isinstance(element, EditableConfigurable):
            element.set_editable(constraints.editable)
        element.setEnabled(constraints.enabled)
        if constraints.max_width is not None:
            element.setMaximumWidth(int(constraints.max_width))
        if constraints.tooltip:
            element.setToolTip(constraints.tooltip)

    @staticmethod
    def register_numeric_type(number_type: Type, factory_func: Callable[[], Any]) -> None:
        """
        Register a custom stepper for a number type.

        Example:
            >>> QtElementFactory.register_numeric_type(Fraction, FractionSpinBox)
        """
        if number_type in NUMERIC_STEPPER_REGISTRY:
            logger.warning(f"Overwriting existing stepper for type {number_type}")
        NUMERIC_STEPPER_REGISTRY[number_type] = factory_func
        logger.debug(f"Registered stepper for type {number_type}")
