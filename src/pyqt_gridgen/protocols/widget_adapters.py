"""
Widget adapters that wrap Qt widgets to implement the grid element ABCs.

Normalizes Qt's inconsistent APIs:
- QLineEdit.text() vs QSpinBox.value() vs QComboBox.currentData()
- QLineEdit.setReadOnly() vs QComboBox (no read-only mode at all)
- QLineEdit.textChanged vs QSpinBox.valueChanged vs QCheckBox.toggled

All adapters implement a consistent interface via ABCs:
- get_value() / set_value() for all input elements
- connect_change_signal() for all input elements
- set_editable() for all input elements
"""

from abc import ABCMeta
from enum import Enum
from typing import Any, Callable, Iterable

from PyQt6.QtCore import QObject, Qt
from PyQt6.QtWidgets import (
    QCheckBox, QComboBox, QDoubleSpinBox, QLineEdit, QPlainTextEdit, QPushButton,
    QSpinBox, QWidget
)

from .widget_protocols import (
    ChangeSignalEmitter, ChoicePopulatable, EditableConfigurable, ValueGettable,
    ValueSettable
)

# PyQt-specific metaclass that combines ABCMeta with Qt's metaclass
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


def lock_input(widget: QWidget, editable: bool) -> None:
    """Block mouse and keyboard focus on a widget that must not be edited."""
    widget.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, not editable)
    widget.setFocusPolicy(Qt.FocusPolicy.StrongFocus if editable else Qt.FocusPolicy.NoFocus)


class LineEditAdapter(QLineEdit, ValueGettable, ValueSettable, ChangeSignalEmitter,
                      EditableConfigurable, metaclass=PyQtWidgetMeta):
    """
    Adapter for QLineEdit (single-line text).

    - .text() → .get_value()
    - .setText() → .set_value()
    - .textEdited → .connect_change_signal()
    """

    _widget_id = "line_edit"

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.text()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self.setText("" if value is None else str(value))

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.textEdited.connect(lambda *_: callback(self.get_value()))

    def set_editable(self, editable: bool) -> None:
        """Implement EditableConfigurable ABC."""
        self.setReadOnly(not editable)
        lock_input(self, editable)


class PlainTextEditAdapter(QPlainTextEdit, ValueGettable, ValueSettable, ChangeSignalEmitter,
                           EditableConfigurable, metaclass=PyQtWidgetMeta):
    """
    Adapter for QPlainTextEdit (multi-line text).

    Programmatic set_value() blocks signals so only user edits are reported.
    """

    _widget_id = "plain_text_edit"

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.toPlainText()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        blocked = self.blockSignals(True)
        try:
            self.setPlainText("" if value is None else str(value))
        finally:
            self.blockSignals(blocked)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.textChanged.connect(lambda *_: callback(self.get_value()))

    def set_editable(self, editable: bool) -> None:
        """Implement EditableConfigurable ABC."""
        self.setReadOnly(not editable)
        lock_input(self, editable)


class SpinBoxAdapter(QSpinBox, ValueGettable, ValueSettable, ChangeSignalEmitter,
                     EditableConfigurable, metaclass=PyQtWidgetMeta):
    """
    Adapter for QSpinBox (integer stepper).

    Covers the full 32-bit range of QSpinBox; larger ints need a wide stepper
    (see QtElementFactory.create_numeric_stepper).
    """

    _widget_id = "spin_box"

    MINIMUM = -2147483648
    MAXIMUM = 2147483647

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setRange(self.MINIMUM, self.MAXIMUM)

    @classmethod
    def can_show(cls, value: Any) -> bool:
        return value is None or cls.MINIMUM <= value <= cls.MAXIMUM

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.value()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        blocked = self.blockSignals(True)
        try:
            self.setValue(0 if value is None else int(value))
        finally:
            self.blockSignals(blocked)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.valueChanged.connect(lambda *_: callback(self.get_value()))

    def set_editable(self, editable: bool) -> None:
        """Implement EditableConfigurable ABC."""
        self.setReadOnly(not editable)
        lock_input(self, editable)


class DoubleSpinBoxAdapter(QDoubleSpinBox, ValueGettable, ValueSettable, ChangeSignalEmitter,
                           EditableConfigurable, metaclass=PyQtWidgetMeta):
    """
    Adapter for QDoubleSpinBox (floating-point stepper).
    """

    _widget_id = "double_spin_box"

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setRange(-1e308, 1e308)
        self.setDecimals(6)

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.value()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        blocked = self.blockSignals(True)
        try:
            self.setValue(0.0 if value is None else float(value))
        finally:
            self.blockSignals(blocked)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.valueChanged.connect(lambda *_: callback(self.get_value()))

    def set_editable(self, editable: bool) -> None:
        """Implement EditableConfigurable ABC."""
        self.setReadOnly(not editable)
        lock_input(self, editable)


class ComboBoxAdapter(QComboBox, ValueGettable, ValueSettable, ChangeSignalEmitter,
                      EditableConfigurable, ChoicePopulatable, metaclass=PyQtWidgetMeta):
    """
    Adapter for QComboBox (enum or fixed option choice).

    Stores actual values in itemData, not just display text. The text
    entry of the combo is never editable; set_editable() only controls
    whether the user can open and change the selection.
    """

    _widget_id = "combo_box"

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        if self.currentIndex() < 0:
            return None
        return self.itemData(self.currentIndex())

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        blocked = self.blockSignals(True)
        try:
            self.setCurrentIndex(self._index_of(value))
        finally:
            self.blockSignals(blocked)

    def _index_of(self, value: Any) -> int:
        for i in range(self.count()):
            if self.itemData(i) == value:
                return i
        return -1

    def populate_choices(self, choices: Iterable[Any]) -> None:
        """Implement ChoicePopulatable ABC."""
        blocked = self.blockSignals(True)
        try:
            self.clear()
            for choice in choices:
                text = choice.name if isinstance(choice, Enum) else str(choice)
                self.addItem(text, choice)
            # addItem selects the first entry; choices start unselected
            self.setCurrentIndex(-1)
        finally:
            self.blockSignals(blocked)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.currentIndexChanged.connect(lambda *_: callback(self.get_value()))

    def set_editable(self, editable: bool) -> None:
        """Implement EditableConfigurable ABC."""
        self.setEditable(False)
        lock_input(self, editable)


class CheckBoxAdapter(QCheckBox, ValueGettable, ValueSettable, ChangeSignalEmitter,
                      EditableConfigurable, metaclass=PyQtWidgetMeta):
    """
    Adapter for QCheckBox implementing the element ABCs.

    Returns bool values, treats None as False.
    """

    _widget_id = "check_box"

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.isChecked()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        blocked = self.blockSignals(True)
        try:
            self.setChecked(bool(value) if value is not None else False)
        finally:
            self.blockSignals(blocked)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.toggled.connect(lambda *_: callback(self.get_value()))

    def set_editable(self, editable: bool) -> None:
        """Implement EditableConfigurable ABC."""
        lock_input(self, editable)


class ActionButtonAdapter(QPushButton):
    """Push button bound to a zero-argument action."""

    _widget_id = "action_button"

    def __init__(self, text: str, action: Callable[[], None], parent=None):
        super().__init__(text, parent)
        self._action = action
        self.clicked.connect(lambda *_: self._action())

    def trigger(self) -> None:
        """Run the bound action as if the button had been clicked."""
        self.click()
