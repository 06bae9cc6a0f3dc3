"""
No-scroll input widgets for generated grids.

Grids are often placed inside scroll areas; these widgets ignore wheel
events so scrolling past a stepper or a dropdown never changes a field.
"""

from PyQt6.QtGui import QWheelEvent

# Import adapters that already implement the element ABCs
from pyqt_gridgen.protocols import SpinBoxAdapter, DoubleSpinBoxAdapter, ComboBoxAdapter


class NoScrollSpinBox(SpinBoxAdapter):
    """Integer stepper that ignores wheel events."""

    def wheelEvent(self, event: QWheelEvent):
        event.ignore()


class NoScrollDoubleSpinBox(DoubleSpinBoxAdapter):
    """Floating-point stepper that ignores wheel events."""

    def wheelEvent(self, event: QWheelEvent):
        event.ignore()


class NoScrollComboBox(ComboBoxAdapter):
    """Choice element that ignores wheel events.

    Starts without a selection so a value missing from the choices shows
    as an empty box instead of silently selecting the first entry.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setCurrentIndex(-1)

    def wheelEvent(self, event: QWheelEvent):
        event.ignore()
