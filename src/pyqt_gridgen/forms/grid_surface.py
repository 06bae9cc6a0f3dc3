"""PyQt6 surface: a QWidget laid out by a QGridLayout."""

import logging
from typing import Any, List, Optional, Tuple

from PyQt6.QtWidgets import QGridLayout, QWidget

from pyqt_gridgen.protocols import PyQtWidgetMeta, Placement, Surface

logger = logging.getLogger(__name__)


class QtGridSurface(QWidget, Surface, metaclass=PyQtWidgetMeta):
    """
    Grid container for generated elements.

    Placing an element re-parents it to this widget, so elements taken
    from a child surface disappear from it automatically.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._layout = QGridLayout(self)
        self._placements: List[Placement] = []

    def place(self, element: Any, row: int, column: int,
              row_span: int = 1, column_span: int = 1) -> None:
        self._layout.addWidget(element, row, column, row_span, column_span)
        self._placements.append(Placement(element, row, column, row_span, column_span))

    def clear(self) -> None:
        for placement in self._placements:
            element = placement.element
            self._layout.removeWidget(element)
            # Elements merged into another surface belong to that surface now
            if element.parent() is self:
                element.setParent(None)
                element.deleteLater()
        self._placements.clear()

    def placements(self) -> List[Placement]:
        return [p for p in self._placements if p.element.parent() is self]

    def set_spacing(self, hgap: int, vgap: int, padding: Tuple[int, int, int, int]) -> None:
        self._layout.setHorizontalSpacing(hgap)
        self._layout.setVerticalSpacing(vgap)
        self._layout.setContentsMargins(*padding)

    def element_at(self, row: int, column: int) -> Optional[QWidget]:
        """Return the element occupying a cell, or None."""
        item = self._layout.itemAtPosition(row, column)
        return item.widget() if item is not None else None

    def row_count(self) -> int:
        """Number of rows holding at least one element."""
        return len({p.row + offset for p in self.placements() for offset in range(p.row_span)})
