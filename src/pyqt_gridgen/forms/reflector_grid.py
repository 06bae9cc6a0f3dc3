"""Host widget that shows the current grid of a GridBuilder."""

import logging
from typing import Any, Optional

from PyQt6.QtWidgets import QVBoxLayout, QWidget

from pyqt_gridgen.protocols import Surface

from .grid_builder import GridBuilder

logger = logging.getLogger(__name__)


class ReflectorGrid(QWidget):
    """
    Stable widget for embedding a generated grid in a window.

    Every bind() or refresh() builds a new surface; this widget swaps it
    in and schedules the previous one for deletion, so the host keeps a
    single widget reference for the lifetime of the window.

    Example:
        grid = ReflectorGrid()
        grid.bind(connection)
        layout.addWidget(grid)
    """

    def __init__(self, builder: Optional[GridBuilder] = None, parent=None):
        super().__init__(parent)
        self.builder = builder if builder is not None else GridBuilder()
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self.builder.on_build_complete(self._swap_surface)

    def bind(self, obj: Any) -> Surface:
        return self.builder.bind(obj)

    def refresh(self) -> Surface:
        return self.builder.refresh()

    @property
    def surface(self) -> Optional[Surface]:
        return self.builder.surface

    def _swap_surface(self, new_surface: Surface, old_surface: Optional[Surface]) -> None:
        if old_surface is not None:
            self._layout.removeWidget(old_surface)
            old_surface.setParent(None)
            old_surface.deleteLater()
        self._layout.addWidget(new_surface)
        logger.debug(f"Swapped grid surface for {type(self.builder.bound_object).__name__}")
