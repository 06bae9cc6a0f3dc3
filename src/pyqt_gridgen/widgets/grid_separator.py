"""Horizontal divider placed around nested sub-grids."""

from PyQt6.QtWidgets import QFrame


class GridSeparator(QFrame):
    """Sunken horizontal line spanning the grid."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFrameShape(QFrame.Shape.HLine)
        self.setFrameShadow(QFrame.Shadow.Sunken)
