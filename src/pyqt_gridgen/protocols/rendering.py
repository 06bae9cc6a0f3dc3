"""
Rendering capability contracts.

The grid builder never instantiates toolkit widgets itself. It asks an
ElementFactory for labels, inputs, triggers, separators and surfaces, and
places them on a Surface. Any backend that implements both ABCs can
render a grid; QtElementFactory is the PyQt6 one.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Tuple, Type


@dataclass(frozen=True)
class WidgetConstraints:
    """Per-element constraints applied after the widget kind is chosen."""
    editable: bool = True
    enabled: bool = True
    max_width: Optional[float] = None
    tooltip: str = ""


@dataclass(frozen=True)
class Placement:
    """One element placed on a surface."""
    element: Any
    row: int
    column: int
    row_span: int = 1
    column_span: int = 1


class Surface(ABC):
    """2-D container of placed elements."""

    @abstractmethod
    def place(self, element: Any, row: int, column: int,
              row_span: int = 1, column_span: int = 1) -> None:
        """Put element at (row, column), taking it away from any previous surface."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every placed element."""
        pass

    @abstractmethod
    def placements(self) -> List[Placement]:
        """Return placed elements in placement order."""
        pass

    @abstractmethod
    def set_spacing(self, hgap: int, vgap: int, padding: Tuple[int, int, int, int]) -> None:
        """Configure gaps between cells and the outer padding."""
        pass


class ElementFactory(ABC):
    """Creates every visual element a grid needs."""

    @abstractmethod
    def create_surface(self) -> Surface:
        pass

    @abstractmethod
    def create_label(self, text: str, tooltip: str = "") -> Any:
        pass

    @abstractmethod
    def create_numeric_stepper(self, number_type: Type, value: Any = None) -> Any:
        """Stepper for number_type whose range covers value."""
        pass

    @abstractmethod
    def create_enum_choice(self, enum_type: Type[Enum]) -> Any:
        pass

    @abstractmethod
    def create_option_choice(self, options: Sequence[Any]) -> Any:
        pass

    @abstractmethod
    def create_single_line_text(self) -> Any:
        pass

    @abstractmethod
    def create_multi_line_text(self) -> Any:
        pass

    @abstractmethod
    def create_boolean_toggle(self) -> Any:
        pass

    @abstractmethod
    def create_action_trigger(self, text: str, action: Callable[[], None]) -> Any:
        pass

    @abstractmethod
    def create_separator(self) -> Any:
        pass

    @abstractmethod
    def apply_constraints(self, element: Any, constraints: WidgetConstraints) -> None:
        """Apply editability, width limit and enabled state to an element."""
        pass
