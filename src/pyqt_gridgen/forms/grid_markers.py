"""
Markers that make fields and methods eligible for grid generation.

Fields are marked either through ``grid_field()`` on a dataclass::

    @dataclass
    class Connection:
        host: str = grid_field("localhost", tooltip="Server to connect to")
        port_to_send_to: int = grid_field(8080)

or through ``Annotated`` on any class::

    class Connection:
        host: Annotated[str, GridFieldMeta(tooltip="Server to connect to")]

Methods are marked with ``@grid_method``::

        @grid_method(name="Connect")
        def connect(self): ...
"""

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Sequence, Tuple

GRID_FIELD_KEY = "pyqt_gridgen.field"
GRID_METHOD_ATTR = "__grid_method__"


class FieldKind(Enum):
    """Free-text widget selector for fields that are not numbers, enums or options."""
    TEXT_FIELD = "text_field"
    TEXT_AREA = "text_area"


@dataclass(frozen=True)
class GridFieldMeta:
    """Layout metadata attached to a marked field."""
    options: Tuple[Any, ...] = ()
    editable: bool = True
    tooltip: str = ""
    field_kind: Optional[FieldKind] = FieldKind.TEXT_FIELD
    nested: bool = False

    def __post_init__(self):
        # Accept any sequence for options while keeping the record hashable
        object.__setattr__(self, "options", tuple(self.options))


@dataclass(frozen=True)
class GridMethodMeta:
    """Action metadata attached to a marked method."""
    name: str = ""
    enabled: bool = True
    tooltip: str = ""


def grid_field(default: Any = dataclasses.MISSING, *,
               default_factory: Any = dataclasses.MISSING,
               options: Sequence[Any] = (),
               editable: bool = True,
               tooltip: str = "",
               field_kind: Optional[FieldKind] = FieldKind.TEXT_FIELD,
               nested: bool = False,
               **field_kwargs) -> Any:
    """
    Declare a dataclass field that shows up in generated grids.

    Args:
        default: Default value of the field
        default_factory: Factory for mutable defaults (nested objects, lists)
        options: Fixed values offered in a dropdown; overrides the field type
        editable: False shows the value but blocks input
        tooltip: Hover text for the field label
        field_kind: TEXT_FIELD or TEXT_AREA for free-text fields
        nested: Render the value as an embedded sub-grid
        **field_kwargs: Passed through to dataclasses.field()

    Returns:
        A dataclasses.Field carrying GridFieldMeta in its metadata
    """
    meta = GridFieldMeta(options=tuple(options), editable=editable, tooltip=tooltip,
                         field_kind=field_kind, nested=nested)
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[GRID_FIELD_KEY] = meta
    return dataclasses.field(default=default, default_factory=default_factory,
                             metadata=metadata, **field_kwargs)


def grid_method(func: Optional[Callable] = None, *, name: str = "",
                enabled: bool = True, tooltip: str = "") -> Any:
    """
    Mark a zero-argument method as a grid action.

    Usable bare (``@grid_method``) or with arguments
    (``@grid_method(name="Send")``).
    """
    meta = GridMethodMeta(name=name, enabled=enabled, tooltip=tooltip)

    def decorator(method: Callable) -> Callable:
        setattr(method, GRID_METHOD_ATTR, meta)
        return method

    if func is not None:
        return decorator(func)
    return decorator
