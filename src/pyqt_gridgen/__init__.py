"""
pyqt-gridgen: metadata-driven grid generation for PyQt6.

Turns any object whose fields and methods are marked with grid_field()
and @grid_method into an editable, labeled grid, without per-object
layout code.

Architecture:
- Core: timing utilities
- Protocols: element ABCs, Qt adapters, rendering capability, config
- Services: mutation channel, listener registry, diagnostics
- Forms: metadata extraction, widget kinds, naming, layout, GridBuilder

Key Features:
- Walks the whole class hierarchy, derived class first
- Numeric steppers, enum/option dropdowns, text fields and action buttons
- Side-by-side or stacked layout, nested objects merged as sub-grids
- Every edit goes through one mutation channel with ordered notifications
"""

import importlib

__version__ = "0.1.0"

_EXPORTS = {
    "GridBuilder": "pyqt_gridgen.forms",
    "ReflectorGrid": "pyqt_gridgen.forms",
    "grid_field": "pyqt_gridgen.forms",
    "grid_method": "pyqt_gridgen.forms",
    "FieldKind": "pyqt_gridgen.forms",
    "LabelDisplayOrder": "pyqt_gridgen.forms",
    "DefaultNamingStrategy": "pyqt_gridgen.forms",
    "ListenerRegistry": "pyqt_gridgen.services",
    "ChangeListener": "pyqt_gridgen.protocols",
    "ObjectChangeListener": "pyqt_gridgen.protocols",
}


def __getattr__(name: str):
    if name in _EXPORTS:
        value = getattr(importlib.import_module(_EXPORTS[name]), name)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["__version__", *_EXPORTS.keys()]
