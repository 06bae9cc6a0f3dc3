"""
Grid generation.

Metadata extraction, widget kind resolution, naming, layout and the
GridBuilder that ties them together.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .grid_builder import GridBuilder, GridState
    from .reflector_grid import ReflectorGrid
    from .grid_markers import FieldKind, GridFieldMeta, GridMethodMeta, grid_field, grid_method
    from .member_descriptor import MemberDescriptor, MemberKind
    from .metadata_extractor import MetadataExtractor, all_fields_in_hierarchy
    from .widget_kind_resolver import WidgetKind, WidgetKindResolver
    from .naming_strategy import (
        NamingStrategy, VerbatimNaming, SplitToCapitalizedWords, DefaultNamingStrategy
    )
    from .layout_engine import (
        InsertionPosition, LabelDisplayOrder, LayoutEngine, LayoutPolicy, PlacedEntry, EntryKind
    )
    from .widget_factory import QtElementFactory
    from .grid_surface import QtGridSurface

_EXPORTS = {
    "GridBuilder": ("pyqt_gridgen.forms.grid_builder", "GridBuilder"),
    "GridState": ("pyqt_gridgen.forms.grid_builder", "GridState"),
    "ReflectorGrid": ("pyqt_gridgen.forms.reflector_grid", "ReflectorGrid"),
    "FieldKind": ("pyqt_gridgen.forms.grid_markers", "FieldKind"),
    "GridFieldMeta": ("pyqt_gridgen.forms.grid_markers", "GridFieldMeta"),
    "GridMethodMeta": ("pyqt_gridgen.forms.grid_markers", "GridMethodMeta"),
    "grid_field": ("pyqt_gridgen.forms.grid_markers", "grid_field"),
    "grid_method": ("pyqt_gridgen.forms.grid_markers", "grid_method"),
    "MemberDescriptor": ("pyqt_gridgen.forms.member_descriptor", "MemberDescriptor"),
    "MemberKind": ("pyqt_gridgen.forms.member_descriptor", "MemberKind"),
    "MetadataExtractor": ("pyqt_gridgen.forms.metadata_extractor", "MetadataExtractor"),
    "all_fields_in_hierarchy": ("pyqt_gridgen.forms.metadata_extractor", "all_fields_in_hierarchy"),
    "WidgetKind": ("pyqt_gridgen.forms.widget_kind_resolver", "WidgetKind"),
    "WidgetKindResolver": ("pyqt_gridgen.forms.widget_kind_resolver", "WidgetKindResolver"),
    "NamingStrategy": ("pyqt_gridgen.forms.naming_strategy", "NamingStrategy"),
    "VerbatimNaming": ("pyqt_gridgen.forms.naming_strategy", "VerbatimNaming"),
    "SplitToCapitalizedWords": ("pyqt_gridgen.forms.naming_strategy", "SplitToCapitalizedWords"),
    "DefaultNamingStrategy": ("pyqt_gridgen.forms.naming_strategy", "DefaultNamingStrategy"),
    "InsertionPosition": ("pyqt_gridgen.forms.layout_engine", "InsertionPosition"),
    "LabelDisplayOrder": ("pyqt_gridgen.forms.layout_engine", "LabelDisplayOrder"),
    "LayoutEngine": ("pyqt_gridgen.forms.layout_engine", "LayoutEngine"),
    "LayoutPolicy": ("pyqt_gridgen.forms.layout_engine", "LayoutPolicy"),
    "PlacedEntry": ("pyqt_gridgen.forms.layout_engine", "PlacedEntry"),
    "EntryKind": ("pyqt_gridgen.forms.layout_engine", "EntryKind"),
    "QtElementFactory": ("pyqt_gridgen.forms.widget_factory", "QtElementFactory"),
    "QtGridSurface": ("pyqt_gridgen.forms.grid_surface", "QtGridSurface"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
