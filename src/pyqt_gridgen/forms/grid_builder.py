"""
Grid builder - turns an object's marked members into a grid surface.

For every marked member of the bound object (derived class first, fields
before methods), the builder:

1. Resolves the widget kind and constraints (WidgetKindResolver)
2. Creates a label through the field or method NamingStrategy
3. Creates the element through the ElementFactory and shows the value
4. Wires user edits back through the MutationChannel
5. Places the pair with the LayoutEngine

Nested objects are built by a child builder with the same settings; its
recorded entries are merged between two separators. Every bind/refresh
builds a fresh surface; a build that fails leaves the previous surface
and state untouched.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, FrozenSet, List, Optional, Union

from pyqt_gridgen.core import timer
from pyqt_gridgen.errors import BindingError
from pyqt_gridgen.protocols import ElementFactory, GridGenConfig, Surface, get_grid_config
from pyqt_gridgen.services import (
    Diagnostic, DiagnosticKind, DiagnosticSink, ListenerRegistry, LoggingDiagnosticSink,
    MutationChannel
)

from .grid_markers import GridFieldMeta
from .layout_engine import LabelDisplayOrder, LayoutEngine, LayoutPolicy, PlacedEntry
from .member_descriptor import MemberDescriptor
from .member_type_utils import MemberTypeUtils
from .metadata_extractor import MetadataExtractor
from .naming_strategy import DefaultNamingStrategy, NamingStrategy
from .widget_dispatcher import WidgetDispatcher
from .widget_kind_resolver import WidgetKind, WidgetKindResolver

logger = logging.getLogger(__name__)

# Returned by value conversion when user input cannot be stored
_REJECTED = object()

_TEXT_KINDS = (WidgetKind.SINGLE_LINE_TEXT, WidgetKind.MULTI_LINE_TEXT)


class GridState(Enum):
    EMPTY = "empty"   # No object bound
    BUILT = "built"   # Surface reflects the bound object


class GridBuilder:
    """
    Builds and rebuilds the grid surface of one bound object.

    Example:
        builder = GridBuilder()
        builder.bind(connection)
        window.setCentralWidget(builder.surface)
    """

    def __init__(self, factory: Optional[ElementFactory] = None, *,
                 config: Optional[GridGenConfig] = None,
                 registry: Optional[ListenerRegistry] = None,
                 diagnostics: Optional[DiagnosticSink] = None,
                 channel: Optional[MutationChannel] = None):
        config = config if config is not None else get_grid_config()
        if factory is None:
            from .widget_factory import QtElementFactory
            factory = QtElementFactory(config.layout)
        self.factory = factory

        self.label_display_order: Union[LabelDisplayOrder, LayoutPolicy] = config.label_display_order
        self.node_width_limit: Optional[float] = config.node_width_limit
        self.field_naming: NamingStrategy = config.field_naming
        self.method_naming: NamingStrategy = config.method_naming
        self.nested_heading_suffix = config.nested_heading_suffix

        self.diagnostics = diagnostics if diagnostics is not None else LoggingDiagnosticSink()
        self.channel = channel if channel is not None else MutationChannel(registry, self.diagnostics)
        self.extractor = MetadataExtractor()
        self.resolver = WidgetKindResolver()

        self.state = GridState.EMPTY
        self.bound_object: Any = None
        self.surface: Optional[Surface] = None
        self.entries: List[PlacedEntry] = []
        self._ancestors: FrozenSet[int] = frozenset()
        self._on_build_complete_callbacks: List[Callable[[Surface, Optional[Surface]], None]] = []

    @classmethod
    def child_of(cls, parent: GridBuilder) -> GridBuilder:
        """Create a builder for a nested object that inherits every setting of parent."""
        child = cls.__new__(cls)
        child.__dict__.update(parent.__dict__)
        child.state = GridState.EMPTY
        child.bound_object = None
        child.surface = None
        child.entries = []
        child._ancestors = parent._ancestors | {id(parent.bound_object)}
        child._on_build_complete_callbacks = []
        return child

    # ==================== HOST API ====================

    def bind(self, obj: Any) -> Surface:
        """
        Bind an object and build its grid.

        Raises:
            BindingError: If obj is None or nests itself
        """
        if obj is None:
            raise BindingError("The received object is None")
        if id(obj) in self._ancestors:
            raise BindingError(f"{type(obj).__name__} object contains itself as a nested object")

        previous = self.bound_object
        self.bound_object = obj
        try:
            return self._build()
        except Exception:
            self.bound_object = previous
            raise

    def refresh(self) -> Surface:
        """
        Rebuild the grid from the bound object, e.g. after changing a setting.

        Raises:
            BindingError: If no object has been bound yet
        """
        if self.state is GridState.EMPTY:
            raise BindingError("refresh() requires a bound object; call bind() first")
        return self._build()

    def set_label_display_order(self, order: Union[LabelDisplayOrder, LayoutPolicy]) -> None:
        self.label_display_order = order

    def set_node_width_limit(self, limit: Optional[float]) -> None:
        """Maximum width of input elements. Applies from the next build."""
        self.node_width_limit = limit

    def set_field_naming_strategy(self, strategy: Union[NamingStrategy, DefaultNamingStrategy]) -> None:
        self.field_naming = _as_strategy(strategy)

    def set_method_naming_strategy(self, strategy: Union[NamingStrategy, DefaultNamingStrategy]) -> None:
        self.method_naming = _as_strategy(strategy)

    def register_listener(self, listener) -> Any:
        return self.channel.registry.register(listener)

    def unregister_listener(self, listener) -> bool:
        return self.channel.registry.unregister(listener)

    def on_build_complete(self, callback: Callable[[Surface, Optional[Surface]], None]) -> None:
        """Call callback(new_surface, old_surface) after every successful build."""
        self._on_build_complete_callbacks.append(callback)

    # ==================== BUILD ====================

    def _build(self) -> Surface:
        obj = self.bound_object
        surface = self.factory.create_surface()
        engine = LayoutEngine(surface, self.label_display_order, self.factory.create_separator)

        with timer("Grid build", log_args=True, object_type=type(obj).__name__) as timing:
            try:
                for member in self.extractor.extract(type(obj)):
                    if member.is_field:
                        self._handle_field(engine, member, obj)
                    else:
                        self._handle_method(engine, member, obj)
            except Exception:
                surface.clear()
                raise

        old_surface = self.surface
        self.surface = surface
        self.entries = engine.entries
        self.state = GridState.BUILT
        logger.debug(f"Built grid for {type(obj).__name__}: {len(engine.entries)} entries "
                     f"in {timing.elapsed_ms:.1f}ms")

        for callback in self._on_build_complete_callbacks:
            callback(surface, old_surface)
        if old_surface is not None:
            old_surface.clear()
        return surface

    def _handle_field(self, engine: LayoutEngine, member: MemberDescriptor, owner: Any) -> None:
        member_type = member.member_type_for(owner)
        if self.resolver.is_nested(member_type, member.metadata):
            self._handle_nested_field(engine, member, owner)
            return
        label, element = self._create_field_pair(member, owner, member_type)
        engine.add_pair(label, element)

    def _handle_nested_field(self, engine: LayoutEngine, member: MemberDescriptor, owner: Any) -> None:
        """Merge a nested object's grid between two separators, under a heading."""
        meta: GridFieldMeta = member.metadata
        engine.add_separator()
        heading = self.field_naming.to_label(member.name) + self.nested_heading_suffix
        engine.add_heading(self.factory.create_label(heading, meta.tooltip))

        value = self.channel.read(member, owner)
        if value is None:
            logger.debug(f"{member.qualified_name} is None, nothing to nest")
        else:
            child = GridBuilder.child_of(self)
            child.bind(value)
            engine.merge_surface(child.entries)
            child.surface.clear()

        engine.add_separator()

    def _create_field_pair(self, member: MemberDescriptor, owner: Any, member_type: Optional[type]):
        meta: GridFieldMeta = member.metadata
        kind = self.resolver.resolve(member_type, meta)
        constraints = self.resolver.constraints_for(member, self.node_width_limit)

        label = self.factory.create_label(self.field_naming.to_label(member.name), meta.tooltip)
        value = self.channel.read(member, owner)
        element = self._create_element(kind, member_type, meta, value)
        self.factory.apply_constraints(element, constraints)

        WidgetDispatcher.set_value(element, value)
        WidgetDispatcher.connect_change_signal(
            element, self._make_writer(member, owner, member_type, kind))
        logger.debug(f"{member.qualified_name} -> {kind.name}")
        return label, element

    def _create_element(self, kind: WidgetKind, member_type: Optional[type],
                        meta: GridFieldMeta, value: Any) -> Any:
        factory = self.factory
        dispatch = {
            WidgetKind.OPTION_CHOICE: lambda: factory.create_option_choice(meta.options),
            WidgetKind.NUMERIC_STEPPER: lambda: factory.create_numeric_stepper(member_type, value),
            WidgetKind.ENUM_CHOICE: lambda: factory.create_enum_choice(member_type),
            WidgetKind.BOOLEAN_TOGGLE: factory.create_boolean_toggle,
            WidgetKind.SINGLE_LINE_TEXT: factory.create_single_line_text,
            WidgetKind.MULTI_LINE_TEXT: factory.create_multi_line_text,
        }
        return dispatch[kind]()

    def _make_writer(self, member: MemberDescriptor, owner: Any,
                     member_type: Optional[type], kind: WidgetKind) -> Callable[[Any], None]:
        def write(value: Any) -> None:
            converted = _convert_input(value, member_type, kind)
            if converted is _REJECTED:
                logger.warning(f"Rejected input {value!r} for {member.qualified_name}: "
                               f"not convertible to {member_type.__name__}")
                return
            self.channel.write(member, owner, converted)
        return write

    def _handle_method(self, engine: LayoutEngine, member: MemberDescriptor, owner: Any) -> None:
        meta = member.metadata
        label_text = self.method_naming.to_label(member.name)
        label = self.factory.create_label(label_text, meta.tooltip)
        trigger = self.factory.create_action_trigger(meta.name or label_text,
                                                     self._make_action(member, owner))
        self.factory.apply_constraints(trigger, self.resolver.constraints_for(member, self.node_width_limit))
        engine.add_pair(label, trigger)

    def _make_action(self, member: MemberDescriptor, owner: Any) -> Callable[[], None]:
        def invoke() -> None:
            try:
                getattr(owner, member.name)()
            except Exception as e:
                self.diagnostics.report(Diagnostic(
                    kind=DiagnosticKind.ACTION_FAILURE,
                    member=member,
                    error=e,
                    message=f"Could not invoke method {member.qualified_name}: {e}",
                ))
        return invoke


def _as_strategy(strategy: Union[NamingStrategy, DefaultNamingStrategy]) -> NamingStrategy:
    if isinstance(strategy, DefaultNamingStrategy):
        return strategy.strategy
    if not isinstance(strategy, NamingStrategy):
        raise TypeError(f"{strategy!r} is not a NamingStrategy")
    return strategy


def _convert_input(value: Any, member_type: Optional[type], kind: WidgetKind) -> Any:
    """Convert an element value back to the field's declared type."""
    if member_type is None:
        return value
    if kind in _TEXT_KINDS:
        if issubclass(member_type, str):
            return value
        try:
            converted = member_type(value)
        except (TypeError, ValueError):
            return _REJECTED
        # Accept only conversions that read back as the typed text
        return converted if str(converted) == value else _REJECTED
    if kind is WidgetKind.NUMERIC_STEPPER and not isinstance(value, member_type):
        try:
            return member_type(value)
        except (TypeError, ValueError):
            return _REJECTED
    return value
