"""Tests for GridBuilder and the ReflectorGrid host widget."""

from pathlib import Path

import pytest
from PyQt6.QtCore import Qt

from pyqt_gridgen.errors import BindingError, MetadataError
from pyqt_gridgen.forms import (
    DefaultNamingStrategy, EntryKind, GridBuilder, GridState, LabelDisplayOrder, ReflectorGrid
)
from pyqt_gridgen.protocols import (
    ActionButtonAdapter, CheckBoxAdapter, LineEditAdapter, PlainTextEditAdapter
)
from pyqt_gridgen.services import DiagnosticKind
from pyqt_gridgen.widgets import (
    GridSeparator, NoScrollComboBox, NoScrollDoubleSpinBox, NoScrollSpinBox
)

from grid_models import (
    Address, Big, BrokenKind, Connection, Counter, Empty, Faulty, Node, Person, PlainSettings,
    Protocol, Tagged
)


def pairs(builder):
    return [e for e in builder.entries if e.kind is EntryKind.PAIR]


def pair_by_label(builder, text):
    return next(e for e in pairs(builder) if e.label.text() == text)


def test_empty_object_builds_empty_surface(builder):
    """No marked members: no elements and no separators."""
    surface = builder.bind(Empty())
    assert builder.state is GridState.BUILT
    assert builder.entries == []
    assert surface.placements() == []


def test_numeric_field_and_action_end_to_end(builder):
    """One field and one action give two pairs in declaration order."""
    counter = Counter()
    surface = builder.bind(counter)

    assert [e.kind for e in builder.entries] == [EntryKind.PAIR, EntryKind.PAIR]
    count_pair, bump_pair = builder.entries
    assert count_pair.label.text() == "Count"
    assert isinstance(count_pair.element, NoScrollSpinBox)
    assert count_pair.element.get_value() == 5
    assert bump_pair.label.text() == "Bump"
    assert isinstance(bump_pair.element, ActionButtonAdapter)
    assert bump_pair.element.text() == "Bump"

    assert surface.element_at(0, 0) is count_pair.label
    assert surface.element_at(0, 1) is count_pair.element
    assert surface.element_at(1, 1) is bump_pair.element

    bump_pair.element.click()
    assert counter.calls == 1


def test_edits_are_written_through_listeners(builder, registry):
    """User edits reach the object and every listener."""
    events = []
    builder.register_listener(lambda member, old, new, owner: events.append((member.name, old, new)))
    counter = Counter()
    builder.bind(counter)

    builder.entries[0].element.setValue(42)

    assert counter.count == 42
    assert events == [("count", 5, 42)]


def test_widget_kinds_for_connection(builder):
    """Every field type gets its element kind and edits convert back."""
    conn = Connection()
    builder.bind(conn)

    host = pair_by_label(builder, "Host")
    assert isinstance(host.element, LineEditAdapter)
    assert host.label.toolTip() == "Server to connect to"
    host.element.setText("example.org")
    host.element.textEdited.emit("example.org")
    assert conn.host == "example.org"

    port = pair_by_label(builder, "Port To Send To")
    assert isinstance(port.element, NoScrollSpinBox)
    assert port.element.get_value() == 8080

    timeout = pair_by_label(builder, "Timeout")
    assert isinstance(timeout.element, NoScrollDoubleSpinBox)
    timeout.element.setValue(2.5)
    assert conn.timeout == 2.5

    protocol = pair_by_label(builder, "Protocol")
    assert isinstance(protocol.element, NoScrollComboBox)
    assert protocol.element.get_value() is Protocol.TCP
    protocol.element.setCurrentIndex(1)
    assert conn.protocol is Protocol.UDP

    mode = pair_by_label(builder, "Mode")
    assert isinstance(mode.element, NoScrollComboBox)
    assert mode.element.get_value() == "fast"
    mode.element.setCurrentIndex(0)
    assert conn.mode == "slow"

    notes = pair_by_label(builder, "Notes")
    assert isinstance(notes.element, PlainTextEditAdapter)
    notes.element.setPlainText("line one\nline two")
    assert conn.notes == "line one\nline two"

    secure = pair_by_label(builder, "Secure")
    assert isinstance(secure.element, CheckBoxAdapter)
    secure.element.setChecked(True)
    assert conn.secure is True

    cert = pair_by_label(builder, "Cert Path")
    assert isinstance(cert.element, LineEditAdapter)
    assert cert.element.get_value() == "cert.pem"
    cert.element.setText("other.pem")
    cert.element.textEdited.emit("other.pem")
    assert conn.cert_path == Path("other.pem")


def test_non_editable_and_width_constraints(builder):
    """Editability and the width limit are applied to every element."""
    builder.bind(Connection())
    password = pair_by_label(builder, "Password")
    assert password.element.isReadOnly()
    assert password.element.focusPolicy() == Qt.FocusPolicy.NoFocus
    assert password.element.testAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
    assert all(e.element.maximumWidth() == 300 for e in pairs(builder))

    builder.set_node_width_limit(120)
    builder.refresh()
    assert all(e.element.maximumWidth() == 120 for e in pairs(builder))


def test_nested_object_is_bracketed_by_separators(builder):
    """A nested dataclass is merged under a heading between two separators."""
    person = Person()
    surface = builder.bind(person)

    kinds = [e.kind for e in builder.entries]
    assert kinds == [
        EntryKind.PAIR, EntryKind.SEPARATOR, EntryKind.HEADING,
        EntryKind.PAIR, EntryKind.PAIR, EntryKind.SEPARATOR,
    ]
    assert builder.entries[2].label.text() == "Address:"
    assert all(isinstance(e.element, GridSeparator)
               for e in builder.entries if e.kind is EntryKind.SEPARATOR)

    street = pair_by_label(builder, "Street")
    assert street.element.parent() is surface
    street.element.setText("Elm St")
    street.element.textEdited.emit("Elm St")
    assert person.address.street == "Elm St"
    assert person.address == Address(street="Elm St", number=1)


def test_nested_none_and_cycles(builder):
    """A None nested value shows only its frame; a self-containing object is refused."""
    builder.bind(Node())
    assert [e.kind for e in builder.entries] == [
        EntryKind.PAIR, EntryKind.SEPARATOR, EntryKind.HEADING, EntryKind.SEPARATOR,
    ]

    looped = Node(label="loop")
    looped.child = looped
    previous_surface = builder.surface
    with pytest.raises(BindingError, match="contains itself"):
        builder.bind(looped)
    assert builder.surface is previous_surface
    assert isinstance(builder.bound_object, Node) and builder.bound_object is not looped


def test_stacked_layout(builder):
    """Stacked grids put each label above its element."""
    builder.set_label_display_order(LabelDisplayOrder.STACKED)
    surface = builder.bind(Counter())
    count_pair, bump_pair = builder.entries
    assert surface.element_at(0, 0) is count_pair.label
    assert surface.element_at(1, 0) is count_pair.element
    assert surface.element_at(2, 0) is bump_pair.label
    assert surface.element_at(3, 0) is bump_pair.element


def test_naming_strategy_applies_on_next_build(builder):
    """Swapping naming strategies never relabels an existing surface."""
    builder.bind(Connection())
    port = pair_by_label(builder, "Port To Send To")

    builder.set_field_naming_strategy(DefaultNamingStrategy.VERBATIM)
    assert port.label.text() == "Port To Send To"

    builder.refresh()
    labels = [e.label.text() for e in pairs(builder)]
    assert "port_to_send_to" in labels
    assert "Port To Send To" not in labels


def test_action_failures_are_reported(builder, sink):
    """A raising action is reported and the grid keeps working."""
    faulty = Faulty()
    builder.bind(faulty)

    explode = pair_by_label(builder, "Explode")
    explode.element.click()

    failures = sink.of_kind(DiagnosticKind.ACTION_FAILURE)
    assert len(failures) == 1
    assert failures[0].member.name == "explode"
    assert "boom" in failures[0].message

    pair_by_label(builder, "Value").element.setValue(3)
    assert faulty.value == 3

    disabled = pair_by_label(builder, "Disabled")
    assert not disabled.element.isEnabled()


def test_binding_errors_keep_prior_state(builder):
    """bind(None) and refresh() before bind() fail without side effects."""
    with pytest.raises(BindingError):
        builder.refresh()
    assert builder.state is GridState.EMPTY

    counter = Counter()
    surface = builder.bind(counter)
    with pytest.raises(BindingError):
        builder.bind(None)
    assert builder.bound_object is counter
    assert builder.surface is surface


def test_unknown_field_kind_aborts_build(builder):
    """Metadata errors abort the build and keep the previous grid."""
    counter = Counter()
    surface = builder.bind(counter)
    with pytest.raises(MetadataError):
        builder.bind(BrokenKind())
    assert builder.bound_object is counter
    assert builder.surface is surface


def test_refresh_builds_fresh_surface(builder):
    """Every refresh creates a new surface from the live object."""
    counter = Counter()
    first = builder.bind(counter)
    counter.count = 11
    second = builder.refresh()
    assert second is not first
    assert builder.entries[0].element.get_value() == 11
    assert first.placements() == []


def test_plain_class_with_annotated_markers(builder):
    """Non-dataclass objects marked with Annotated are supported."""
    settings = PlainSettings()
    builder.bind(settings)
    assert [e.label.text() for e in pairs(builder)] == ["Retries", "Comment", "Reset"]
    pair_by_label(builder, "Reset").element.click()
    assert settings.retries == 0


def test_child_builder_inherits_settings(builder):
    """Nested builders copy every setting of their parent."""
    builder.set_label_display_order(LabelDisplayOrder.STACKED)
    builder.set_node_width_limit(90)
    builder.set_method_naming_strategy(DefaultNamingStrategy.VERBATIM)
    child = GridBuilder.child_of(builder)
    assert child.label_display_order is LabelDisplayOrder.STACKED
    assert child.node_width_limit == 90
    assert child.method_naming is builder.method_naming
    assert child.channel is builder.channel
    assert child.state is GridState.EMPTY


def test_reflector_grid_swaps_surfaces(qapp, registry, sink):
    """The host widget always shows the latest surface."""
    grid = ReflectorGrid(GridBuilder(registry=registry, diagnostics=sink))
    first = grid.bind(Counter())
    assert first.parent() is grid
    second = grid.refresh()
    assert second.parent() is grid
    assert grid.surface is second
    assert first.parent() is None


def test_int_beyond_spin_box_range(builder):
    """Ints QSpinBox cannot hold get a wide stepper and stay ints."""
    big = Big()
    builder.bind(big)

    size = pair_by_label(builder, "Size").element
    assert isinstance(size, NoScrollDoubleSpinBox)
    assert size.decimals() == 0
    assert size.get_value() == 5_000_000_000
    assert isinstance(pair_by_label(builder, "Small").element, NoScrollSpinBox)

    size.setValue(6_000_000_000)
    assert big.size == 6_000_000_000
    assert isinstance(big.size, int)


def test_text_that_does_not_convert_back_is_rejected(builder, registry):
    """Container fields never get the characters of the typed text."""
    events = []
    builder.register_listener(lambda *args: events.append(args))
    tagged = Tagged()
    builder.bind(tagged)

    tags = pair_by_label(builder, "Tags").element
    assert tags.get_value() == "['a']"
    tags.setText("['a', 'b']")
    tags.textEdited.emit("['a', 'b']")

    assert tagged.tags == ["a"]
    assert events == []


def test_tooltips_reach_elements(builder):
    """Field and method tooltips are shown on the label and the element."""
    builder.bind(Connection())
    host = pair_by_label(builder, "Host")
    assert host.element.toolTip() == "Server to connect to"
    assert pair_by_label(builder, "Port To Send To").element.toolTip() == ""
