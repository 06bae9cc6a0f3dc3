"""Tests for the grid positioning engine."""

import pytest

from pyqt_gridgen.forms.layout_engine import (
    EntryKind, InsertionPosition, LabelDisplayOrder, LayoutEngine, LayoutPolicy,
    SideBySidePolicy, StackedPolicy
)
from pyqt_gridgen.protocols.rendering import Placement, Surface


class RecordingSurface(Surface):
    """In-memory surface that records placements."""

    def __init__(self):
        self.placed = []

    def place(self, element, row, column, row_span=1, column_span=1):
        self.placed.append(Placement(element, row, column, row_span, column_span))

    def clear(self):
        self.placed.clear()

    def placements(self):
        return list(self.placed)

    def set_spacing(self, hgap, vgap, padding):
        pass


def make_engine(order=LabelDisplayOrder.SIDE_BY_SIDE):
    return LayoutEngine(RecordingSurface(), order, lambda: "separator")


def cells(surface):
    return [(p.element, p.row, p.column, p.column_span) for p in surface.placements()]


def test_side_by_side_pairs():
    """Label and element share a row; one row per pair."""
    engine = make_engine()
    assert engine.add_pair("l0", "e0") == InsertionPosition(1, 0)
    assert engine.add_pair("l1", "e1") == InsertionPosition(2, 0)
    assert cells(engine.surface) == [
        ("l0", 0, 0, 1), ("e0", 0, 1, 1),
        ("l1", 1, 0, 1), ("e1", 1, 1, 1),
    ]


def test_stacked_pairs():
    """Label above element; two rows per pair."""
    engine = make_engine(LabelDisplayOrder.STACKED)
    assert engine.add_pair("l0", "e0") == InsertionPosition(2, 0)
    assert engine.add_pair("l1", "e1") == InsertionPosition(4, 0)
    assert cells(engine.surface) == [
        ("l0", 0, 0, 1), ("e0", 1, 0, 1),
        ("l1", 2, 0, 1), ("e1", 3, 0, 1),
    ]


def test_separator_and_heading_span_full_width():
    """Full-width entries span both columns side by side, one column stacked."""
    engine = make_engine()
    engine.add_separator()
    engine.add_heading("Title:")
    assert cells(engine.surface) == [("separator", 0, 0, 2), ("Title:", 1, 0, 2)]
    assert [e.kind for e in engine.entries] == [EntryKind.SEPARATOR, EntryKind.HEADING]

    stacked = make_engine(LabelDisplayOrder.STACKED)
    assert stacked.add_separator("given") == InsertionPosition(1, 0)
    assert cells(stacked.surface) == [("given", 0, 0, 1)]


@pytest.mark.parametrize("pair_count", [0, 1, 3])
def test_merge_into_empty_parent(pair_count):
    """Merging N side-by-side pairs advances the parent by N rows, in order."""
    child = make_engine()
    for i in range(pair_count):
        child.add_pair(f"l{i}", f"e{i}")

    parent = make_engine()
    position = parent.merge_surface(child.entries)

    assert position == InsertionPosition(pair_count, 0)
    expected = [element for i in range(pair_count) for element in (f"l{i}", f"e{i}")]
    assert [p.element for p in parent.surface.placements()] == expected
    assert parent.entries == child.entries


def test_merge_after_existing_entries():
    """Merged entries continue from the parent's cursor."""
    child = make_engine()
    child.add_pair("cl", "ce")
    child.add_separator("child-sep")

    parent = make_engine()
    parent.add_pair("pl", "pe")
    parent.add_separator("sep")
    parent.merge_surface(child.entries)

    assert cells(parent.surface)[3:] == [
        ("cl", 2, 0, 1), ("ce", 2, 1, 1), ("child-sep", 3, 0, 2),
    ]


def test_policy_instances_and_enum():
    """LabelDisplayOrder maps to the built-in policies."""
    assert isinstance(LabelDisplayOrder.SIDE_BY_SIDE.policy, SideBySidePolicy)
    assert isinstance(LabelDisplayOrder.STACKED.policy, StackedPolicy)
    engine = LayoutEngine(RecordingSurface(), StackedPolicy(), lambda: None)
    assert isinstance(engine.policy, StackedPolicy)


def test_policy_that_does_not_advance_fails_loud():
    """Overlapping placements are refused."""

    class StuckPolicy(LayoutPolicy):
        def place_pair(self, surface, position, label, element):
            return position

    engine = LayoutEngine(RecordingSurface(), StuckPolicy(), lambda: None)
    with pytest.raises(RuntimeError, match="did not advance"):
        engine.add_pair("l", "e")
    assert engine.entries == []
