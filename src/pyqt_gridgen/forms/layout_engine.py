"""
Grid positioning engine.

Places label/element pairs, separators and headings on a Surface
according to a LabelDisplayOrder policy, and merges the entries of an
already-built child grid into its own surface.

Design:
- InsertionPosition: immutable cursor, replaced after every placement
- LayoutPolicy: decides cells and cursor advance for each entry type
- LayoutEngine: owns one cursor and the ordered record of what it placed

The engine knows nothing about objects or members. Nested objects are
handled by building them on their own engine and merging the recorded
entries, never by reading a live container's children.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Iterable, List, Optional, Union

if TYPE_CHECKING:
    from pyqt_gridgen.protocols.rendering import Surface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InsertionPosition:
    """Cursor for the next placement on a surface."""
    row: int = 0
    column: int = 0

    def advanced(self, rows: int) -> InsertionPosition:
        return replace(self, row=self.row + rows)


class EntryKind(Enum):
    PAIR = "pair"
    SEPARATOR = "separator"
    HEADING = "heading"


@dataclass(frozen=True)
class PlacedEntry:
    """Record of one placement, replayable onto another surface."""
    kind: EntryKind
    label: Any = None
    element: Any = None


class LayoutPolicy(ABC):
    """Decides where entries go and how far the cursor moves."""

    # Number of grid columns a full-width entry spans
    columns: int = 1

    @abstractmethod
    def place_pair(self, surface: Surface, position: InsertionPosition,
                   label: Any, element: Any) -> InsertionPosition:
        pass

    def place_full_width(self, surface: Surface, position: InsertionPosition,
                         element: Any) -> InsertionPosition:
        """Place a separator or heading across every column of the policy."""
        surface.place(element, position.row, position.column, 1, self.columns)
        return position.advanced(1)


class SideBySidePolicy(LayoutPolicy):
    """Label in the current column, element in the next one, one row per pair."""

    columns = 2

    def place_pair(self, surface, position, label, element):
        surface.place(label, position.row, position.column)
        surface.place(element, position.row, position.column + 1)
        return position.advanced(1)


class StackedPolicy(LayoutPolicy):
    """Label above its element in the same column, two rows per pair."""

    columns = 1

    def place_pair(self, surface, position, label, element):
        surface.place(label, position.row, position.column)
        surface.place(element, position.row + 1, position.column)
        return position.advanced(2)


class LabelDisplayOrder(Enum):
    """Built-in layout policies."""
    SIDE_BY_SIDE = "side_by_side"
    STACKED = "stacked"

    @property
    def policy(self) -> LayoutPolicy:
        return _POLICIES[self]()


_POLICIES = {
    LabelDisplayOrder.SIDE_BY_SIDE: SideBySidePolicy,
    LabelDisplayOrder.STACKED: StackedPolicy,
}


class LayoutEngine:
    """
    Places entries on one surface during one build pass.

    Every public placement method returns the next insertion position.
    Rows strictly increase; an engine is never shared between surfaces.

    Example:
        engine = LayoutEngine(surface, LabelDisplayOrder.SIDE_BY_SIDE, factory.create_separator)
        engine.add_pair(label, spin_box)
        engine.add_separator()
        engine.merge_surface(child_engine.entries)
    """

    def __init__(self, surface: Surface,
                 policy: Union[LayoutPolicy, LabelDisplayOrder],
                 separator_factory: Callable[[], Any]):
        self.surface = surface
        self.policy = policy.policy if isinstance(policy, LabelDisplayOrder) else policy
        self._separator_factory = separator_factory
        self.position = InsertionPosition()
        self.entries: List[PlacedEntry] = []

    def add_pair(self, label: Any, element: Any) -> InsertionPosition:
        """Place a label and its element."""
        self._advance(self.policy.place_pair(self.surface, self.position, label, element))
        self.entries.append(PlacedEntry(EntryKind.PAIR, label, element))
        return self.position

    def add_separator(self, separator: Optional[Any] = None) -> InsertionPosition:
        """Place a full-width divider; a new one is created unless given."""
        if separator is None:
            separator = self._separator_factory()
        self._advance(self.policy.place_full_width(self.surface, self.position, separator))
        self.entries.append(PlacedEntry(EntryKind.SEPARATOR, element=separator))
        return self.position

    def add_heading(self, label: Any) -> InsertionPosition:
        """Place a lone full-width label, e.g. the title of a nested object."""
        self._advance(self.policy.place_full_width(self.surface, self.position, label))
        self.entries.append(PlacedEntry(EntryKind.HEADING, label=label))
        return self.position

    def merge_surface(self, entries: Iterable[PlacedEntry]) -> InsertionPosition:
        """
        Re-place a child grid's entries on this surface, in their original order.

        Pairs stay pairs, so a child built with N pairs under SIDE_BY_SIDE
        advances this cursor by exactly N rows. The elements are re-parented;
        the child surface is left empty and can be discarded.
        """
        merged = 0
        for entry in list(entries):
            if entry.kind is EntryKind.PAIR:
                self.add_pair(entry.label, entry.element)
            elif entry.kind is EntryKind.SEPARATOR:
                self.add_separator(entry.element)
            else:
                self.add_heading(entry.label)
            merged += 1
        logger.debug(f"Merged {merged} child entries, next position {self.position}")
        return self.position

    def _advance(self, new_position: InsertionPosition) -> None:
        if new_position.row <= self.position.row:
            raise RuntimeError(
                f"Layout policy {type(self.policy).__name__} did not advance "
                f"past row {self.position.row}"
            )
        self.position = new_position
