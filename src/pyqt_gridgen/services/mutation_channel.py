"""
Mutation channel for reflective field writes.

Every write a generated grid makes to its bound object goes through
MutationChannel.write(), which enforces a fixed notification order:

1. The value is written (the write is committed before anyone is told)
2. The owning object's on_field_value_changed() hook, if it implements
   ObjectChangeListener. Exceptions from the hook propagate.
3. Every listener in the ListenerRegistry, in registration order. Each
   listener call is isolated: a failure is reported and the next
   listener still runs.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Union

from pyqt_gridgen.errors import FieldAccessError
from pyqt_gridgen.protocols.change_listeners import ChangeListener, ObjectChangeListener

from .diagnostics import Diagnostic, DiagnosticKind, DiagnosticSink, LoggingDiagnosticSink

logger = logging.getLogger(__name__)

ListenerCallable = Callable[[Any, Any, Any, Any], None]
Listener = Union[ChangeListener, ListenerCallable]


@dataclass(frozen=True)
class FieldChangeEvent:
    """Immutable record of one committed field write."""
    member: Any       # MemberDescriptor of the written field
    old_value: Any
    new_value: Any
    owner: Any        # Object whose field was written


class ListenerRegistry:
    """
    Ordered collection of change listeners.

    The host application owns a registry and injects it into its grids.
    ListenerRegistry.instance() is the process-wide default used when
    nothing is injected.
    """

    _instance = None

    @classmethod
    def instance(cls) -> 'ListenerRegistry':
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __init__(self):
        self._listeners: List[Listener] = []

    def register(self, listener: Listener) -> Listener:
        """
        Append a listener. The same listener registered twice is called twice.

        Returns:
            The listener, so register() can be used as a decorator
        """
        if not isinstance(listener, ChangeListener) and not callable(listener):
            raise TypeError(
                f"Listener {type(listener).__name__} must implement ChangeListener "
                f"or be callable as (member, old_value, new_value, owner)"
            )
        self._listeners.append(listener)
        logger.debug(f"Registered change listener {listener!r} ({len(self._listeners)} total)")
        return listener

    def unregister(self, listener: Listener) -> bool:
        """Remove the first registration of listener. Returns False if it was not registered."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        logger.debug(f"Unregistered change listener {listener!r}")
        return True

    def clear(self) -> None:
        self._listeners.clear()

    def __iter__(self) -> Iterator[Listener]:
        # Snapshot so listeners may (un)register while being notified
        return iter(list(self._listeners))

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, listener: object) -> bool:
        return listener in self._listeners


class MutationChannel:
    """Reads and writes marked fields and notifies about every write."""

    def __init__(self, registry: Optional[ListenerRegistry] = None,
                 diagnostics: Optional[DiagnosticSink] = None):
        self.registry = registry if registry is not None else ListenerRegistry.instance()
        self.diagnostics = diagnostics if diagnostics is not None else LoggingDiagnosticSink()

    def read(self, member, owner: Any) -> Any:
        """
        Read the current value of a field.

        Raises:
            FieldAccessError: If reading the attribute raises, whatever the cause
        """
        try:
            return getattr(owner, member.name)
        except Exception as e:
            raise FieldAccessError(member, owner, e) from e

    def write(self, member, owner: Any, new_value: Any) -> FieldChangeEvent:
        """
        Write a field and notify the owner hook, then every listener.

        Raises:
            FieldAccessError: If the attribute cannot be read or written
        """
        old_value = self.read(member, owner)
        try:
            setattr(owner, member.name, new_value)
        except Exception as e:
            raise FieldAccessError(member, owner, e) from e

        logger.debug(f"{member.qualified_name}: {old_value!r} -> {new_value!r}")

        if isinstance(owner, ObjectChangeListener):
            owner.on_field_value_changed(member)

        event = FieldChangeEvent(member, old_value, new_value, owner)
        self.notify_listeners(event)
        return event

    def notify_listeners(self, event: FieldChangeEvent) -> None:
        """Call every registered listener; a failing listener never stops the others."""
        for listener in self.registry:
            try:
                if isinstance(listener, ChangeListener):
                    listener.on_object_value_changed(
                        event.member, event.old_value, event.new_value, event.owner)
                else:
                    listener(event.member, event.old_value, event.new_value, event.owner)
            except Exception as e:
                self.diagnostics.report(Diagnostic(
                    kind=DiagnosticKind.LISTENER_FAILURE,
                    member=event.member,
                    error=e,
                    message=f"Change listener {listener!r} failed for {event.member}: {e}",
                ))
