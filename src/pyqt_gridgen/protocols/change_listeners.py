"""
Observer contracts for reflective field writes.

Two parties can be told about a write made through the mutation channel:

1. The owning object itself, if it implements ObjectChangeListener. It is
   called first so it can update derived state before anything else
   looks at it.
2. Every listener in the ListenerRegistry, with the old and new value.
"""

from abc import ABC, abstractmethod
from typing import Any


class ObjectChangeListener(ABC):
    """
    Mixin for bound objects that want to hear about their own field writes.

    Objects that define on_field_value_changed() without inheriting from
    this class count as listeners too.
    """

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is ObjectChangeListener:
            hook = getattr(subclass, "on_field_value_changed", None)
            return callable(hook) or NotImplemented
        return NotImplemented

    @abstractmethod
    def on_field_value_changed(self, member) -> None:
        """
        Called right after a field of this object was written.

        Args:
            member: MemberDescriptor of the written field
        """
        pass


class ChangeListener(ABC):
    """Application-level listener for every reflective field write."""

    @abstractmethod
    def on_object_value_changed(self, member, old_value: Any, new_value: Any, owner: Any) -> None:
        """
        Called after a field write has been committed.

        Args:
            member: MemberDescriptor of the written field
            old_value: Value before the write
            new_value: Value after the write
            owner: Object whose field was written
        """
        pass
