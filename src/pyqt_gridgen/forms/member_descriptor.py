"""Typed descriptions of marked fields and methods."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Type, Union

from .grid_markers import GridFieldMeta, GridMethodMeta


class MemberKind(Enum):
    FIELD = "field"
    METHOD = "method"


@dataclass(frozen=True)
class MemberDescriptor:
    """
    One marked member of one level of a type hierarchy.

    Two descriptors with the same name but different owner types are
    distinct members, even though on a Python instance they read and
    write the same attribute.
    """
    owner_type: Type
    name: str
    member_kind: MemberKind
    metadata: Union[GridFieldMeta, GridMethodMeta]
    declared_type: Optional[Type] = field(default=None, compare=False)

    @property
    def is_field(self) -> bool:
        return self.member_kind is MemberKind.FIELD

    @property
    def is_method(self) -> bool:
        return self.member_kind is MemberKind.METHOD

    @property
    def qualified_name(self) -> str:
        return f"{self.owner_type.__qualname__}.{self.name}"

    def member_type_for(self, owner: Any) -> Optional[Type]:
        """Declared type, or the runtime type of the current value when undeclared."""
        if self.declared_type is not None:
            return self.declared_type
        value = getattr(owner, self.name, None)
        return None if value is None else type(value)

    def __str__(self) -> str:
        return self.qualified_name
