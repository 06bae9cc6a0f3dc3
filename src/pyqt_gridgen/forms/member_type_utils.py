"""
Type utilities for marked members.

Centralizes the type checks the extractor, the resolver and the builder
share, so Optional unwrapping and the numeric/enum rules live in one place.
"""

import dataclasses
import numbers
from enum import Enum
from typing import Annotated, Any, Optional, Type, Union, get_args, get_origin


class MemberTypeUtils:
    """
    Static helpers for classifying the declared type of a marked field.
    """

    SIMPLE_TYPES = (str, bytes, bool)

    @staticmethod
    def strip_annotated(member_type: Any) -> Any:
        """
        Remove an Annotated wrapper, keeping the underlying type.

        Example:
            >>> MemberTypeUtils.strip_annotated(Annotated[int, "meta"])
            <class 'int'>
        """
        if get_origin(member_type) is Annotated:
            return get_args(member_type)[0]
        return member_type

    @staticmethod
    def resolve_optional(member_type: Any) -> Any:
        """
        Resolve Optional[T] to T; any other type is returned unchanged.

        Example:
            >>> MemberTypeUtils.resolve_optional(Optional[str])
            <class 'str'>
        """
        if get_origin(member_type) is Union:
            args = get_args(member_type)
            if len(args) == 2 and type(None) in args:
                return next(arg for arg in args if arg is not type(None))
        return member_type

    @staticmethod
    def normalize(member_type: Any) -> Optional[Type]:
        """
        Reduce an annotation to a concrete class, or None if that is impossible.

        Strips Annotated and Optional; generic aliases reduce to their origin
        (``list[int]`` -> ``list``). ``Any`` and unresolved forward references
        give None.
        """
        member_type = MemberTypeUtils.strip_annotated(member_type)
        member_type = MemberTypeUtils.resolve_optional(member_type)
        member_type = MemberTypeUtils.strip_annotated(member_type)
        origin = get_origin(member_type)
        if origin is not None and isinstance(origin, type):
            return origin
        if isinstance(member_type, type):
            return member_type
        return None

    @staticmethod
    def is_numeric_type(member_type: Any) -> bool:
        """Check if type is a real number type. bool is not numeric here."""
        return (isinstance(member_type, type)
                and issubclass(member_type, numbers.Real)
                and not issubclass(member_type, bool))

    @staticmethod
    def is_integral_type(member_type: Any) -> bool:
        """Check if type is an integer type (excluding bool)."""
        return (MemberTypeUtils.is_numeric_type(member_type)
                and issubclass(member_type, numbers.Integral))

    @staticmethod
    def is_enum_type(member_type: Any) -> bool:
        """Check if type is an Enum subclass."""
        return isinstance(member_type, type) and issubclass(member_type, Enum)

    @staticmethod
    def is_bool_type(member_type: Any) -> bool:
        return isinstance(member_type, type) and issubclass(member_type, bool)

    @staticmethod
    def is_simple_type(member_type: Any) -> bool:
        """
        Check if a value of this type is shown by a single input element.

        Numbers, enums, bool, str and bytes are simple. Everything else is a
        candidate for nested rendering.
        """
        return (MemberTypeUtils.is_numeric_type(member_type)
                or MemberTypeUtils.is_enum_type(member_type)
                or (isinstance(member_type, type)
                    and issubclass(member_type, MemberTypeUtils.SIMPLE_TYPES)))

    @staticmethod
    def is_dataclass_type(member_type: Any) -> bool:
        return isinstance(member_type, type) and dataclasses.is_dataclass(member_type)
