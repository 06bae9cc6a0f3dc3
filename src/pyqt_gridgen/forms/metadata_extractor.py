"""
Hierarchy-aware discovery of marked members.

Walks an object's type from the most derived class toward ``object`` and
yields, per class, the marked fields in declaration order followed by the
marked methods in definition order. Nothing is cached: every call reads
the live class objects.
"""

import inspect
import logging
import typing
from typing import Annotated, Any, Callable, Dict, Iterator, List, Optional, get_args, get_origin

from .grid_markers import GRID_FIELD_KEY, GRID_METHOD_ATTR, GridFieldMeta, GridMethodMeta
from .member_descriptor import MemberDescriptor, MemberKind
from .member_type_utils import MemberTypeUtils

logger = logging.getLogger(__name__)


class MetadataExtractor:
    """
    Extracts MemberDescriptors for every marked member of a class hierarchy.

    A field redeclared in a subclass is reported once per declaring class.
    Both descriptors address the same instance attribute; no name-based
    deduplication happens here.
    """

    def extract(self, cls: type) -> List[MemberDescriptor]:
        """
        Return descriptors for all marked members of cls and its bases.

        Args:
            cls: Concrete runtime type of the bound object

        Returns:
            Descriptors ordered by level (derived first), fields before methods
        """
        members = []
        for level in self.hierarchy(cls):
            level_fields = list(self.marked_fields(level))
            level_methods = list(self.marked_methods(level))
            logger.debug(f"{level.__qualname__}: {len(level_fields)} marked fields, "
                         f"{len(level_methods)} marked methods")
            members.extend(level_fields)
            members.extend(level_methods)
        return members

    @staticmethod
    def hierarchy(cls: type) -> Iterator[type]:
        """Yield cls and its bases in MRO order, stopping before ``object``."""
        for level in cls.__mro__:
            if level is object:
                return
            yield level

    def marked_fields(self, level: type) -> Iterator[MemberDescriptor]:
        """Yield descriptors for fields declared directly on level that carry metadata."""
        for name, hint in self._own_annotations(level).items():
            meta = self.field_metadata(level, name, hint)
            if meta is None:
                continue
            yield MemberDescriptor(
                owner_type=level,
                name=name,
                member_kind=MemberKind.FIELD,
                metadata=meta,
                declared_type=MemberTypeUtils.normalize(hint),
            )

    def marked_methods(self, level: type) -> Iterator[MemberDescriptor]:
        """Yield descriptors for methods defined directly on level that carry metadata."""
        for name, value in level.__dict__.items():
            meta = self.method_metadata(value)
            if meta is None:
                continue
            yield MemberDescriptor(
                owner_type=level,
                name=name,
                member_kind=MemberKind.METHOD,
                metadata=meta,
            )

    @staticmethod
    def field_metadata(level: type, name: str, hint: Any) -> Optional[GridFieldMeta]:
        """
        Find the GridFieldMeta of a field declared on level.

        Looks at the dataclass Field of that exact class first, then at
        Annotated extras of the annotation.
        """
        dataclass_fields = level.__dict__.get("__dataclass_fields__", {})
        dc_field = dataclass_fields.get(name)
        if dc_field is not None and GRID_FIELD_KEY in dc_field.metadata:
            return dc_field.metadata[GRID_FIELD_KEY]

        if get_origin(hint) is Annotated:
            for extra in get_args(hint)[1:]:
                if isinstance(extra, GridFieldMeta):
                    return extra
        return None

    @staticmethod
    def method_metadata(value: Any) -> Optional[GridMethodMeta]:
        """Return the GridMethodMeta of a class attribute, if it is a marked method."""
        if isinstance(value, (staticmethod, classmethod)):
            value = value.__func__
        if not callable(value):
            return None
        meta = getattr(value, GRID_METHOD_ATTR, None)
        return meta if isinstance(meta, GridMethodMeta) else None

    @staticmethod
    def _own_annotations(level: type) -> Dict[str, Any]:
        """
        Annotations declared directly on level, resolved where possible.

        Unresolvable string annotations are kept as strings; their
        descriptors get no declared type.
        """
        own = inspect.get_annotations(level)
        if not own:
            return {}
        try:
            resolved = typing.get_type_hints(level, include_extras=True)
        except (NameError, TypeError, AttributeError) as e:
            logger.debug(f"Could not resolve annotations of {level.__qualname__}: {e}")
            resolved = {}
        return {name: resolved.get(name, raw) for name, raw in own.items()}


def all_fields_in_hierarchy(start: type,
                            predicate: Callable[[MemberDescriptor], bool] = lambda m: True
                            ) -> List[MemberDescriptor]:
    """
    Return every marked field of start and all of its bases that matches predicate.

    Example:
        >>> readonly = all_fields_in_hierarchy(Config, lambda m: not m.metadata.editable)
    """
    extractor = MetadataExtractor()
    return [
        member
        for level in extractor.hierarchy(start)
        for member in extractor.marked_fields(level)
        if predicate(member)
    ]
