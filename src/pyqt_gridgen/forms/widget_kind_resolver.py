"""
Widget kind resolution for marked members.

Pure decision functions: given a member's type and its already-extracted
metadata, decide which element kind represents it and which constraints
apply. Nothing here creates widgets.
"""

import logging
from enum import Enum
from typing import Any, Optional

from pyqt_gridgen.errors import MetadataError
from pyqt_gridgen.protocols.rendering import WidgetConstraints

from .grid_markers import FieldKind, GridFieldMeta, GridMethodMeta
from .member_descriptor import MemberDescriptor
from .member_type_utils import MemberTypeUtils

logger = logging.getLogger(__name__)


class WidgetKind(Enum):
    """Closed set of element kinds a member can be rendered as."""
    NUMERIC_STEPPER = "numeric_stepper"
    ENUM_CHOICE = "enum_choice"
    OPTION_CHOICE = "option_choice"
    BOOLEAN_TOGGLE = "boolean_toggle"
    SINGLE_LINE_TEXT = "single_line_text"
    MULTI_LINE_TEXT = "multi_line_text"
    ACTION_TRIGGER = "action_trigger"


# Free-text selector → element kind
_FIELD_KIND_DISPATCH = {
    FieldKind.TEXT_FIELD: WidgetKind.SINGLE_LINE_TEXT,
    FieldKind.TEXT_AREA: WidgetKind.MULTI_LINE_TEXT,
}


class WidgetKindResolver:
    """
    Decides how a marked member is rendered.

    Field resolution order:
    1. A non-empty option list always wins → OPTION_CHOICE
    2. Numeric type → NUMERIC_STEPPER
    3. Enum type → ENUM_CHOICE
    4. bool → BOOLEAN_TOGGLE
    5. Otherwise the metadata's field_kind picks the text element;
       anything else fails loud with MetadataError

    Methods always resolve to ACTION_TRIGGER.
    """

    @staticmethod
    def resolve(member_type: Optional[type], metadata: Any) -> WidgetKind:
        if isinstance(metadata, GridMethodMeta):
            return WidgetKind.ACTION_TRIGGER
        if not isinstance(metadata, GridFieldMeta):
            raise MetadataError(f"Unsupported member metadata: {metadata!r}")

        if metadata.options:
            return WidgetKind.OPTION_CHOICE
        if MemberTypeUtils.is_numeric_type(member_type):
            return WidgetKind.NUMERIC_STEPPER
        if MemberTypeUtils.is_enum_type(member_type):
            return WidgetKind.ENUM_CHOICE
        if MemberTypeUtils.is_bool_type(member_type):
            return WidgetKind.BOOLEAN_TOGGLE

        kind = _FIELD_KIND_DISPATCH.get(metadata.field_kind)
        if kind is None:
            raise MetadataError(f"Unknown field kind: {metadata.field_kind!r}")
        return kind

    @staticmethod
    def is_nested(member_type: Optional[type], metadata: Any) -> bool:
        """
        Check if a field is rendered as an embedded sub-grid.

        The type must not be simple, and the field must either be flagged
        nested or be typed as a dataclass. Option lists keep a field flat.
        """
        if not isinstance(metadata, GridFieldMeta) or metadata.options:
            return False
        if member_type is None or MemberTypeUtils.is_simple_type(member_type):
            return False
        return metadata.nested or MemberTypeUtils.is_dataclass_type(member_type)

    @staticmethod
    def constraints_for(member: MemberDescriptor, node_width_limit: Optional[float]) -> WidgetConstraints:
        """Build the per-element constraints for a member."""
        meta = member.metadata
        if isinstance(meta, GridMethodMeta):
            return WidgetConstraints(editable=True, enabled=meta.enabled,
                                     max_width=node_width_limit, tooltip=meta.tooltip)
        return WidgetConstraints(editable=meta.editable, enabled=True,
                                 max_width=node_width_limit, tooltip=meta.tooltip)
