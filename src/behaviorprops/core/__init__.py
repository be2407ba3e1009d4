"""Core functionalities: stateless property schema and value codec.

Architecture Note:
    core/ contains pure, stateless functions and models. Nothing here keeps
    references to caller data; every conversion returns fresh values.
    For assembling editor state from a whole behavior, see editing/.
"""

from behaviorprops.core.codec import (
    EditableProp,
    PropertyAssignment,
    assignment_from_wire,
    assignment_to_editor_value,
    default_value,
    editor_value_to_assignment,
    expected_wire_type,
    format_initial_value,
    parse_initial_value,
    serialize_all,
    validate_wire_value,
)
from behaviorprops.core.schema import (
    DeckOptions,
    EnumAllowedValue,
    PropDef,
    PropDefRequirement,
    Requirement,
    RequirementOp,
    parse_prop_defs,
    requirements_met,
)
from behaviorprops.core.types import EditorValue, PropType, WireShape, WireValue

__all__ = [
    # Types
    "PropType",
    "WireShape",
    "WireValue",
    "EditorValue",
    # Schema
    "PropDef",
    "DeckOptions",
    "EnumAllowedValue",
    "PropDefRequirement",
    "parse_prop_defs",
    "Requirement",
    "RequirementOp",
    "requirements_met",
    # Codec
    "PropertyAssignment",
    "EditableProp",
    "assignment_to_editor_value",
    "editor_value_to_assignment",
    "serialize_all",
    "expected_wire_type",
    "default_value",
    "parse_initial_value",
    "format_initial_value",
    "assignment_from_wire",
    "validate_wire_value",
]
