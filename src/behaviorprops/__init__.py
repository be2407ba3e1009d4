"""behaviorprops: typed property codec for scriptable behaviors.

Usage:
    from behaviorprops import load_editables, parse_prop_defs, serialize_editables

    defs = parse_prop_defs('[{"type": "Number", "variableName": "speed", '
                           '"defaultValueString": "3"}]')
    editables = load_editables(defs)
    editables[0].data  # 3

    editables[0].data = 5
    [a.to_wire() for a in serialize_editables(editables)]
    # [{"propertyName": "speed", "value": 5}]
"""

import logging

__version__ = "0.1.0"

# Core primitives
from behaviorprops.core import (
    DeckOptions,
    EditableProp,
    EditorValue,
    EnumAllowedValue,
    PropDef,
    PropDefRequirement,
    PropertyAssignment,
    PropType,
    Requirement,
    RequirementOp,
    WireShape,
    WireValue,
    assignment_from_wire,
    assignment_to_editor_value,
    default_value,
    editor_value_to_assignment,
    expected_wire_type,
    format_initial_value,
    parse_initial_value,
    parse_prop_defs,
    requirements_met,
    serialize_all,
    validate_wire_value,
)

# Editing workflow
from behaviorprops.editing import (
    initial_value,
    load_editables,
    serialize_editables,
    visible_editables,
)

# Errors
from behaviorprops.errors import (
    AssignmentValidationError,
    LiteralParseError,
    PropDefValidationError,
    PropertyCodecError,
    UnknownPropTypeError,
    UnknownRequirementOpError,
    UnsupportedLiteralError,
    WireShapeMismatchError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
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
    # Editing
    "initial_value",
    "load_editables",
    "visible_editables",
    "serialize_editables",
    # Errors
    "PropertyCodecError",
    "UnknownPropTypeError",
    "LiteralParseError",
    "UnsupportedLiteralError",
    "WireShapeMismatchError",
    "AssignmentValidationError",
    "PropDefValidationError",
    "UnknownRequirementOpError",
]
