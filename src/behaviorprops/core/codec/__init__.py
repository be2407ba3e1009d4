"""Codec functionality: assignments, editable values, and conversions."""

from behaviorprops.core.codec.literals import format_initial_value, parse_initial_value
from behaviorprops.core.codec.models import EditableProp, PropertyAssignment
from behaviorprops.core.codec.operations import (
    assignment_to_editor_value,
    default_value,
    editor_value_to_assignment,
    expected_wire_type,
    serialize_all,
)
from behaviorprops.core.codec.validation import (
    assignment_from_wire,
    validate_wire_value,
    wire_adapter,
)

__all__ = [
    # Models
    "PropertyAssignment",
    "EditableProp",
    # Operations
    "assignment_to_editor_value",
    "editor_value_to_assignment",
    "serialize_all",
    "expected_wire_type",
    "default_value",
    # Literals
    "parse_initial_value",
    "format_initial_value",
    # Validation
    "assignment_from_wire",
    "validate_wire_value",
    "wire_adapter",
]
