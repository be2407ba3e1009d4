"""Pure conversions between wire assignments and editor values.

Every function here is total over PropType. A tag outside the enumeration
means a corrupted or version-mismatched schema and raises
UnknownPropTypeError instead of producing a default.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, cast

from behaviorprops.core.codec.models import EditableProp, PropertyAssignment
from behaviorprops.core.types import EditorValue, PropType, WireShape, WireValue
from behaviorprops.errors import UnknownPropTypeError


def expected_wire_type(prop_type: PropType | str) -> WireShape:
    """Wire shape used to store values of a kind.

    Args:
        prop_type: Kind, or its tag string.

    Returns:
        The shape both serialization and payload validation use.

    Raises:
        UnknownPropTypeError: If the kind is not recognized.
    """
    match PropType.parse(prop_type):
        case PropType.NUMBER:
            return WireShape.INTEGER
        case PropType.DECIMAL:
            return WireShape.FLOAT
        case PropType.BOOLEAN:
            return WireShape.BOOL
        case (
            PropType.ACTOR
            | PropType.STRING
            | PropType.PREFAB
            | PropType.SOUND
            | PropType.PARTICLE_EFFECT
            | PropType.ACTOR_GROUP
            | PropType.IMAGE
            | PropType.COLOR
            | PropType.ENUM
        ):
            return WireShape.STRING
        case PropType.NUMBER_ARRAY:
            return WireShape.INTEGER_ARRAY
        case (
            PropType.CARD_DECK
            | PropType.STRING_ARRAY
            | PropType.ENUM_ARRAY
            | PropType.ACTOR_ARRAY
        ):
            return WireShape.STRING_ARRAY
        case unknown:
            raise UnknownPropTypeError(unknown)


def default_value(prop_type: PropType | str) -> EditorValue:
    """Structural default of a kind. Arrays are fresh lists on every call.

    Raises:
        UnknownPropTypeError: If the kind is not recognized.
    """
    match PropType.parse(prop_type):
        case PropType.NUMBER:
            return 0
        case PropType.DECIMAL:
            return 1.0
        case PropType.BOOLEAN:
            return False
        case PropType.ACTOR:
            # No actor selected, distinct from an empty reference
            return None
        case PropType.COLOR:
            return "#ffffff"
        case (
            PropType.STRING
            | PropType.PREFAB
            | PropType.SOUND
            | PropType.PARTICLE_EFFECT
            | PropType.ACTOR_GROUP
            | PropType.IMAGE
            | PropType.ENUM
        ):
            return ""
        case PropType.NUMBER_ARRAY:
            return []
        case (
            PropType.CARD_DECK
            | PropType.STRING_ARRAY
            | PropType.ENUM_ARRAY
            | PropType.ACTOR_ARRAY
        ):
            return []
        case unknown:
            raise UnknownPropTypeError(unknown)


def assignment_to_editor_value(
    assignment: PropertyAssignment, prop_type: PropType | str
) -> EditorValue:
    """Extract the editor value of a kind from an assignment.

    Unset arrays come back as empty lists and unset numbers and booleans as
    zero values. Strings pass through unchanged, so an Actor assignment
    holding None stays None.

    Raises:
        UnknownPropTypeError: If the kind is not recognized.
        WireShapeMismatchError: If the assignment holds another shape.
    """
    shape = expected_wire_type(prop_type)
    value = assignment.get_value(shape)
    if shape.is_array:
        return list(cast(list[Any], value)) if value is not None else []
    return value


def _cast_to_shape(shape: WireShape, data: EditorValue) -> WireValue:
    match shape:
        case WireShape.INTEGER:
            return int(cast(int, data))
        case WireShape.FLOAT:
            return float(cast(float, data))
        case WireShape.BOOL:
            return bool(data)
        case WireShape.STRING:
            return data
        case WireShape.STRING_ARRAY | WireShape.INTEGER_ARRAY:
            return list(cast(list[Any], data or ()))
        case _:
            raise TypeError(f"Unhandled wire shape {shape!r}")


def editor_value_to_assignment(editable: EditableProp) -> PropertyAssignment:
    """Build a fresh assignment from an editable property.

    The assignment is keyed by the declared variable name. Array data is
    copied, and an unselected Actor (None) stays None.

    Raises:
        UnknownPropTypeError: If the editable's kind is not recognized.
    """
    shape = expected_wire_type(editable.prop_type)
    assignment = PropertyAssignment(property_name=editable.prop_def.variable_name)
    assignment.set_value(shape, _cast_to_shape(shape, editable.data))
    return assignment


def serialize_all(editables: Iterable[EditableProp]) -> list[PropertyAssignment]:
    """Convert editables to assignments one-to-one, preserving order.

    Duplicate variable names produce duplicate assignments.
    """
    return [editor_value_to_assignment(editable) for editable in editables]
