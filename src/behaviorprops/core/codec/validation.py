"""Validation of assignment payloads received from outside the editor.

Payloads are checked strictly against the kind's wire shape: no string to
number coercion, integers within the signed 32-bit range.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import cache
from typing import Annotated, Any

from pydantic import (
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
)

from behaviorprops.core.codec.models import PropertyAssignment
from behaviorprops.core.codec.operations import expected_wire_type
from behaviorprops.core.types import INT32_MAX, INT32_MIN, PropType, WireShape, WireValue
from behaviorprops.errors import AssignmentValidationError

Int32 = Annotated[StrictInt, Field(ge=INT32_MIN, le=INT32_MAX)]

_WIRE_TYPES: dict[WireShape, Any] = {
    WireShape.INTEGER: Int32,
    WireShape.FLOAT: StrictInt | StrictFloat,
    WireShape.BOOL: StrictBool,
    WireShape.STRING: StrictStr | None,
    WireShape.STRING_ARRAY: list[StrictStr] | None,
    WireShape.INTEGER_ARRAY: list[Int32] | None,
}


@cache
def wire_adapter(shape: WireShape) -> TypeAdapter[Any]:
    """Adapter validating raw values of a wire shape."""
    return TypeAdapter(_WIRE_TYPES[shape])


def validate_wire_value(value: Any, prop_type: PropType | str) -> WireValue:
    """Check a raw value against the wire shape of a kind.

    Args:
        value: Raw value, typically decoded JSON.
        prop_type: Kind the value is assigned to.

    Returns:
        The validated value. Decimal values are always floats.

    Raises:
        UnknownPropTypeError: If the kind is not recognized.
        AssignmentValidationError: If the value does not fit the shape.
    """
    shape = expected_wire_type(prop_type)
    try:
        validated = wire_adapter(shape).validate_python(value)
    except ValidationError as e:
        raise AssignmentValidationError(
            f"Value {value!r} is not a valid {shape.value} for {PropType.parse(prop_type).value}"
        ) from e
    if shape is WireShape.FLOAT:
        return float(validated)
    return validated


def assignment_from_wire(
    payload: Mapping[str, Any], prop_type: PropType | str
) -> PropertyAssignment:
    """Build an assignment from a ``{"propertyName", "value"}`` payload.

    A missing ``value`` is treated as unset, which is only valid for shapes
    that accept None.

    Raises:
        AssignmentValidationError: If the name is missing or the value is invalid.
    """
    name = payload.get("propertyName")
    if not isinstance(name, str) or not name:
        raise AssignmentValidationError(f"Assignment payload has no propertyName: {payload!r}")
    value = validate_wire_value(payload.get("value"), prop_type)
    assignment = PropertyAssignment(property_name=name)
    assignment.set_value(expected_wire_type(prop_type), value)
    return assignment
