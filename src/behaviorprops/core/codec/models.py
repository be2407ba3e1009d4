"""Codec data models: wire assignments and editable properties."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from behaviorprops.core.schema import PropDef
from behaviorprops.core.types import EditorValue, PropType, WireShape, WireValue
from behaviorprops.errors import WireShapeMismatchError

_UNSET_VALUES: dict[WireShape, WireValue] = {
    WireShape.INTEGER: 0,
    WireShape.FLOAT: 0.0,
    WireShape.BOOL: False,
    WireShape.STRING: None,
    WireShape.STRING_ARRAY: None,
    WireShape.INTEGER_ARRAY: None,
}


@dataclass(slots=True)
class PropertyAssignment:
    """Weakly-typed value of one property as stored or sent over the wire.

    At most one slot is populated, identified by ``shape``. An assignment
    with no shape has every slot unset.

    Attributes:
        property_name: Variable name of the assigned property.
        shape: Shape of the populated slot, None when unset.
        value: Content of the populated slot.
    """

    property_name: str = ""
    shape: WireShape | None = None
    value: WireValue = None

    def get_value(self, shape: WireShape) -> WireValue:
        """Read the slot for ``shape``.

        Returns:
            The slot content. With no slot populated, the zero value of
            ``shape``: 0, 0.0 or False for scalars, None for strings and arrays.

        Raises:
            WireShapeMismatchError: If a slot of another shape is populated.
        """
        if self.shape is None:
            return _UNSET_VALUES[shape]
        if self.shape != shape:
            raise WireShapeMismatchError(self.property_name, shape, self.shape)
        return self.value

    def set_value(self, shape: WireShape, value: WireValue) -> None:
        """Populate the slot for ``shape``, clearing any other slot."""
        self.shape = shape
        self.value = value

    def to_wire(self) -> dict[str, Any]:
        return {"propertyName": self.property_name, "value": self.value}


@dataclass(slots=True)
class EditableProp:
    """In-editor state of one property.

    ``data`` is owned by the editing UI. The codec reads and replaces it but
    never keeps a reference.
    """

    prop_def: PropDef
    prop_type: PropType
    data: EditorValue = None

    @classmethod
    def for_def(cls, prop_def: PropDef, data: EditorValue) -> EditableProp:
        """Create an editable, resolving the declared type tag."""
        return cls(prop_def=prop_def, prop_type=prop_def.get_prop_type(), data=data)

    @property
    def variable_name(self) -> str:
        return self.prop_def.variable_name
