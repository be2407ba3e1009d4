"""Core type definitions: property kinds and their wire shapes.

Member values are the exact tag spellings the scripting bridge writes into
property declarations. Do not rename them.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias

from behaviorprops.errors import UnknownPropTypeError


class PropType(str, Enum):
    """Closed set of property kinds a behavior can declare."""

    NUMBER = "Number"
    DECIMAL = "Decimal"
    BOOLEAN = "Boolean"
    ACTOR = "Actor"
    STRING = "String"
    CARD_DECK = "CardDeck"
    PREFAB = "Prefab"
    SOUND = "Sound"
    PARTICLE_EFFECT = "ParticleEffect"
    ACTOR_GROUP = "ActorGroup"
    IMAGE = "Image"
    COLOR = "Color"
    ENUM = "Enum"
    NUMBER_ARRAY = "NumberArray"
    STRING_ARRAY = "StringArray"
    ENUM_ARRAY = "EnumArray"
    ACTOR_ARRAY = "ActorArray"

    @classmethod
    def parse(cls, tag: str | PropType, variable_name: str | None = None) -> PropType:
        """Resolve a declared type tag.

        Matching is exact and case-sensitive.

        Args:
            tag: Tag string from a property declaration.
            variable_name: Declaring property, used only in the error message.

        Returns:
            The matching PropType.

        Raises:
            UnknownPropTypeError: If the tag names no known kind.
        """
        if isinstance(tag, PropType):
            return tag
        try:
            return cls(tag)
        except ValueError:
            raise UnknownPropTypeError(tag, variable_name) from None


class WireShape(str, Enum):
    """Primitive value shapes an assignment can carry."""

    INTEGER = "integer"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "string"
    STRING_ARRAY = "string[]"
    INTEGER_ARRAY = "integer[]"

    @property
    def is_array(self) -> bool:
        return self in (WireShape.STRING_ARRAY, WireShape.INTEGER_ARRAY)


WireValue: TypeAlias = int | float | bool | str | list[str] | list[int] | None
"""Value held in an assignment slot."""

EditorValue: TypeAlias = int | float | bool | str | list[str] | list[int] | None
"""Native value held by an editable property (``editable.data``)."""

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
