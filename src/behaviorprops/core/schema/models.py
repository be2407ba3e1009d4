"""Property declaration models.

Field aliases are the camelCase names the scripting bridge emits. They are a
wire contract: renaming one breaks every saved game that declares it.

Usage:
    prop = PropDef.model_validate(
        {"type": "Number", "variableName": "speed", "defaultValueString": "3"}
    )
    prop.get_prop_type()  # PropType.NUMBER
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from behaviorprops.core.types import PropType
from behaviorprops.errors import PropDefValidationError


class _WireModel(BaseModel):
    """Base for models exchanged with the scripting bridge."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump using bridge field names."""
        return self.model_dump(by_alias=True)


class DeckOptions(_WireModel):
    """Card-deck specific editor configuration.

    Attributes:
        card_category: Category the card picker filters on.
        icon_res_path: Resource path of the deck icon.
        default_card_uris: Cards a fresh deck starts with.
        one_card_only: Deck holds a single card.
    """

    card_category: str | None = None
    icon_res_path: str | None = None
    default_card_uris: list[str] = Field(default_factory=list, alias="defaultCardURIs")
    one_card_only: bool = False


class EnumAllowedValue(_WireModel):
    """One choice of an Enum or EnumArray property."""

    value: str
    label: str | None = None


class PropDefRequirement(_WireModel):
    """Raw visibility condition as declared. See requirements.Requirement."""

    key: str
    value: str | None = None
    op: str | None = None


class PropDef(_WireModel):
    """Declaration of a single configurable behavior parameter.

    Attributes:
        type: Type tag, one of the PropType values.
        variable_name: Key of the property, unique within its behavior.
        default_value_string: Default as a literal, interpreted per kind.
        label: Display name for the editor.
        comment: Free-form help text.
        deck_options: CardDeck configuration.
        picker_prompt: Prompt shown by asset pickers.
        allow_offstage_actors: Actor pickers may offer offstage actors.
        requires: Visibility conditions on other properties.
        allowed_values: Choices for Enum and EnumArray.
    """

    type: str
    variable_name: str
    default_value_string: str | None = None
    label: str | None = None
    comment: str | None = None
    deck_options: DeckOptions | None = None
    picker_prompt: str | None = None
    allow_offstage_actors: bool = False
    requires: list[PropDefRequirement] = Field(default_factory=list)
    allowed_values: list[EnumAllowedValue] = Field(default_factory=list)

    def get_prop_type(self) -> PropType:
        """Resolve the declared tag.

        Raises:
            UnknownPropTypeError: If the tag is not recognized.
        """
        return PropType.parse(self.type, self.variable_name)


_PROP_DEF_LIST = TypeAdapter(list[PropDef])


def parse_prop_defs(payload: str | bytes | Sequence[Mapping[str, Any]]) -> list[PropDef]:
    """Validate an ordered list of declarations.

    Args:
        payload: JSON text, or already-decoded list of mappings.

    Returns:
        Declarations in the order given.

    Raises:
        PropDefValidationError: If the payload is not a list of valid declarations.
    """
    try:
        if isinstance(payload, (str, bytes)):
            return _PROP_DEF_LIST.validate_json(payload)
        return _PROP_DEF_LIST.validate_python(list(payload))
    except ValidationError as e:
        raise PropDefValidationError(f"Invalid property declarations: {e}") from e
