"""Default-value literals from property declarations.

Literal syntax per kind:
    Boolean         exactly ``true`` is true, anything else is false
    Number          integer text, optional sign
    Decimal         float text, optional sign and exponent
    string kinds    verbatim
    array kinds     JSON array body, e.g. ``1,2,3`` or ``"a","b"``
    CardDeck        none; decks default from deckOptions.defaultCardURIs
"""

from __future__ import annotations

import json
import logging
import math
import re
from functools import cache
from typing import Any

from pydantic import StrictStr, TypeAdapter, ValidationError

from behaviorprops.config import CodecSettings, get_settings
from behaviorprops.core.codec.operations import default_value, expected_wire_type
from behaviorprops.core.codec.validation import Int32
from behaviorprops.core.types import INT32_MAX, INT32_MIN, EditorValue, PropType, WireShape
from behaviorprops.errors import LiteralParseError, UnknownPropTypeError, UnsupportedLiteralError

logger = logging.getLogger(__name__)

_INTEGER_LITERAL = re.compile(r"\s*[+-]?[0-9]+\s*")
_FLOAT_LITERAL = re.compile(r"\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*")


@cache
def _array_literal_adapter(shape: WireShape) -> TypeAdapter[Any]:
    element = Int32 if shape is WireShape.INTEGER_ARRAY else StrictStr
    return TypeAdapter(list[element])  # type: ignore[valid-type]


def _numeric_fallback(
    prop_type: PropType, literal: str, reason: str, settings: CodecSettings
) -> EditorValue:
    if not settings.lenient_numeric_literals:
        raise LiteralParseError(prop_type, literal, reason)
    logger.warning(
        "Failed to parse value string %r (%s). Using default value for prop type %s.",
        literal,
        reason,
        prop_type.value,
    )
    return default_value(prop_type)


def _parse_number(literal: str, settings: CodecSettings) -> EditorValue:
    if not _INTEGER_LITERAL.fullmatch(literal):
        return _numeric_fallback(PropType.NUMBER, literal, "not an integer", settings)
    number = int(literal)
    if not INT32_MIN <= number <= INT32_MAX:
        return _numeric_fallback(PropType.NUMBER, literal, "out of 32-bit range", settings)
    return number


def _parse_decimal(literal: str, settings: CodecSettings) -> EditorValue:
    if not _FLOAT_LITERAL.fullmatch(literal):
        return _numeric_fallback(PropType.DECIMAL, literal, "not a decimal number", settings)
    number = float(literal)
    if not math.isfinite(number):
        return _numeric_fallback(PropType.DECIMAL, literal, "out of range", settings)
    return number


def _parse_array(prop_type: PropType, literal: str, settings: CodecSettings) -> EditorValue:
    body = literal.strip()
    if settings.accept_bracketed_array_literals and body.startswith("["):
        text = body
    else:
        text = f"[{body}]"
    try:
        return _array_literal_adapter(expected_wire_type(prop_type)).validate_json(text)
    except ValidationError as e:
        raise LiteralParseError(prop_type, literal, str(e.errors()[0]["msg"])) from e


def parse_initial_value(
    prop_type: PropType | str,
    literal: str | None,
    settings: CodecSettings | None = None,
) -> EditorValue:
    """Convert a declared default-value literal to an editor value.

    An empty or missing literal gives the kind's default. Malformed Number
    and Decimal literals log a warning and also give the default; malformed
    array literals raise.

    Args:
        prop_type: Kind of the declaring property.
        literal: The declaration's defaultValueString.
        settings: Parsing settings, the process settings when omitted.

    Returns:
        A fresh editor value.

    Raises:
        UnknownPropTypeError: If the kind is not recognized.
        UnsupportedLiteralError: For CardDeck, which has no literal syntax.
        LiteralParseError: If an array literal is malformed.
    """
    prop_type = PropType.parse(prop_type)
    if prop_type is PropType.CARD_DECK:
        raise UnsupportedLiteralError(
            "CardDeck defaults come from deckOptions.defaultCardURIs, "
            "not from a default value string"
        )
    if not literal:
        return default_value(prop_type)
    settings = settings or get_settings()

    match prop_type:
        case PropType.BOOLEAN:
            return literal == "true"
        case PropType.NUMBER:
            return _parse_number(literal, settings)
        case PropType.DECIMAL:
            return _parse_decimal(literal, settings)
        case (
            PropType.STRING
            | PropType.ACTOR
            | PropType.SOUND
            | PropType.PARTICLE_EFFECT
            | PropType.PREFAB
            | PropType.ACTOR_GROUP
            | PropType.ENUM
            | PropType.IMAGE
            | PropType.COLOR
        ):
            return literal
        case (
            PropType.NUMBER_ARRAY
            | PropType.STRING_ARRAY
            | PropType.ENUM_ARRAY
            | PropType.ACTOR_ARRAY
        ):
            return _parse_array(prop_type, literal, settings)
        case unknown:
            raise UnknownPropTypeError(unknown)


def format_initial_value(prop_type: PropType | str, value: EditorValue) -> str:
    """Write an editor value as a default-value literal.

    Inverse of parse_initial_value for finite numbers and non-empty strings.
    Empty strings write as an empty literal, which reads back as the kind's
    default.

    Raises:
        UnknownPropTypeError: If the kind is not recognized.
        UnsupportedLiteralError: For CardDeck.
    """
    prop_type = PropType.parse(prop_type)
    match prop_type:
        case PropType.CARD_DECK:
            raise UnsupportedLiteralError("CardDeck values have no literal form")
        case PropType.BOOLEAN:
            return "true" if value else "false"
        case PropType.NUMBER:
            return str(int(value))  # type: ignore[arg-type]
        case PropType.DECIMAL:
            return repr(float(value))  # type: ignore[arg-type]
        case (
            PropType.STRING
            | PropType.ACTOR
            | PropType.SOUND
            | PropType.PARTICLE_EFFECT
            | PropType.PREFAB
            | PropType.ACTOR_GROUP
            | PropType.ENUM
            | PropType.IMAGE
            | PropType.COLOR
        ):
            return "" if value is None else str(value)
        case (
            PropType.NUMBER_ARRAY
            | PropType.STRING_ARRAY
            | PropType.ENUM_ARRAY
            | PropType.ACTOR_ARRAY
        ):
            items = list(value or ())  # type: ignore[arg-type]
            return json.dumps(items, separators=(",", ":"))[1:-1]
        case unknown:
            raise UnknownPropTypeError(unknown)
