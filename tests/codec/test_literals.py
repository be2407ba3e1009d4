"""Tests for default-value literal parsing."""

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from behaviorprops import (
    LiteralParseError,
    PropType,
    UnknownPropTypeError,
    UnsupportedLiteralError,
    default_value,
    format_initial_value,
    parse_initial_value,
)
from behaviorprops.core.types import INT32_MAX, INT32_MIN

LOGGER = "behaviorprops.core.codec.literals"


@pytest.mark.parametrize("kind", [k for k in PropType if k is not PropType.CARD_DECK])
@pytest.mark.parametrize("literal", [None, ""])
def test_empty_literal_gives_default(kind, literal):
    assert parse_initial_value(kind, literal) == default_value(kind)


# Boolean


@pytest.mark.parametrize(
    ("literal", "expected"),
    [("true", True), ("false", False), ("maybe", False), ("True", False), ("TRUE", False), ("1", False)],
)
def test_boolean_only_exact_true_is_true(literal, expected):
    """Anything but exactly "true" reads as false, without error."""
    assert parse_initial_value(PropType.BOOLEAN, literal) is expected


# Numbers


@pytest.mark.parametrize(
    ("literal", "expected"),
    [("42", 42), ("-7", -7), ("+3", 3), (" 12 ", 12), (str(INT32_MAX), INT32_MAX), (str(INT32_MIN), INT32_MIN)],
)
def test_number_literals(literal, expected):
    assert parse_initial_value(PropType.NUMBER, literal) == expected


@pytest.mark.parametrize(
    ("literal", "expected"),
    [("2.5", 2.5), ("-0.25", -0.25), ("1", 1.0), (".5", 0.5), ("1e3", 1000.0), ("3.", 3.0)],
)
def test_decimal_literals(literal, expected):
    value = parse_initial_value(PropType.DECIMAL, literal)

    assert value == expected
    assert isinstance(value, float)


@pytest.mark.parametrize(
    "literal", ["abc", "1.5", "1_000", "0x10", str(INT32_MAX + 1), "--1", "\u0661\u0662"]
)
def test_bad_number_logs_and_defaults(literal, caplog):
    """Numeric failures are recoverable: warn and use the kind's default."""
    with caplog.at_level(logging.WARNING, logger=LOGGER):
        value = parse_initial_value(PropType.NUMBER, literal)

    assert value == 0
    assert len(caplog.records) == 1
    assert caplog.records[0].levelno == logging.WARNING
    assert repr(literal) in caplog.records[0].getMessage()


@pytest.mark.parametrize(
    "literal", ["abc", "1,5", "nan", "1_0.5", "1e999", "-1e999", "\u0661.\u0665"]
)
def test_bad_decimal_logs_and_defaults(literal, caplog):
    with caplog.at_level(logging.WARNING, logger=LOGGER):
        value = parse_initial_value(PropType.DECIMAL, literal)

    assert value == 1.0
    assert "Decimal" in caplog.text


def test_bad_number_raises_when_not_lenient(strict_settings):
    with pytest.raises(LiteralParseError) as exc_info:
        parse_initial_value(PropType.NUMBER, "abc", strict_settings)

    assert exc_info.value.prop_type is PropType.NUMBER
    assert exc_info.value.literal == "abc"


def test_leniency_from_environment(monkeypatch, fresh_settings):
    monkeypatch.setenv("BEHAVIORPROPS_LENIENT_NUMERIC_LITERALS", "false")

    with pytest.raises(LiteralParseError):
        parse_initial_value(PropType.DECIMAL, "fast")


# Strings


@pytest.mark.parametrize(
    "kind",
    [
        PropType.STRING,
        PropType.ACTOR,
        PropType.SOUND,
        PropType.PARTICLE_EFFECT,
        PropType.PREFAB,
        PropType.ACTOR_GROUP,
        PropType.ENUM,
        PropType.IMAGE,
        PropType.COLOR,
    ],
)
def test_string_literals_pass_verbatim(kind):
    assert parse_initial_value(kind, "  not validated #zz ") == "  not validated #zz "


def test_enum_literal_is_not_checked_against_choices():
    assert parse_initial_value(PropType.ENUM, "unlisted") == "unlisted"


# Arrays


def test_number_array_body():
    assert parse_initial_value(PropType.NUMBER_ARRAY, "1,2,3") == [1, 2, 3]


@pytest.mark.parametrize("kind", [PropType.STRING_ARRAY, PropType.ENUM_ARRAY, PropType.ACTOR_ARRAY])
def test_string_array_body(kind):
    assert parse_initial_value(kind, '"x","y"') == ["x", "y"]


def test_bracketed_array_literal_is_accepted():
    assert parse_initial_value(PropType.NUMBER_ARRAY, " [4, 5] ") == [4, 5]
    assert parse_initial_value(PropType.STRING_ARRAY, '["a"]') == ["a"]


def test_bracketed_array_literal_rejected_when_disabled(strict_settings):
    with pytest.raises(LiteralParseError):
        parse_initial_value(PropType.NUMBER_ARRAY, "[4,5]", strict_settings)


def test_whitespace_array_body_is_empty():
    assert parse_initial_value(PropType.STRING_ARRAY, "  ") == []


@pytest.mark.parametrize(
    ("kind", "literal"),
    [
        (PropType.NUMBER_ARRAY, "1,,2"),
        (PropType.NUMBER_ARRAY, '"a"'),
        (PropType.NUMBER_ARRAY, "1.5"),
        (PropType.NUMBER_ARRAY, str(INT32_MAX + 1)),
        (PropType.STRING_ARRAY, "x,y"),
        (PropType.STRING_ARRAY, "1,2"),
        (PropType.ENUM_ARRAY, '"a",'),
    ],
)
def test_malformed_array_literal_is_fatal(kind, literal, caplog):
    """Array literals are not defaulted: a bad one aborts the property's load."""
    with pytest.raises(LiteralParseError) as exc_info:
        parse_initial_value(kind, literal)

    assert exc_info.value.prop_type is kind
    assert caplog.records == []


# Fatal kinds


@pytest.mark.parametrize("literal", [None, "", "builtin:Explode", '"a"'])
def test_card_deck_is_never_parsed(literal):
    with pytest.raises(UnsupportedLiteralError):
        parse_initial_value(PropType.CARD_DECK, literal)


def test_unknown_kind_is_fatal():
    with pytest.raises(UnknownPropTypeError):
        parse_initial_value("Vector2", "1,2")


def test_tag_strings_are_accepted():
    assert parse_initial_value("Number", "5") == 5


# Formatting


@pytest.mark.parametrize(
    ("kind", "value", "literal"),
    [
        (PropType.BOOLEAN, True, "true"),
        (PropType.BOOLEAN, False, "false"),
        (PropType.NUMBER, -4, "-4"),
        (PropType.DECIMAL, 0.5, "0.5"),
        (PropType.ACTOR, None, ""),
        (PropType.COLOR, "#ff0000", "#ff0000"),
        (PropType.NUMBER_ARRAY, [1, 2], "1,2"),
        (PropType.STRING_ARRAY, ["a", "b"], '"a","b"'),
        (PropType.ENUM_ARRAY, [], ""),
    ],
)
def test_format_initial_value(kind, value, literal):
    assert format_initial_value(kind, value) == literal


def test_card_deck_has_no_literal_form():
    with pytest.raises(UnsupportedLiteralError):
        format_initial_value(PropType.CARD_DECK, ["builtin:Explode"])


@given(value=st.integers(min_value=INT32_MIN, max_value=INT32_MAX))
def test_number_literal_round_trip(value):
    assert parse_initial_value(PropType.NUMBER, format_initial_value(PropType.NUMBER, value)) == value


@given(value=st.floats(allow_nan=False, allow_infinity=False))
def test_decimal_literal_round_trip(value):
    literal = format_initial_value(PropType.DECIMAL, value)

    assert parse_initial_value(PropType.DECIMAL, literal) == value


@given(value=st.lists(st.text()))
def test_string_array_literal_round_trip(value):
    literal = format_initial_value(PropType.STRING_ARRAY, value)

    assert parse_initial_value(PropType.STRING_ARRAY, literal) == value
