"""Exception hierarchy for the property codec.

Fatal errors (unknown type tags, malformed array literals) propagate to the
caller. The only recoverable failure, a bad numeric literal, is logged and
never raised unless lenient parsing is turned off in settings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from behaviorprops.core.types import PropType, WireShape


class PropertyCodecError(Exception):
    """Base class for every error raised by behaviorprops."""

    pass


class UnknownPropTypeError(PropertyCodecError, ValueError):
    """Raised when a type tag is not a recognized PropType."""

    def __init__(self, tag: object, variable_name: str | None = None):
        self.tag = tag
        self.variable_name = variable_name
        message = f"Unknown property type {tag!r}"
        if variable_name:
            message += f" (property '{variable_name}')"
        super().__init__(message)


class LiteralParseError(PropertyCodecError, ValueError):
    """Raised when a default-value literal cannot be decoded."""

    def __init__(self, prop_type: PropType, literal: str, reason: str):
        self.prop_type = prop_type
        self.literal = literal
        super().__init__(f"Failed to parse {prop_type.value} literal {literal!r}: {reason}")


class UnsupportedLiteralError(PropertyCodecError, TypeError):
    """Raised when a kind has no literal syntax (CardDeck)."""

    pass


class WireShapeMismatchError(PropertyCodecError, TypeError):
    """Raised when an assignment slot is read with the wrong shape."""

    def __init__(self, property_name: str, expected: WireShape, actual: WireShape):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Assignment '{property_name}' holds a {actual.value} value, "
            f"not {expected.value}"
        )


class AssignmentValidationError(PropertyCodecError, ValueError):
    """Raised when an external assignment payload fails validation."""

    pass


class PropDefValidationError(PropertyCodecError, ValueError):
    """Raised when a property declaration payload fails validation."""

    pass


class UnknownRequirementOpError(PropertyCodecError, ValueError):
    """Raised when a visibility requirement uses an unsupported operator."""

    pass
