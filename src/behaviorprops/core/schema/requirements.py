"""Visibility conditions between properties.

A property declares ``requires`` entries naming another property, an operator
and a literal. The operator spellings are read by the scripting bridge and
must stay as they are.

Usage:
    req = Requirement.from_def(PropDefRequirement(key="mode", value="fast", op="="))
    req.evaluate({"mode": "fast"})  # True
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from behaviorprops.core.schema.models import PropDef, PropDefRequirement
from behaviorprops.core.types import EditorValue
from behaviorprops.errors import UnknownRequirementOpError


class RequirementOp(str, Enum):
    """Comparison operators, valued by their declared spelling."""

    EQUALS = "="
    NOT_EQUALS = "!="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    @property
    def is_ordering(self) -> bool:
        return self not in (RequirementOp.EQUALS, RequirementOp.NOT_EQUALS)


def literal_text(value: EditorValue) -> str:
    """Render an editor value the way it would be written as a literal."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        # Array body, same syntax as array default literals
        return json.dumps(value, separators=(",", ":"))[1:-1]
    return str(value)


def _as_number(value: EditorValue) -> float | None:
    if isinstance(value, bool) or value is None or isinstance(value, list):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        number = float(value)
    except ValueError:
        return None
    return None if math.isnan(number) else number


def _equals_literal(current: EditorValue, literal: str) -> bool:
    # Numbers compare by value so "1.0" matches a Decimal holding 1.0
    if isinstance(current, (int, float)) and not isinstance(current, bool):
        number = _as_number(literal)
        if number is not None:
            return float(current) == number
    return literal_text(current) == literal


@dataclass(slots=True, frozen=True)
class Requirement:
    """Condition on the current value of another property."""

    key: str
    op: RequirementOp
    value: str

    @classmethod
    def from_def(cls, raw: PropDefRequirement) -> Requirement:
        """Convert a declared requirement. A missing operator means equality.

        Raises:
            UnknownRequirementOpError: If the operator is not supported.
        """
        spelling = raw.op or RequirementOp.EQUALS.value
        try:
            op = RequirementOp(spelling)
        except ValueError:
            raise UnknownRequirementOpError(
                f"Unsupported operator {spelling!r} in requirement on '{raw.key}'"
            ) from None
        return cls(key=raw.key, op=op, value=raw.value or "")

    def evaluate(self, values: Mapping[str, EditorValue]) -> bool:
        """Check the condition against current property values.

        A key with no current value never satisfies the condition. Ordering
        operators are false unless both sides are numeric.
        """
        if self.key not in values:
            return False
        current = values[self.key]

        if not self.op.is_ordering:
            equal = _equals_literal(current, self.value)
            return equal if self.op is RequirementOp.EQUALS else not equal

        left = _as_number(current)
        right = _as_number(self.value)
        if left is None or right is None:
            return False
        match self.op:
            case RequirementOp.GREATER:
                return left > right
            case RequirementOp.GREATER_EQUAL:
                return left >= right
            case RequirementOp.LESS:
                return left < right
            case RequirementOp.LESS_EQUAL:
                return left <= right
            case _:
                raise UnknownRequirementOpError(f"Unhandled operator {self.op!r}")


def requirements_of(prop_def: PropDef) -> list[Requirement]:
    """Typed requirements of a declaration, in declared order."""
    return [Requirement.from_def(raw) for raw in prop_def.requires]


def requirements_met(prop_def: PropDef, values: Mapping[str, EditorValue]) -> bool:
    """True when every requirement of the declaration holds."""
    return all(req.evaluate(values) for req in requirements_of(prop_def))
