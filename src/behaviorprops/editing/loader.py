"""Assemble and persist the editor state of a behavior's properties.

Usage:
    editables = load_editables(prop_defs, saved_assignments)
    # ... UI edits editable.data ...
    saved_assignments = serialize_editables(editables)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from behaviorprops.config import CodecSettings
from behaviorprops.core.codec import (
    EditableProp,
    PropertyAssignment,
    assignment_to_editor_value,
    parse_initial_value,
    serialize_all,
)
from behaviorprops.core.schema import PropDef, requirements_met
from behaviorprops.core.types import EditorValue, PropType

logger = logging.getLogger(__name__)


def initial_value(prop_def: PropDef, settings: CodecSettings | None = None) -> EditorValue:
    """Value a property starts with when nothing has been assigned.

    Card decks start with their declared default cards, every other kind
    parses its default-value literal.

    Raises:
        UnknownPropTypeError: If the declared tag is not recognized.
        LiteralParseError: If an array default literal is malformed.
    """
    prop_type = prop_def.get_prop_type()
    if prop_type is PropType.CARD_DECK:
        if prop_def.deck_options is None:
            return []
        return list(prop_def.deck_options.default_card_uris)
    return parse_initial_value(prop_type, prop_def.default_value_string, settings)


def load_editables(
    prop_defs: Sequence[PropDef],
    assignments: Iterable[PropertyAssignment] = (),
    settings: CodecSettings | None = None,
) -> list[EditableProp]:
    """Build editor state for a behavior, one editable per declaration.

    Args:
        prop_defs: Declarations in display order.
        assignments: Persisted values. The last assignment for a name wins.
        settings: Literal parsing settings.

    Returns:
        Editables in declaration order.

    Raises:
        UnknownPropTypeError: If any declaration has an unrecognized tag.
        WireShapeMismatchError: If a saved assignment has another kind's shape.
        LiteralParseError: If an array default literal is malformed.
    """
    by_name: dict[str, PropertyAssignment] = {}
    for assignment in assignments:
        by_name[assignment.property_name] = assignment

    editables: list[EditableProp] = []
    for prop_def in prop_defs:
        prop_type = prop_def.get_prop_type()
        assignment = by_name.get(prop_def.variable_name)
        if assignment is None:
            data = initial_value(prop_def, settings)
        else:
            data = assignment_to_editor_value(assignment, prop_type)
        editables.append(EditableProp(prop_def=prop_def, prop_type=prop_type, data=data))

    undeclared = by_name.keys() - {prop_def.variable_name for prop_def in prop_defs}
    if undeclared:
        logger.debug("Ignoring assignments for undeclared properties: %s", sorted(undeclared))
    return editables


def current_values(editables: Iterable[EditableProp]) -> dict[str, EditorValue]:
    """Map variable names to their current editor values."""
    return {editable.variable_name: editable.data for editable in editables}


def visible_editables(editables: Sequence[EditableProp]) -> list[EditableProp]:
    """Editables whose visibility requirements hold, in order.

    Raises:
        UnknownRequirementOpError: If a declaration uses an unsupported operator.
    """
    values = current_values(editables)
    return [editable for editable in editables if requirements_met(editable.prop_def, values)]


def serialize_editables(editables: Iterable[EditableProp]) -> list[PropertyAssignment]:
    """Assignments for persisting editor state, in order."""
    return serialize_all(editables)
