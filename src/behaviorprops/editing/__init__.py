"""Editor state for a whole behavior: loading, visibility, and saving."""

from behaviorprops.editing.loader import (
    current_values,
    initial_value,
    load_editables,
    serialize_editables,
    visible_editables,
)

__all__ = [
    "initial_value",
    "load_editables",
    "current_values",
    "visible_editables",
    "serialize_editables",
]
