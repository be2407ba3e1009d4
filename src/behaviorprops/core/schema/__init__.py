"""Schema functionality: property declarations and visibility conditions."""

from behaviorprops.core.schema.models import (
    DeckOptions,
    EnumAllowedValue,
    PropDef,
    PropDefRequirement,
    parse_prop_defs,
)
from behaviorprops.core.schema.requirements import (
    Requirement,
    RequirementOp,
    literal_text,
    requirements_met,
    requirements_of,
)

__all__ = [
    # Models
    "PropDef",
    "DeckOptions",
    "EnumAllowedValue",
    "PropDefRequirement",
    "parse_prop_defs",
    # Requirements
    "Requirement",
    "RequirementOp",
    "literal_text",
    "requirements_of",
    "requirements_met",
]
