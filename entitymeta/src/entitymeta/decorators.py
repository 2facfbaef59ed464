"""
Re-export decorators module for cleaner imports.

This allows: from entitymeta.decorators import Property
Instead of: from entitymeta.meta.decorators.property import Property
"""

from .meta.decorators import (
    Property,
    PrimaryKey,
    SerializedPrimaryKey,
    EnumProperty,
    Formula,
    Reference,
    entity,
    check,
    register_property,
    register_reference,
)

__all__ = [
    # Declarations
    "Property",
    "PrimaryKey",
    "SerializedPrimaryKey",
    "EnumProperty",
    "Formula",
    "Reference",
    # Class decorators
    "entity",
    "check",
    # Explicit registration
    "register_property",
    "register_reference",
]
