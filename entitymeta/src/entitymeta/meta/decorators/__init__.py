"""Property declarations and their registrars."""

from .property import Property, register_property
from .scalars import PrimaryKey, SerializedPrimaryKey, EnumProperty, Formula
from .reference import Reference, register_reference
from .entity import entity, check

__all__ = [
    "Property",
    "PrimaryKey",
    "SerializedPrimaryKey",
    "EnumProperty",
    "Formula",
    "Reference",
    "entity",
    "check",
    "register_property",
    "register_reference",
]
