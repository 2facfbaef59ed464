"""
Re-export metadata module for cleaner imports.

This allows: from entitymeta.metadata import metadata_storage
Instead of: from entitymeta.meta.entities.storage import metadata_storage
"""

from .meta.entities import (
    ReferenceKind,
    MemberKind,
    Cascade,
    LoadStrategy,
    CheckConstraint,
    LiteralCheck,
    DeferredCheck,
    PropertyRecord,
    EntityMetadata,
    MetadataStorage,
    metadata_storage,
    MemberDescriptor,
    describe_member,
    PropertyOptions,
    EnumOptions,
    ReferenceOptions,
)

__all__ = [
    # Enums
    "ReferenceKind",
    "MemberKind",
    "Cascade",
    "LoadStrategy",
    # Records
    "CheckConstraint",
    "LiteralCheck",
    "DeferredCheck",
    "PropertyRecord",
    "EntityMetadata",
    # Storage
    "MetadataStorage",
    "metadata_storage",
    # Members
    "MemberDescriptor",
    "describe_member",
    # Options
    "PropertyOptions",
    "EnumOptions",
    "ReferenceOptions",
]
