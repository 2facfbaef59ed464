"""Entity metadata: records, storage and the building blocks of the property registrars."""

from .enums import ReferenceKind, MemberKind, Cascade, LoadStrategy
from .checks import (
    CheckCallback,
    CheckConstraint,
    CheckExpression,
    DeferredCheck,
    LiteralCheck,
    add_check,
    to_check_expression,
)
from .records import PropertyRecord, EntityMetadata
from .storage import MetadataStorage, MetadataNotFoundError, metadata_storage
from .validation import DuplicateDecoratorError, validate_single_decorator
from .accessors import MISSING, MemberDescriptor, describe_member
from .naming import ResolvedNames, resolve_names
from .options import ColumnType, PropertyOptions, EnumOptions, ReferenceOptions

__all__ = [
    # Enums
    "ReferenceKind",
    "MemberKind",
    "Cascade",
    "LoadStrategy",
    # Checks
    "CheckCallback",
    "CheckConstraint",
    "CheckExpression",
    "DeferredCheck",
    "LiteralCheck",
    "add_check",
    "to_check_expression",
    # Records and storage
    "PropertyRecord",
    "EntityMetadata",
    "MetadataStorage",
    "metadata_storage",
    # Resolution
    "MISSING",
    "MemberDescriptor",
    "describe_member",
    "ResolvedNames",
    "resolve_names",
    "validate_single_decorator",
    # Options
    "ColumnType",
    "PropertyOptions",
    "EnumOptions",
    "ReferenceOptions",
    # Errors
    "DuplicateDecoratorError",
    "MetadataNotFoundError",
]
