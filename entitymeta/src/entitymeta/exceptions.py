"""
Re-export exceptions module for cleaner imports.

This allows: from entitymeta.exceptions import DuplicateDecoratorError
Instead of: from entitymeta.meta.entities.validation import DuplicateDecoratorError
"""

from .abstract.exceptions.traced_exceptions import (
    TracedException,
    MetadataError,
    format_exception,
)
from .meta.entities.storage import MetadataNotFoundError
from .meta.entities.validation import DuplicateDecoratorError

__all__ = [
    "TracedException",
    "MetadataError",
    "MetadataNotFoundError",
    "DuplicateDecoratorError",
    "format_exception",
]
