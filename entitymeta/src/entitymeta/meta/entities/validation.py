"""
MIT License

Copyright (c) 2025 Sébastien Gachoud

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

-------------------------------------------------------------------------------

Author: Sébastien Gachoud
Created: 2026-10-19
Description: Validation of property declarations, run before any change to the metadata.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from ...abstract.exceptions.traced_exceptions import MetadataError
from ...utils.logging_config import get_logger
from .enums import ReferenceKind
from .records import EntityMetadata

logger = get_logger(__name__)


class DuplicateDecoratorError(MetadataError):
    """Signals a property declared with two different reference kinds."""

    def __init__(
        self,
        entity: str,
        property_name: str,
        existing_kind: ReferenceKind,
        incoming_kind: ReferenceKind,
    ) -> None:
        super().__init__(
            f"Property '{entity}.{property_name}' is already declared as '{existing_kind}',"
            f" it cannot also be declared as '{incoming_kind}'. Only one of the property"
            " decorators can be used per property.",
            entity=entity,
            property_name=property_name,
            existing_kind=existing_kind,
            incoming_kind=incoming_kind,
        )
        self.entity = entity
        self.property_name = property_name
        self.existing_kind = existing_kind
        self.incoming_kind = incoming_kind


def validate_single_decorator(
    meta: EntityMetadata, property_name: str, kind: ReferenceKind
) -> None:
    """Verify that the property is not already declared with another reference kind.
    Declaring it again with the same kind is allowed, the later options win.

    Args:
        meta (EntityMetadata): metadata of the entity owning the property.
        property_name (str): name of the property being declared.
        kind (ReferenceKind): reference kind of the incoming declaration.

    Raises:
        DuplicateDecoratorError: Raised when the property exists with a different kind.
    """
    existing = meta.properties.get(property_name)
    if existing is None or existing.reference == kind:
        return

    error = DuplicateDecoratorError(meta.class_name, property_name, existing.reference, kind)
    logger.warning("duplicate_property_decorator", **error.details)
    raise error
