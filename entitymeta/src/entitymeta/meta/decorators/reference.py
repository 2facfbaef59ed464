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
Description: Relation declarations. Only the registration boundary lives here: the record of a
            relation is validated and installed like a scalar property, with its reference
            kind. Resolving the target entity, the owning side or the join columns is done by
            the relation layers reading the metadata.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from typing import Any, Callable, Mapping, Unpack

from ..entities.accessors import MISSING
from ..entities.enums import ReferenceKind
from ..entities.options import ReferenceOptions
from ..entities.records import PropertyRecord
from ..entities.storage import MetadataStorage
from .property import Property, register_property


def register_reference(
    entity: type,
    property_name: str,
    kind: ReferenceKind,
    options: Mapping[str, Any] | None = None,
    member: Any = MISSING,
    *,
    storage: MetadataStorage | None = None,
) -> PropertyRecord:
    """Install a relation record in the metadata of the entity. See register_property.

    Raises:
        ValueError: Raised when ``kind`` is SCALAR.
        DuplicateDecoratorError: Raised when the property is declared with another kind.
    """
    if kind is ReferenceKind.SCALAR:
        raise ValueError("Scalar properties are declared with register_property.")
    return register_property(
        entity, property_name, options, member, reference=kind, storage=storage
    )


class Reference(Property):
    """Declaration of a relation to another entity.

    Examples:
        >>> class Book:
        ...     author = Reference(ReferenceKind.MANY_TO_ONE, entity="Author")
    """

    def __init__(
        self,
        kind: ReferenceKind,
        entity: str | type | Callable[[], type] | None = None,
        *,
        storage: MetadataStorage | None = None,
        **options: Unpack[ReferenceOptions],
    ) -> None:
        if kind is ReferenceKind.SCALAR:
            raise ValueError("Scalar properties are declared with Property.")
        if entity is not None:
            options["entity"] = entity
        super().__init__(storage=storage, **options)
        self.reference = kind
