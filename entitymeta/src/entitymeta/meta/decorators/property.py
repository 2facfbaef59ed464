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
Description: This module provides the Property declaration. Declaring a property installs a
            PropertyRecord in the metadata of its entity at class definition time:
            - register_property is the explicit registration function.
            - Property is the declaration object. It is either assigned to a class attribute
              or used as a decorator on a method or a property, and registers itself when the
              class is created (__set_name__).
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from typing import Any, Mapping, Self, Unpack

from ...abstract.exceptions.traced_exceptions import MetadataError
from ...utils.logging_config import get_logger
from ..entities.accessors import MISSING, describe_member
from ..entities.checks import add_check
from ..entities.enums import ReferenceKind
from ..entities.naming import resolve_names
from ..entities.options import PropertyOptions
from ..entities.records import PropertyRecord
from ..entities.storage import MetadataStorage, metadata_storage
from ..entities.validation import validate_single_decorator

logger = get_logger(__name__)


def register_property(
    entity: type,
    property_name: str,
    options: Mapping[str, Any] | None = None,
    member: Any = MISSING,
    *,
    reference: ReferenceKind = ReferenceKind.SCALAR,
    storage: MetadataStorage | None = None,
) -> PropertyRecord:
    """Install a property record in the metadata of the entity.

    Steps, all under the storage lock:
        1. get or create the entity metadata,
        2. reject a property already declared with another reference kind,
        3. resolve the property name and its field name,
        4. classify the member (field, accessor or method),
        5. build the record, every option is copied verbatim except ``name`` and ``check``,
        6. collect ``check`` on the entity,
        7. insert the record, replacing a previous declaration of the same property.

    Args:
        entity (type): the entity class.
        property_name (str): name of the declared member.
        options (Mapping[str, Any] | None): declaration options. Not modified.
        member (Any): the member value or a MemberDescriptor. MISSING for a plain field.
        reference (ReferenceKind): reference kind of the declaration. Defaults to SCALAR.
        storage (MetadataStorage | None): storage to register into. Defaults to
            metadata_storage().

    Raises:
        DuplicateDecoratorError: Raised when the property is declared with another kind. The
            metadata is left unchanged.

    Returns:
        PropertyRecord: the installed record.
    """
    storage = storage if storage is not None else metadata_storage()
    descriptor = describe_member(member)

    with storage.lock():
        meta = storage.get_or_create(entity)
        validate_single_decorator(meta, property_name, reference)

        resolved = resolve_names(property_name, options or {}, descriptor)
        check = resolved.options.pop("check", None)

        record = PropertyRecord.from_options(resolved.name, resolved.options, reference)
        record.member_kind = descriptor.kind
        record.getter = descriptor.has_getter
        record.setter = descriptor.has_setter

        if descriptor.is_method_backed:
            # computed value, nothing to store
            record.getter = True
            record.persist = False
            record.runtime_type = "method"
            record.getter_name = resolved.getter_name

        if check is not None:
            add_check(meta, record.name, check)

        meta.properties[record.name] = record

    logger.debug(
        "property_registered",
        entity=meta.class_name,
        property=record.name,
        field_name=record.field_name,
        member_kind=record.member_kind.value,
        reference=record.reference.value,
    )
    return record


class Property:
    """Declaration of a scalar property.

    Examples:
        >>> class User:
        ...     age = Property(name="years")  # plain field, stored in column "years"
        ...
        ...     @Property(hidden=True)
        ...     @property
        ...     def email(self) -> str: ...  # accessor
        ...
        ...     @Property()
        ...     def full_name(self) -> str: ...  # computed, never persisted

        >>> metadata_storage().get(User).property_names
        ('age', 'email', 'full_name')

    The member is left as declared: decorated methods and properties are put back on the
    class and a plain field declaration is removed from the class namespace. Declarations
    can be stacked, they are registered from the innermost to the outermost.
    """

    def __init__(
        self,
        *,
        storage: MetadataStorage | None = None,
        **options: Unpack[PropertyOptions],
    ) -> None:
        self.options: dict[str, Any] = dict(options)
        self.storage = storage
        self.member: Any = MISSING
        self.inner: Property | None = None
        self.reference = ReferenceKind.SCALAR

    def __call__(self, member: Any) -> Self:
        if isinstance(member, Property):
            self.inner = member
            self.member = member.member
        else:
            self.member = member
        return self

    def declaration_options(self) -> dict[str, Any]:
        """Options given to the registrar. Subclasses add their own."""
        return dict(self.options)

    def register(self, owner: type, name: str) -> PropertyRecord:
        """Register this declaration, and the stacked ones first, for ``owner.name``."""
        if self.inner is not None:
            self.inner.register(owner, name)
        return register_property(
            owner,
            name,
            self.declaration_options(),
            self.member,
            reference=self.reference,
            storage=self.storage,
        )

    def __set_name__(self, owner: type, name: str) -> None:
        try:
            self.register(owner, name)
        except MetadataError:
            # the class is never bound, its metadata must not outlive it
            (self.storage if self.storage is not None else metadata_storage()).discard(owner)
            raise
        if self.member is MISSING:
            delattr(owner, name)
        else:
            setattr(owner, name, self.member)

    def __repr__(self) -> str:
        options = ", ".join(f"{k}={v!r}" for k, v in self.options.items())
        return f"{type(self).__name__}({options})"

