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
Description: Metadata records: one PropertyRecord per declared property and one
            EntityMetadata per entity class. Downstream consumers (schema generation,
            persistence, serialization) read these records and never write them.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from dataclasses import dataclass, field, fields
from functools import lru_cache
from typing import Any, Callable, ClassVar, Mapping, Sequence

from .checks import CheckConstraint
from .enums import MemberKind, ReferenceKind


@dataclass(slots=True)
class PropertyRecord:
    """Canonical description of one entity property.

    Every option is an independent knob kept as given. ``None`` means the option was not set;
    consumers apply their own defaults (e.g. the column name defaults to the property name, see
    column_names).
    """

    # Options whose key differs from the attribute name.
    OPTION_ALIASES: ClassVar[Mapping[str, str]] = {"type": "runtime_type"}

    name: str
    reference: ReferenceKind = ReferenceKind.SCALAR
    member_kind: MemberKind = MemberKind.FIELD

    # storage naming
    field_name: str | None = None
    field_names: Sequence[str] | None = None

    # type descriptors
    runtime_type: Any = None
    custom_type: Any = None
    column_type: str | None = None

    # accessors
    getter: bool = False
    setter: bool = False
    getter_name: str | None = None

    # numeric column shape
    length: int | None = None
    precision: int | None = None
    scale: int | None = None
    unsigned: bool | None = None
    autoincrement: bool | None = None

    # value provisioning
    default: Any = None
    default_raw: str | None = None
    formula: str | Callable[[str], str] | None = None
    on_create: Callable[[Any], Any] | None = None
    on_update: Callable[[Any], Any] | None = None

    # schema flags
    nullable: bool | None = None
    unique: bool | str | None = None
    index: bool | str | None = None
    primary: bool | None = None
    version: bool | None = None
    concurrency_check: bool | None = None

    # runtime behavior
    persist: bool | None = None
    track_changes: bool | None = None
    hidden: bool | None = None
    lazy: bool | None = None
    serialized_primary_key: bool | None = None

    # pass-through metadata
    serializer: Callable[[Any], Any] | None = None
    serialized_name: str | None = None
    custom_order: Sequence[Any] | None = None
    comment: str | None = None
    extra: str | None = None
    ignore_schema_changes: Sequence[str] | None = None

    # enum properties
    enum: bool | None = None
    items: Any = None
    array: bool | None = None

    # relations
    entity: Any = None
    cascade: Sequence[Any] | None = None
    eager: bool | None = None
    strategy: Any = None

    # options this record has no attribute for, kept verbatim
    passthrough: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_options(
        cls,
        name: str,
        options: Mapping[str, Any],
        reference: ReferenceKind = ReferenceKind.SCALAR,
    ) -> PropertyRecord:
        """Create a record copying every option through unchanged.

        Args:
            name (str): canonical property name.
            options (Mapping[str, Any]): the options. ``name`` and ``check`` are ignored, they
                are interpreted by the registrar.
            reference (ReferenceKind): the reference kind of the record.

        Returns:
            PropertyRecord: the new record.
        """
        known = _record_attributes()
        record = cls(name=name, reference=reference)
        for key, value in options.items():
            if key in ("name", "check"):
                continue
            attribute = cls.OPTION_ALIASES.get(key, key)
            if attribute in known:
                setattr(record, attribute, value)
            else:
                record.passthrough[key] = value
        return record

    @property
    def is_method_backed(self) -> bool:
        """Whether the property value is computed by a method."""
        return self.member_kind is MemberKind.METHOD

    @property
    def column_names(self) -> list[str]:
        """Storage column names, defaulting to the property name."""
        if self.field_names:
            return list(self.field_names)
        if self.field_name:
            return [self.field_name]
        return [self.name]

    def to_dict(self) -> dict[str, Any]:
        """Return the record as a dictionary, leaving out options that were not set."""
        result: dict[str, Any] = {}
        for f in fields(self):
            if f.name == "passthrough":
                continue
            value = getattr(self, f.name)
            if value is not None:
                result[f.name] = value
        result.update(self.passthrough)
        return result


@lru_cache(1)
def _record_attributes() -> frozenset[str]:
    return frozenset(
        f.name
        for f in fields(PropertyRecord)
        if f.name not in ("name", "reference", "member_kind", "passthrough")
    )


@dataclass(slots=True, eq=False)
class EntityMetadata:
    """Metadata of one entity class.

    ``properties`` keeps declaration order, which is the column order of the generated schema.
    ``checks`` keeps the check constraints in declaration order.
    """

    class_: type
    class_name: str = ""
    table_name: str | None = None
    comment: str | None = None
    abstract: bool = False
    properties: dict[str, PropertyRecord] = field(default_factory=dict)
    checks: list[CheckConstraint] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.class_name:
            self.class_name = self.class_.__name__

    @property
    def props(self) -> list[PropertyRecord]:
        return list(self.properties.values())

    @property
    def property_names(self) -> tuple[str, ...]:
        return tuple(self.properties)

    def has_property(self, name: str) -> bool:
        return name in self.properties

    def get_property(self, name: str) -> PropertyRecord | None:
        return self.properties.get(name)

    def resolve_checks(self, alias: str) -> list[tuple[str | None, str]]:
        """Resolve every check expression for the given table alias.

        Args:
            alias (str): the table alias used by the schema generator.

        Returns:
            list[tuple[str | None, str]]: ``(property, expression)`` pairs in declaration order.
        """
        return [(check.property, check.resolve(alias)) for check in self.checks]

    def __repr__(self) -> str:
        props = ", ".join(self.properties)
        return f"<EntityMetadata {self.class_name}({props})>"
