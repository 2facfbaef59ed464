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
Description: Options accepted by the property declarations. The options are plain dictionaries.
            Their structure is documented here for type checkers only, nothing validates them
            at runtime.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from typing import Any, Callable, Literal, Sequence, TypedDict

from .checks import CheckCallback, CheckExpression
from .enums import Cascade, LoadStrategy

type ColumnType = Literal[
    "int", "int4", "integer", "bigint", "int8", "int2", "tinyint", "smallint", "mediumint",
    "double", "double precision", "real", "float8", "decimal", "numeric", "float", "float4",
    "datetime", "time", "time with time zone", "timestamp", "timestamp with time zone",
    "timetz", "timestamptz", "date", "interval",
    "character varying", "varchar", "char", "character", "uuid",
    "text", "tinytext", "mediumtext", "longtext",
    "boolean", "bool", "bit", "enum",
    "blob", "tinyblob", "mediumblob", "longblob", "bytea",
    "point", "line", "lseg", "box", "circle", "path", "polygon", "geometry",
    "tsvector", "tsquery",
    "json", "jsonb",
]


class PropertyOptions(TypedDict, total=False):
    """Options of a scalar property.

    ``name`` is a legacy alias of ``field_name`` unless the decorated member is a method, in
    which case it becomes the exposed property name. ``check`` is collected on the entity and
    never stored on the property record.
    """

    # storage naming
    name: str
    field_name: str
    field_names: Sequence[str]
    # type descriptors, independent of each other
    type: Any
    custom_type: Any
    column_type: ColumnType | str
    # numeric column shape (SQL only)
    length: int
    precision: int
    scale: int
    unsigned: bool
    autoincrement: bool
    # value provisioning
    default: str | int | float | bool | Sequence[Any] | None
    default_raw: str
    formula: str | Callable[[str], str]
    on_create: Callable[[Any], Any]
    on_update: Callable[[Any], Any]
    # schema flags
    nullable: bool
    unique: bool | str
    index: bool | str
    primary: bool
    version: bool
    concurrency_check: bool
    check: str | CheckCallback | CheckExpression
    # runtime behavior
    persist: bool
    track_changes: bool
    hidden: bool
    lazy: bool
    getter: bool
    setter: bool
    serialized_primary_key: bool
    # pass-through metadata
    serializer: Callable[[Any], Any]
    serialized_name: str
    custom_order: Sequence[str] | Sequence[int] | Sequence[bool]
    comment: str
    extra: str
    ignore_schema_changes: Sequence[Literal["type", "extra"]]


class EnumOptions(PropertyOptions, total=False):
    items: Sequence[Any] | Callable[[], Sequence[Any]]
    array: bool


class ReferenceOptions(PropertyOptions, total=False):
    """Options of a relation to another entity."""

    entity: str | type | Callable[[], type]
    cascade: Sequence[Cascade]
    eager: bool
    strategy: LoadStrategy
