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
Description: Scalar declarations sharing the Property registrar.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from typing import Any, Callable, Sequence, Unpack

from ..entities.options import EnumOptions, PropertyOptions
from ..entities.storage import MetadataStorage
from .property import Property


class PrimaryKey(Property):
    """A primary key column."""

    def declaration_options(self) -> dict[str, Any]:
        return {**self.options, "primary": True}


class SerializedPrimaryKey(PrimaryKey):
    """A primary key exposed under its serialized form (e.g. a string id)."""

    def declaration_options(self) -> dict[str, Any]:
        return {**super().declaration_options(), "serialized_primary_key": True}


class EnumProperty(Property):
    """A property restricted to a set of items.

    Args:
        items (Sequence[Any] | Callable[[], Sequence[Any]] | None): the allowed values, or a
            callable returning them (resolved by the schema generator).
    """

    def __init__(
        self,
        items: Sequence[Any] | Callable[[], Sequence[Any]] | None = None,
        *,
        storage: MetadataStorage | None = None,
        **options: Unpack[EnumOptions],
    ) -> None:
        if items is not None:
            options["items"] = items
        super().__init__(storage=storage, **options)

    def declaration_options(self) -> dict[str, Any]:
        return {**self.options, "enum": True}


class Formula(Property):
    """A read-only property computed by an SQL snippet.

    Args:
        expression (str | Callable[[str], str]): the SQL snippet, or a callable receiving the
            table alias.
    """

    def __init__(
        self,
        expression: str | Callable[[str], str],
        *,
        storage: MetadataStorage | None = None,
        **options: Unpack[PropertyOptions],
    ) -> None:
        super().__init__(storage=storage, **options)
        self.options["formula"] = expression

    def declaration_options(self) -> dict[str, Any]:
        return {**self.options, "persist": False}
