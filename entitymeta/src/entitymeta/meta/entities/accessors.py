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
Description: Classification of the class member a property declaration is applied to.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Self

from .enums import MemberKind


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass(frozen=True, slots=True)
class MemberDescriptor:
    """Shape of a declared member.

    FIELD: a stored attribute, it has no accessor.
    ACCESSOR: a getter and/or a setter (e.g. a ``property``).
    METHOD: a callable computing the value, the property is virtual.
    """

    kind: MemberKind = MemberKind.FIELD
    has_getter: bool = False
    has_setter: bool = False

    @classmethod
    def field(cls) -> Self:
        return cls(MemberKind.FIELD)

    @classmethod
    def accessor(cls, getter: bool = True, setter: bool = False) -> Self:
        return cls(MemberKind.ACCESSOR, getter, setter)

    @classmethod
    def method(cls) -> Self:
        return cls(MemberKind.METHOD, has_getter=True)

    @property
    def is_method_backed(self) -> bool:
        return self.kind is MemberKind.METHOD


def describe_member(value: Any = MISSING) -> MemberDescriptor:
    """Classify a member from its value in the class namespace.

    Args:
        value (Any): The member value. MISSING (the default) or any non callable value is a
            plain field.

    Returns:
        MemberDescriptor: The shape of the member.

    Examples:
        >>> describe_member(property(lambda self: 1)).kind
        <MemberKind.ACCESSOR: 'accessor'>
        >>> describe_member(lambda self: 1).kind
        <MemberKind.METHOD: 'method'>
    """
    if isinstance(value, MemberDescriptor):
        return value
    if isinstance(value, property):
        return MemberDescriptor.accessor(value.fget is not None, value.fset is not None)
    if isinstance(value, cached_property):
        return MemberDescriptor.accessor(getter=True, setter=False)
    if value is not MISSING and callable(value):
        return MemberDescriptor.method()
    return MemberDescriptor.field()
