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
Description: Enumerations shared by the entity metadata records.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from enum import Enum


class ReferenceKind(str, Enum):
    """Category of a property declaration.

    SCALAR: a plain column (or a computed value) of the entity.
    EMBEDDED: an embeddable object flattened into the entity.
    Every other member is a relation to another entity.
    """

    SCALAR = "scalar"
    EMBEDDED = "embedded"
    MANY_TO_ONE = "m:1"
    ONE_TO_ONE = "1:1"
    ONE_TO_MANY = "1:m"
    MANY_TO_MANY = "m:n"

    @property
    def is_relation(self) -> bool:
        """Whether the kind points to another entity."""
        return self not in (ReferenceKind.SCALAR, ReferenceKind.EMBEDDED)

    def __str__(self) -> str:
        return self.value


class MemberKind(str, Enum):
    """Shape of the class member a property declaration was applied to."""

    FIELD = "field"
    ACCESSOR = "accessor"
    METHOD = "method"


class Cascade(str, Enum):
    PERSIST = "persist"
    MERGE = "merge"
    REMOVE = "remove"
    ALL = "all"


class LoadStrategy(str, Enum):
    SELECT_IN = "select-in"
    JOINED = "joined"
