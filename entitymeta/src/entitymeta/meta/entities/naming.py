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
Description: Resolution of the property name and of its storage field name.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from dataclasses import dataclass
from typing import Any, Mapping

from .accessors import MemberDescriptor


@dataclass(frozen=True, slots=True)
class ResolvedNames:
    """Outcome of the name resolution.

    ``name`` is the key of the property in the entity metadata. ``options`` is a copy of the
    declaration options where a legacy ``name`` alias was moved to ``field_name``.
    """

    name: str
    alias: str
    getter_name: str | None
    options: dict[str, Any]


def resolve_names(
    property_name: str, options: Mapping[str, Any], member: MemberDescriptor
) -> ResolvedNames:
    """Compute the canonical property name and the field naming options.

    ``options["name"]`` historically named the column. For stored members it is moved to
    ``field_name`` (an explicit ``field_name`` wins) and the property keeps the declared member
    name. A method-backed property has no column, its alias becomes the property name and the
    member name is kept as ``getter_name``.

    Args:
        property_name (str): name of the declared member.
        options (Mapping[str, Any]): declaration options. Not modified.
        member (MemberDescriptor): shape of the declared member.

    Returns:
        ResolvedNames: the canonical names and the rewritten options.
    """
    opts = dict(options)
    alias = opts.get("name") or property_name

    if alias != property_name and not member.is_method_backed:
        opts.setdefault("field_name", alias)
        del opts["name"]

    opts["name"] = property_name

    if member.is_method_backed:
        return ResolvedNames(alias, alias, property_name, opts)
    return ResolvedNames(property_name, alias, None, opts)
