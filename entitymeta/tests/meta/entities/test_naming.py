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
Description: Tests for the property name resolution.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from entitymeta.metadata import MemberDescriptor
from entitymeta.meta.entities.naming import resolve_names


class TestStoredMembers:
    """Test name resolution of fields and accessors."""

    def test_no_options(self):
        """Test that the declared name is kept and no field name is forced."""
        resolved = resolve_names("age", {}, MemberDescriptor.field())

        assert resolved.name == "age"
        assert resolved.alias == "age"
        assert resolved.getter_name is None
        assert resolved.options == {"name": "age"}

    def test_name_is_moved_to_field_name(self):
        """Test that a differing name becomes the field name."""
        resolved = resolve_names("age", {"name": "years"}, MemberDescriptor.field())

        assert resolved.name == "age"
        assert resolved.options["field_name"] == "years"
        assert resolved.options["name"] == "age"

    def test_explicit_field_name_wins(self):
        """Test that an explicit field name is not overwritten by the legacy alias."""
        resolved = resolve_names(
            "age", {"name": "years", "field_name": "age_col"}, MemberDescriptor.field()
        )

        assert resolved.name == "age"
        assert resolved.options["field_name"] == "age_col"

    def test_same_name_is_not_moved(self):
        """Test that a name equal to the member name leaves field_name unset."""
        resolved = resolve_names("age", {"name": "age"}, MemberDescriptor.field())

        assert "field_name" not in resolved.options

    def test_accessor_behaves_like_a_field(self):
        """Test that accessors keep their member name."""
        resolved = resolve_names("email", {"name": "mail"}, MemberDescriptor.accessor())

        assert resolved.name == "email"
        assert resolved.options["field_name"] == "mail"

    def test_options_are_not_modified(self):
        """Test that the given options are left untouched."""
        options = {"name": "years", "nullable": True}
        resolve_names("age", options, MemberDescriptor.field())

        assert options == {"name": "years", "nullable": True}


class TestMethodMembers:
    """Test name resolution of method-backed properties."""

    def test_alias_becomes_the_name(self):
        """Test that the alias is the property name of a computed property."""
        resolved = resolve_names(
            "get_full_name", {"name": "full_name"}, MemberDescriptor.method()
        )

        assert resolved.name == "full_name"
        assert resolved.getter_name == "get_full_name"
        assert "field_name" not in resolved.options

    def test_without_alias(self):
        """Test that the member name is used without alias."""
        resolved = resolve_names("full_name", {}, MemberDescriptor.method())

        assert resolved.name == "full_name"
        assert resolved.getter_name == "full_name"

    def test_explicit_field_name_is_kept(self):
        """Test that name and field_name together keep both values."""
        resolved = resolve_names(
            "get_total", {"name": "total", "field_name": "total_col"}, MemberDescriptor.method()
        )

        assert resolved.name == "total"
        assert resolved.options["field_name"] == "total_col"
