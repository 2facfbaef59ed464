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
Description: Tests for the classification of declared members.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from functools import cached_property

import pytest

from entitymeta.metadata import MemberDescriptor, MemberKind, describe_member
from entitymeta.meta.entities.accessors import MISSING


def _get(self):
    return 1


def _set(self, value):
    pass


class TestDescribeMember:
    """Test describe_member on the member shapes."""

    @pytest.mark.parametrize("value", [MISSING, 1, "text", None, [1, 2]])
    def test_fields(self, value):
        """Test that missing and non callable values are plain fields."""
        descriptor = describe_member(value)

        assert descriptor.kind is MemberKind.FIELD
        assert not descriptor.has_getter
        assert not descriptor.has_setter
        assert not descriptor.is_method_backed

    def test_default_is_field(self):
        """Test that no value is a plain field."""
        assert describe_member() == MemberDescriptor.field()

    def test_getter_only_property(self):
        """Test a read-only property."""
        descriptor = describe_member(property(_get))

        assert descriptor == MemberDescriptor(MemberKind.ACCESSOR, True, False)

    def test_getter_and_setter_property(self):
        """Test a read-write property."""
        descriptor = describe_member(property(_get, _set))

        assert descriptor.kind is MemberKind.ACCESSOR
        assert descriptor.has_getter
        assert descriptor.has_setter
        assert not descriptor.is_method_backed

    def test_setter_only_property(self):
        """Test a write-only property."""
        descriptor = describe_member(property(None, _set))

        assert not descriptor.has_getter
        assert descriptor.has_setter

    def test_cached_property(self):
        """Test that a cached property is a getter accessor."""
        descriptor = describe_member(cached_property(_get))

        assert descriptor == MemberDescriptor.accessor(getter=True, setter=False)

    @pytest.mark.parametrize("value", [_get, lambda self: 1, staticmethod(_get)])
    def test_methods(self, value):
        """Test that callables are method-backed."""
        descriptor = describe_member(value)

        assert descriptor.kind is MemberKind.METHOD
        assert descriptor.has_getter
        assert descriptor.is_method_backed

    def test_descriptor_is_returned_as_is(self):
        """Test that an explicit descriptor is not reclassified."""
        descriptor = MemberDescriptor.accessor(getter=False, setter=True)

        assert describe_member(descriptor) is descriptor
