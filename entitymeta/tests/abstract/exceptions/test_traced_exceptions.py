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
Description: Tests for the TracedException and MetadataError classes.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from types import MappingProxyType
from unittest.mock import MagicMock, patch

import pytest

from entitymeta.exceptions import (
    TracedException,
    MetadataError,
    format_exception,
)


class TestFormatException:
    """Test cases for the format_exception function."""

    def test_format_exception_with_simple_exception(self):
        """Test formatting a simple exception with traceback."""
        try:
            raise ValueError("Test error message")
        except ValueError as e:
            result = format_exception(e)

            assert isinstance(result, str)
            assert "ValueError: Test error message" in result
            assert "Traceback" in result
            assert "test_format_exception_with_simple_exception" in result

    def test_format_exception_with_no_traceback(self):
        """Test formatting an exception that has no traceback."""
        e = ValueError("No traceback")
        result = format_exception(e)

        assert "ValueError: No traceback" in result

    def test_format_exception_with_exception_chain(self):
        """Test formatting an exception with a cause chain."""
        try:
            try:
                raise KeyError("User")
            except KeyError as e:
                raise MetadataError("Lookup failed") from e
        except MetadataError as e:
            result = format_exception(e)

            assert "MetadataError: Lookup failed" in result
            assert "KeyError: 'User'" in result

    @patch("traceback.format_exception")
    def test_format_exception_calls_traceback_format_exception(
        self, mock_format: MagicMock
    ):
        """Test that format_exception properly calls traceback.format_exception."""
        mock_format.return_value = ["Mocked ", "traceback"]

        try:
            raise ValueError("Test")
        except ValueError as e:
            result = format_exception(e)

            mock_format.assert_called_once_with(type(e), e, e.__traceback__)
            assert result == "Mocked traceback"


class TestTracedException:
    """Test cases for the TracedException class."""

    def test_traced_exception_with_message(self):
        """Test TracedException with a message."""
        with pytest.raises(TracedException) as exc_info:
            raise TracedException("Test traced exception")

        assert str(exc_info.value) == "Test traced exception"

    def test_details_default_to_empty(self):
        """Test that an exception without details has an empty mapping."""
        assert dict(TracedException("x").details) == {}

    def test_details_do_not_change_the_message(self):
        """Test that details are kept apart from the message."""
        e = TracedException("Property conflict", entity="User", property_name="age")

        assert str(e) == "Property conflict"
        assert e.details == {"entity": "User", "property_name": "age"}

    def test_details_are_read_only(self):
        """Test that the details cannot be modified."""
        e = TracedException("x", entity="User")

        assert isinstance(e.details, MappingProxyType)
        with pytest.raises(TypeError):
            e.details["entity"] = "Other"  # type: ignore

    def test_traceback_format_vs_format_exception(self):
        """Test that traceback_format produces the same result as format_exception."""
        try:
            raise TracedException("Consistency test")
        except TracedException as e:
            assert e.traceback_format() == format_exception(e)


class TestMetadataError:
    """Test cases for the MetadataError base class."""

    def test_metadata_error_is_traced(self):
        """Test that MetadataError is a TracedException."""
        assert issubclass(MetadataError, TracedException)

    def test_metadata_error_traceback_format(self):
        """Test the traceback formatting of MetadataError."""
        try:
            raise MetadataError("Broken metadata", entity="Book")
        except MetadataError as e:
            result = e.traceback_format()

            assert "MetadataError: Broken metadata" in result
            assert e.details["entity"] == "Book"
