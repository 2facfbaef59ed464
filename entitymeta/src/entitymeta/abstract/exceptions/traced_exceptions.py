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
Description: Base exception classes of entitymeta. Exceptions carry their traceback formatting
            and a mapping of structured details that loggers can bind as key/values.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"


import traceback
from types import MappingProxyType
from typing import Any, Mapping


def format_exception(e: BaseException) -> str:
    """Format the provided exception to a string with its traceback.

    Args:
        e (BaseException): The exception to format.

    Returns:
        str: The string representation of the exception with its traceback.
    """
    return "".join(traceback.format_exception(type(e), e, e.__traceback__))


class TracedException(Exception):
    """Base traceable exception class.

    Keyword arguments given at construction are kept as read-only details. They never take part
    in the message, which stays the positional arguments as for any exception.

    Examples:
        >>> e = TracedException("boom", entity="User")
        >>> e.details["entity"]
        'User'
    """

    def __init__(self, *args: Any, **details: Any) -> None:
        super().__init__(*args)
        self._details = MappingProxyType(dict(details))

    @property
    def details(self) -> Mapping[str, Any]:
        """Structured details of the exception."""
        return self._details

    def traceback_format(self) -> str:
        """Format the exception to a string with its traceback.

        Returns:
            str: The string representation of the exception with its traceback.
        """
        return format_exception(self)


class MetadataError(TracedException):
    """Base class of every error raised while building entity metadata."""
