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
Description: Tests for the license header of the implementation modules.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import importlib
import pkgutil

import pytest

import entitymeta.abstract
import entitymeta.meta


def implementation_modules() -> list[str]:
    names = []
    for package in (entitymeta.abstract, entitymeta.meta):
        for info in pkgutil.walk_packages(package.__path__, f"{package.__name__}."):
            if not info.ispkg:
                names.append(info.name)
    return sorted(names)


@pytest.mark.parametrize("module_name", implementation_modules())
def test_module_carries_license_header(module_name: str):
    """Test that every implementation module carries the MIT header and metadata."""
    module = importlib.import_module(module_name)

    assert module.__doc__ is not None
    assert module.__doc__.lstrip().startswith("MIT License")
    assert module.__license__ == "MIT"
    assert module.__author__ == "Sébastien Gachoud"
