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
Description: Check constraints collected on entities. A check expression is either a literal
            SQL fragment or a deferred callback receiving the table alias. Callbacks are only
            ever invoked by the schema generator, through CheckExpression.resolve.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .records import EntityMetadata

type CheckCallback = Callable[[str], str]


@dataclass(frozen=True, slots=True)
class LiteralCheck:
    """A check expression given verbatim."""

    expression: str

    def resolve(self, _alias: str) -> str:
        """Return the expression, the alias is irrelevant."""
        return self.expression


@dataclass(frozen=True, slots=True)
class DeferredCheck:
    """A check expression computed from the table alias by the schema generator."""

    callback: CheckCallback

    def resolve(self, alias: str) -> str:
        """Invoke the callback with the table alias."""
        return self.callback(alias)


type CheckExpression = LiteralCheck | DeferredCheck


def to_check_expression(expression: str | CheckCallback | CheckExpression) -> CheckExpression:
    """Wrap a raw check declaration into its tagged variant.

    Args:
        expression (str | CheckCallback | CheckExpression): A literal string, a callable taking
            the table alias, or an already wrapped expression.

    Returns:
        CheckExpression: The tagged expression. Its content is never inspected.
    """
    if isinstance(expression, (LiteralCheck, DeferredCheck)):
        return expression
    if isinstance(expression, str):
        return LiteralCheck(expression)
    return DeferredCheck(expression)


@dataclass(frozen=True, slots=True)
class CheckConstraint:
    """A check constraint of an entity. ``property`` is None for entity-level checks."""

    property: str | None
    expression: CheckExpression

    def resolve(self, alias: str) -> str:
        return self.expression.resolve(alias)

    def as_pair(self) -> tuple[str | None, str | CheckCallback]:
        """Return the ``(property, raw expression)`` pair."""
        match self.expression:
            case LiteralCheck(expression=literal):
                return self.property, literal
            case DeferredCheck(callback=callback):
                return self.property, callback


def add_check(
    meta: EntityMetadata,
    property_name: str | None,
    expression: str | CheckCallback | CheckExpression,
) -> CheckConstraint:
    """Append a check constraint to the entity metadata, in declaration order.
    An equal constraint already collected is not appended twice, so registering the same class
    declarations again leaves the checks unchanged.

    Args:
        meta (EntityMetadata): The metadata to append to.
        property_name (str | None): The property the check belongs to, if any.
        expression (str | CheckCallback | CheckExpression): The check expression.

    Returns:
        CheckConstraint: The appended constraint.
    """
    constraint = CheckConstraint(property_name, to_check_expression(expression))
    for existing in meta.checks:
        if existing == constraint:
            return existing
    meta.checks.append(constraint)
    return constraint
