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
Description: Class level declarations: the entity decorator and entity level check
            constraints. Class decorators run after the property declarations of the class
            body, so they complete a metadata record the properties already created.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from typing import Callable

from ...utils.logging_config import get_logger
from ..entities.checks import CheckCallback, CheckExpression, add_check
from ..entities.storage import MetadataStorage, metadata_storage

logger = get_logger(__name__)


def entity[T: type](
    cls: T | None = None,
    *,
    table_name: str | None = None,
    comment: str | None = None,
    abstract: bool = False,
    storage: MetadataStorage | None = None,
) -> T | Callable[[T], T]:
    """Mark a class as an entity. Usable with or without arguments.

    Args:
        cls (T | None): The class, when used without arguments.
        table_name (str | None): Storage table name. None lets the naming strategy decide.
        comment (str | None): Table comment for the schema generator.
        abstract (bool): Whether the class is only a base of other entities.
        storage (MetadataStorage | None): storage to register into. Defaults to
            metadata_storage().

    Returns:
        T | Callable[[T], T]: The class itself, or the decorator.

    Examples:
        >>> @entity(table_name="users")
        ... class User:
        ...     id = PrimaryKey()
    """

    def decorator(cls: T) -> T:
        target = storage if storage is not None else metadata_storage()
        with target.lock():
            meta = target.get_or_create(cls)
            meta.table_name = table_name
            meta.comment = comment
            meta.abstract = abstract
        logger.debug(
            "entity_registered",
            entity=meta.class_name,
            table_name=table_name,
            properties=len(meta.properties),
        )
        return cls

    if cls is not None:
        return decorator(cls)
    return decorator


def check[T: type](
    expression: str | CheckCallback | CheckExpression,
    property_name: str | None = None,
    *,
    storage: MetadataStorage | None = None,
) -> Callable[[T], T]:
    """Declare a check constraint on the decorated entity.

    Args:
        expression (str | CheckCallback | CheckExpression): the check expression, a literal or
            a callable receiving the table alias.
        property_name (str | None): the property the check belongs to, if any.
        storage (MetadataStorage | None): storage to register into. Defaults to
            metadata_storage().

    Returns:
        Callable[[T], T]: The class decorator.
    """

    def decorator(cls: T) -> T:
        target = storage if storage is not None else metadata_storage()
        with target.lock():
            add_check(target.get_or_create(cls), property_name, expression)
        return cls

    return decorator
