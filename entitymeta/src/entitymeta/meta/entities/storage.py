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
Description: Registry of entity metadata keyed by class identity. The default storage is a
            process-wide instance returned by metadata_storage(); sessions or tests may build
            their own MetadataStorage and pass it to the registrars.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from collections.abc import Iterator
from functools import lru_cache
from threading import RLock

from ...abstract.exceptions.traced_exceptions import MetadataError
from ...utils.logging_config import get_logger
from .records import EntityMetadata

logger = get_logger(__name__)


class MetadataNotFoundError(MetadataError, KeyError):
    """Signals a lookup of an entity that has no metadata."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class MetadataStorage:
    """
    Holds the EntityMetadata of every entity class. Classes are compared by identity, two
    classes with the same name have distinct metadata.

    Registration runs inside lock() so that get-or-create, validation and insertion form one
    critical section when classes are defined from several threads.
    """

    __metadata: dict[type, EntityMetadata]

    def __init__(self) -> None:
        self.__metadata = {}
        self.__lock = RLock()

    def lock(self) -> RLock:
        """Reentrant lock guarding the storage."""
        return self.__lock

    def get_or_create(self, entity: type) -> EntityMetadata:
        """Return the metadata of the entity, creating an empty one on first reference.

        Args:
            entity (type): The entity class.

        Returns:
            EntityMetadata: The metadata of exactly this class.
        """
        with self.__lock:
            meta = self.__metadata.get(entity)
            if meta is None:
                meta = EntityMetadata(class_=entity)
                self.__metadata[entity] = meta
                logger.debug("entity_metadata_created", entity=meta.class_name)
            return meta

    def get(self, entity: type) -> EntityMetadata:
        """Return the metadata of the entity.

        Args:
            entity (type): The entity class.

        Raises:
            MetadataNotFoundError: Raised when the entity has no metadata.

        Returns:
            EntityMetadata: The metadata of the entity.
        """
        try:
            return self.__metadata[entity]
        except KeyError:
            raise MetadataNotFoundError(
                f"Metadata for entity '{getattr(entity, '__name__', entity)}' not found.",
                entity=entity,
            ) from None

    def has(self, entity: type) -> bool:
        return entity in self.__metadata

    def all(self) -> dict[type, EntityMetadata]:
        """Return a copy of the registry, in registration order."""
        return dict(self.__metadata)

    def discard(self, entity: type) -> None:
        """Forget the metadata of the entity, if any. Used when its class definition fails."""
        with self.__lock:
            self.__metadata.pop(entity, None)

    def clear(self) -> None:
        """Remove every entity metadata. Meant for test isolation."""
        with self.__lock:
            count = len(self.__metadata)
            self.__metadata.clear()
        logger.debug("metadata_storage_cleared", entities=count)

    def __contains__(self, entity: object) -> bool:
        return entity in self.__metadata

    def __iter__(self) -> Iterator[EntityMetadata]:
        return iter(list(self.__metadata.values()))

    def __len__(self) -> int:
        return len(self.__metadata)


@lru_cache(1)
def metadata_storage() -> MetadataStorage:
    """Default metadata storage. Used by the decorators when no storage is given.

    Returns:
        MetadataStorage: the process-wide storage instance.
    """
    return MetadataStorage()
