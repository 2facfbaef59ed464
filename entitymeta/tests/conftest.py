"""Shared fixtures of the entitymeta test suite."""

import pytest

from entitymeta.metadata import MetadataStorage, metadata_storage


@pytest.fixture(autouse=True)
def clear_default_storage():
    """Isolate tests registering into the process-wide storage."""
    metadata_storage().clear()
    yield
    metadata_storage().clear()


@pytest.fixture
def storage() -> MetadataStorage:
    """A storage owned by the test."""
    return MetadataStorage()
