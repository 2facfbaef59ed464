"""Exception utilities for entitymeta."""

from .traced_exceptions import TracedException, MetadataError, format_exception

__all__ = [
    "TracedException",
    "MetadataError",
    "format_exception",
]
