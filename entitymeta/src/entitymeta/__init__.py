"""
entitymeta: Declarative metadata construction for entity classes.

This library provides:
- Property declarations turning class members into canonical PropertyRecords
- A MetadataStorage keyed by entity class, read by schema generation and persistence layers
- Check constraint collection, literal or computed from the table alias
- TracedException based errors, raised eagerly at class definition time
"""

__version__ = "0.1.0"
__author__ = "Sébastien Gachoud"
__license__ = "MIT"

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
]
