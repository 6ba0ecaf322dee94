"""
Storage Services Package

Provides abstract interfaces and concrete implementations for data storage.
JSON files are the real backend; the in-memory backend backs tests.
"""

from investwise.services.storage.interface import (
    AuditStorageInterface,
    CorruptDataError,
    PortfolioStorageInterface,
    StorageError,
)
from investwise.services.storage.json_file import (
    JsonFileStorage,
    JsonLinesAuditStorage,
)
from investwise.services.storage.memory import (
    InMemoryAuditStorage,
    InMemoryStorage,
)

__all__ = [
    # Interfaces
    "AuditStorageInterface",
    "PortfolioStorageInterface",
    # Exceptions
    "CorruptDataError",
    "StorageError",
    # JSON file implementation
    "JsonFileStorage",
    "JsonLinesAuditStorage",
    # In-memory implementation
    "InMemoryAuditStorage",
    "InMemoryStorage",
]
