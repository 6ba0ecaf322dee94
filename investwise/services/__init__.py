"""Services package."""

from investwise.services.storage import (
    AuditStorageInterface,
    CorruptDataError,
    InMemoryAuditStorage,
    InMemoryStorage,
    JsonFileStorage,
    JsonLinesAuditStorage,
    PortfolioStorageInterface,
    StorageError,
)

__all__ = [
    "AuditStorageInterface",
    "CorruptDataError",
    "InMemoryAuditStorage",
    "InMemoryStorage",
    "JsonFileStorage",
    "JsonLinesAuditStorage",
    "PortfolioStorageInterface",
    "StorageError",
]
