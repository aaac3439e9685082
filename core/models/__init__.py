# Path: core/models/__init__.py
# Purpose: Package initializer for domain model definitions.
# Layer: core/models.
# Details: Exposes dataclasses used across parsing, indexing, search, and vault layers.

from .domain import (
    DeliverySession,
    FileFormat,
    FilterOptions,
    SearchFilter,
    SermonIndexSnapshot,
    SermonRecord,
    Stats,
    VaultData,
)

__all__ = [
    "DeliverySession",
    "FileFormat",
    "FilterOptions",
    "SearchFilter",
    "SermonIndexSnapshot",
    "SermonRecord",
    "Stats",
    "VaultData",
]
