"""Data models for wincfg.

This module exports the core data structures used throughout the application.
"""

from wincfg.models.category import ItemCategory, RunMode
from wincfg.models.operation import (
    ItemResult,
    ItemStatus,
    Operation,
    OperationOutcome,
    OperationPair,
)
from wincfg.models.registry import RegistryItemSpec, RegistryRow, RegistryValueType

__all__ = [
    "ItemCategory",
    "ItemResult",
    "ItemStatus",
    "Operation",
    "OperationOutcome",
    "OperationPair",
    "RegistryItemSpec",
    "RegistryRow",
    "RegistryValueType",
    "RunMode",
]
