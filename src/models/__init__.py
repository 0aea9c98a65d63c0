"""Record models consumed by the status engine."""

from .records import (
    ChecklistItem,
    LedgerEntry,
    LedgerStatus,
    LifecycleRecord,
    StockPosition,
    coerce_records,
)

__all__ = [
    "ChecklistItem",
    "LedgerEntry",
    "LedgerStatus",
    "LifecycleRecord",
    "StockPosition",
    "coerce_records",
]
