"""
Status engine for batches, ingredient lots, licenses and documents.

This module classifies expiry urgency with caller-supplied threshold tables,
selects stock badges, scores compliance checklists and aggregates stock
ledgers. Every function is pure and works on a snapshot passed in by the
caller.
"""

from .bands import (
    ExpiryBand,
    ThresholdTable,
    classify_expiry,
    days_until,
    renewal_due_date,
)
from .badges import BadgeKind, select_stock_badge, stock_percentage
from .checklist import ChecklistScore, score_checklist
from .ledger import LedgerSummary, aggregate_ledger, current_unit_cost

__all__ = [
    'ExpiryBand',
    'ThresholdTable',
    'classify_expiry',
    'days_until',
    'renewal_due_date',
    'BadgeKind',
    'select_stock_badge',
    'stock_percentage',
    'ChecklistScore',
    'score_checklist',
    'LedgerSummary',
    'aggregate_ledger',
    'current_unit_cost',
]
