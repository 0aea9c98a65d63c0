"""Ledger aggregation.

Summarises stock lots, purchases and usage records into the figures shown on
the ingredient analytics and purchase history views:
- Totals (quantity and cost)
- Unit cost statistics (average, min, max, current)
- Waste from expired lots
- Utilization (consumed vs acquired)
"""

import math
from dataclasses import dataclass
from typing import Any, Iterable, List

from src.models.records import LedgerEntry, LedgerStatus, coerce_records


@dataclass(frozen=True)
class LedgerSummary:
    """
    Summary statistics over a set of ledger entries.

    Attributes:
        total_quantity: Sum of quantity over all entries
        total_cost: Sum of quantity x cost_per_unit over all entries
        average_unit_cost: Mean cost_per_unit over priced entries (cost > 0)
        min_unit_cost: Lowest cost_per_unit over priced entries
        max_unit_cost: Highest cost_per_unit over priced entries
        current_unit_cost: cost_per_unit of the most recent priced entry
        waste_quantity: Quantity on expired entries
        waste_cost: Cost of quantity on expired entries
        utilization_rate: Consumed / acquired x 100 (0 when nothing acquired)
        total_acquired: Quantity acquired as stock lots
        total_consumed: Quantity on usage events and fully used lots
        purchase_spend: Sum of acquired quantity x cost_per_unit over stock lots
        entry_count: Number of entries summarised
    """
    total_quantity: float = 0.0
    total_cost: float = 0.0
    average_unit_cost: float = 0.0
    min_unit_cost: float = 0.0
    max_unit_cost: float = 0.0
    current_unit_cost: float = 0.0
    waste_quantity: float = 0.0
    waste_cost: float = 0.0
    utilization_rate: float = 0.0
    total_acquired: float = 0.0
    total_consumed: float = 0.0
    purchase_spend: float = 0.0
    entry_count: int = 0

    @property
    def waste_percentage(self) -> float:
        """Expired quantity as a percentage of acquired quantity."""
        if self.total_acquired == 0:
            return 0.0
        return (self.waste_quantity / self.total_acquired) * 100

    @property
    def price_vs_average(self) -> float:
        """Current unit cost relative to the average, in percent (positive = dearer)."""
        if self.average_unit_cost <= 0:
            return 0.0
        return ((self.current_unit_cost - self.average_unit_cost) / self.average_unit_cost) * 100

    def __str__(self) -> str:
        return (
            f"Ledger: {self.total_quantity:,.2f} units, ${self.total_cost:,.2f} "
            f"(waste {self.waste_quantity:,.2f} units / ${self.waste_cost:,.2f}, "
            f"utilization {self.utilization_rate:.1f}%)"
        )


def _latest_priced_cost(ledger: List[LedgerEntry]) -> float:
    priced = [e for e in ledger if e.cost_per_unit is not None and e.cost_per_unit > 0]
    if not priced:
        return 0.0

    latest = max(priced, key=lambda e: (e.timestamp is not None, e.timestamp, e.cost_per_unit))
    return latest.cost_per_unit


def aggregate_ledger(entries: Iterable[Any]) -> LedgerSummary:
    """
    Aggregate ledger entries into a LedgerSummary.

    Sums use ``math.fsum`` so the result does not depend on input order.
    Zero-cost entries are excluded from the unit cost statistics.

    Utilization counts stock lots as acquired (``original_quantity``, or
    ``quantity`` when absent) and usage events plus fully used lots as
    consumed. Usage events are never acquired.

    Args:
        entries: LedgerEntry instances or raw rows

    Returns:
        LedgerSummary (all zeros for an empty input)
    """
    ledger = coerce_records(LedgerEntry, entries)
    if not ledger:
        return LedgerSummary()

    expired = [e for e in ledger if e.status == LedgerStatus.EXPIRED]
    prices = [e.cost_per_unit for e in ledger if e.cost_per_unit is not None and e.cost_per_unit > 0]

    total_acquired = math.fsum(e.acquired_quantity for e in ledger)
    total_consumed = math.fsum(e.consumed_quantity for e in ledger)

    if total_acquired == 0:
        utilization_rate = 0.0
    else:
        utilization_rate = (total_consumed / total_acquired) * 100

    return LedgerSummary(
        total_quantity=math.fsum(e.quantity for e in ledger),
        total_cost=math.fsum(e.line_cost for e in ledger),
        average_unit_cost=math.fsum(prices) / len(prices) if prices else 0.0,
        min_unit_cost=min(prices) if prices else 0.0,
        max_unit_cost=max(prices) if prices else 0.0,
        current_unit_cost=_latest_priced_cost(ledger),
        waste_quantity=math.fsum(e.quantity for e in expired),
        waste_cost=math.fsum(e.line_cost for e in expired),
        utilization_rate=utilization_rate,
        total_acquired=total_acquired,
        total_consumed=total_consumed,
        purchase_spend=math.fsum(e.purchase_cost for e in ledger),
        entry_count=len(ledger),
    )


def current_unit_cost(entries: Iterable[Any]) -> float:
    """
    Cost per unit of the most recent priced entry.

    Entries without a timestamp count as the oldest. Ties on timestamp go to
    the higher cost. Returns 0.0 when no entry has a positive cost.
    """
    return _latest_priced_cost(coerce_records(LedgerEntry, entries))
