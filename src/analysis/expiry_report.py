"""Expiry reports for the batch, ingredient and compliance views.

Applies the status engine over a snapshot of records and produces the
figures each view shows: a per-record expiry table, ingredient alert
counters, and license portfolio statistics.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date as Date
from typing import Any, Dict, Iterable, List, Tuple, Union

import pandas as pd

from src.models.records import LifecycleRecord, StockPosition, coerce_records
from src.status.badges import BadgeKind, select_stock_badge
from src.status.bands import ThresholdTable, classify_expiry
from src.status.constants import (
    CRITICAL_ALERT_DAYS,
    DEFAULT_SOON_WINDOW_DAYS,
    INVENTORY_EXPIRY_THRESHOLDS,
    SOON_ALERT_DAYS,
)

logger = logging.getLogger(__name__)

EXPIRY_TABLE_COLUMNS = [
    'record_id',
    'name',
    'reference_date',
    'expiry_date',
    'days_remaining',
    'band',
]


def _warn_inverted(records: List[LifecycleRecord]) -> None:
    for record in records:
        if record.has_inverted_dates:
            logger.warning(
                f"Record {record.record_id} expires ({record.expiry_date}) "
                f"before its reference date ({record.reference_date})"
            )


def build_expiry_table(
    records: Iterable[Any],
    today: Date,
    thresholds: Union[ThresholdTable, Iterable[Tuple[int, str]]],
) -> pd.DataFrame:
    """Build a per-record expiry table.

    Rows are sorted by days remaining (soonest first), records without an
    expiry date last, ties broken by record_id.

    Args:
        records: LifecycleRecord instances or raw rows
        today: Day to classify against
        thresholds: Threshold table or raw ``(max_days, label)`` pairs

    Returns:
        DataFrame with EXPIRY_TABLE_COLUMNS
    """
    table = ThresholdTable.coerce(thresholds)
    snapshot = coerce_records(LifecycleRecord, records)
    _warn_inverted(snapshot)
    logger.debug(f"Building expiry table for {len(snapshot)} records")

    rows: List[Dict] = []
    for record in snapshot:
        band = classify_expiry(today, record.expiry_date, table)
        rows.append({
            'record_id': record.record_id,
            'name': record.name,
            'reference_date': record.reference_date,
            'expiry_date': record.expiry_date,
            'days_remaining': band.days_remaining,
            'band': band.label,
        })

    rows.sort(key=lambda r: (
        r['days_remaining'] is None,
        r['days_remaining'] if r['days_remaining'] is not None else 0,
        r['record_id'],
    ))
    df = pd.DataFrame(rows, columns=EXPIRY_TABLE_COLUMNS)
    df['days_remaining'] = df['days_remaining'].astype('Int64')
    return df


@dataclass(frozen=True)
class InventoryAlerts:
    """Alert counters shown above the ingredient list."""
    expired: int = 0
    expiring_15d: int = 0
    expiring_30d: int = 0
    low_stock: int = 0
    reorder_needed: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            'expired': self.expired,
            'expiring_15d': self.expiring_15d,
            'expiring_30d': self.expiring_30d,
            'low_stock': self.low_stock,
            'reorder_needed': self.reorder_needed,
        }


def summarize_inventory_alerts(positions: Iterable[Any], today: Date) -> InventoryAlerts:
    """Count expiry and stock alerts over a snapshot of stock positions.

    - expired: earliest expiry before today
    - expiring_15d: 0 <= days remaining < 15
    - expiring_30d: 15 <= days remaining < 30
    - low_stock: positions whose stock badge is LOW_STOCK
    - reorder_needed: stock below a positive reorder level
    """
    snapshot = coerce_records(StockPosition, positions)
    _warn_inverted([p.record for p in snapshot])
    logger.debug(f"Summarizing inventory alerts for {len(snapshot)} positions")

    table = ThresholdTable(INVENTORY_EXPIRY_THRESHOLDS)
    expired = expiring_15d = expiring_30d = low_stock = reorder_needed = 0

    for position in snapshot:
        band = classify_expiry(today, position.record.expiry_date, table)
        days = band.days_remaining

        if band.is_expired:
            expired += 1
        elif days is not None and days < CRITICAL_ALERT_DAYS:
            expiring_15d += 1
        elif days is not None and days < SOON_ALERT_DAYS:
            expiring_30d += 1

        badge = select_stock_badge(
            position.stock_level,
            position.reorder_level,
            band,
            soon_window_days=DEFAULT_SOON_WINDOW_DAYS,
            recalled=position.recalled,
        )
        if badge == BadgeKind.LOW_STOCK:
            low_stock += 1

        if position.reorder_level > 0 and position.stock_level < position.reorder_level:
            reorder_needed += 1

    return InventoryAlerts(
        expired=expired,
        expiring_15d=expiring_15d,
        expiring_30d=expiring_30d,
        low_stock=low_stock,
        reorder_needed=reorder_needed,
    )


@dataclass(frozen=True)
class LicensePortfolioStats:
    """Headline statistics of the compliance page."""
    total: int = 0
    active: int = 0
    expiring_soon: int = 0
    expired: int = 0
    compliance_score: int = 100

    def __str__(self) -> str:
        return (
            f"Licenses: {self.total} total, {self.active} active, "
            f"{self.expiring_soon} expiring, {self.expired} expired "
            f"(score {self.compliance_score}%)"
        )


def summarize_license_portfolio(
    records: Iterable[Any],
    today: Date,
    thresholds: Union[ThresholdTable, Iterable[Tuple[int, str]]],
) -> LicensePortfolioStats:
    """Summarize license expiry across a portfolio.

    Active licenses are healthy or never expire; any caller band counts as
    expiring soon. The compliance score is the rounded share of licenses that
    are not expired, 100 for an empty portfolio.
    """
    table = ThresholdTable.coerce(thresholds)
    snapshot = coerce_records(LifecycleRecord, records)
    _warn_inverted(snapshot)
    logger.debug(f"Summarizing {len(snapshot)} licenses")

    active = expiring_soon = expired = 0
    for record in snapshot:
        band = classify_expiry(today, record.expiry_date, table)
        if band.is_expired:
            expired += 1
        elif band.is_healthy or not band.has_expiry:
            active += 1
        else:
            expiring_soon += 1

    total = len(snapshot)
    if total == 0:
        return LicensePortfolioStats()

    score = int(math.floor((active + expiring_soon) / total * 100 + 0.5))
    return LicensePortfolioStats(
        total=total,
        active=active,
        expiring_soon=expiring_soon,
        expired=expired,
        compliance_score=score,
    )
