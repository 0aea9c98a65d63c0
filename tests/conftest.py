"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date, datetime

from src.models import (
    ChecklistItem,
    LedgerEntry,
    LedgerStatus,
    LifecycleRecord,
    StockPosition,
)


@pytest.fixture
def today():
    """Fixture for the classification day."""
    return date(2025, 6, 1)


@pytest.fixture
def inventory_thresholds():
    """Fixture for ingredient/batch thresholds (15/30/60)."""
    return [(15, "critical"), (30, "expiring_soon"), (60, "warning")]


@pytest.fixture
def license_thresholds():
    """Fixture for license thresholds (7/30/90)."""
    return [(7, "critical"), (30, "expiring_soon"), (90, "renewal_due")]


@pytest.fixture
def flour_ledger():
    """Fixture for a flour stock ledger: two lots (one expired) and a usage event."""
    return [
        LedgerEntry(
            quantity=40.0,
            unit="kg",
            cost_per_unit=2.5,
            status=LedgerStatus.ACTIVE,
            timestamp=datetime(2025, 5, 20, 9, 0),
            original_quantity=50.0,
        ),
        LedgerEntry(
            quantity=8.0,
            unit="kg",
            cost_per_unit=2.0,
            status=LedgerStatus.EXPIRED,
            timestamp=datetime(2025, 3, 1, 9, 0),
            original_quantity=20.0,
        ),
        LedgerEntry(
            quantity=25.0,
            unit="kg",
            cost_per_unit=3.0,
            status=LedgerStatus.USED,
            timestamp=datetime(2025, 4, 10, 14, 30),
        ),
    ]


@pytest.fixture
def license_records():
    """Fixture for a small license portfolio."""
    return [
        LifecycleRecord(record_id="L1", name="Food Business License",
                        reference_date=date(2024, 6, 1), expiry_date=date(2026, 6, 1)),
        LifecycleRecord(record_id="L2", name="Fire Safety Certificate",
                        reference_date=date(2024, 6, 5), expiry_date=date(2025, 6, 5)),
        LifecycleRecord(record_id="L3", name="Trade License",
                        reference_date=date(2024, 5, 1), expiry_date=date(2025, 5, 1)),
        LifecycleRecord(record_id="L4", name="GST Registration",
                        reference_date=date(2020, 1, 1), expiry_date=None),
    ]


@pytest.fixture
def stock_positions():
    """Fixture for ingredient stock positions."""
    return [
        # Expired lot
        StockPosition(
            record=LifecycleRecord(record_id="I1", reference_date=date(2025, 1, 1),
                                   expiry_date=date(2025, 5, 20)),
            stock_level=5.0,
            reorder_level=10.0,
        ),
        # Expires in 10 days
        StockPosition(
            record=LifecycleRecord(record_id="I2", reference_date=date(2025, 5, 1),
                                   expiry_date=date(2025, 6, 11)),
            stock_level=30.0,
            reorder_level=10.0,
        ),
        # Expires in 20 days
        StockPosition(
            record=LifecycleRecord(record_id="I3", reference_date=date(2025, 5, 1),
                                   expiry_date=date(2025, 6, 21)),
            stock_level=30.0,
            reorder_level=10.0,
        ),
        # Healthy but below reorder level
        StockPosition(
            record=LifecycleRecord(record_id="I4", reference_date=date(2025, 5, 1),
                                   expiry_date=date(2025, 12, 1)),
            stock_level=4.0,
            reorder_level=10.0,
        ),
        # Healthy, no reorder level configured
        StockPosition(
            record=LifecycleRecord(record_id="I5", reference_date=date(2025, 5, 1)),
            stock_level=100.0,
            reorder_level=0.0,
        ),
    ]


@pytest.fixture
def checklist_items():
    """Fixture for a partially completed compliance checklist."""
    return [
        ChecklistItem(title="Pest control certificate on file", completed=True,
                      verified_at=datetime(2025, 5, 2, 10, 0)),
        ChecklistItem(title="Water quality test", completed=True),
        ChecklistItem(title="Staff medical records", completed=False),
    ]
