"""Tests for dashboard expiry reports."""

import logging
import pandas as pd
import pytest
from datetime import date

from src.analysis import (
    EXPIRY_TABLE_COLUMNS,
    InventoryAlerts,
    LicensePortfolioStats,
    build_expiry_table,
    summarize_inventory_alerts,
    summarize_license_portfolio,
)
from src.models import LifecycleRecord
from src.status import ThresholdTable
from src.status.constants import LICENSE_EXPIRY_THRESHOLDS


class TestBuildExpiryTable:
    """Tests for build_expiry_table."""

    def test_rows_sorted_soonest_first(self, today, license_records, license_thresholds):
        df = build_expiry_table(license_records, today, license_thresholds)

        assert list(df.columns) == EXPIRY_TABLE_COLUMNS
        assert list(df['record_id']) == ["L3", "L2", "L1", "L4"]
        assert list(df['band']) == ["expired", "critical", "healthy", "no_expiry"]
        assert df['days_remaining'].iloc[0] == -31
        assert df['days_remaining'].iloc[1] == 4
        assert pd.isna(df['days_remaining'].iloc[3])

    def test_ties_broken_by_record_id(self, today, inventory_thresholds):
        records = [
            LifecycleRecord(record_id="B", reference_date=date(2025, 1, 1), expiry_date=date(2025, 7, 1)),
            LifecycleRecord(record_id="A", reference_date=date(2025, 1, 1), expiry_date=date(2025, 7, 1)),
        ]
        df = build_expiry_table(records, today, inventory_thresholds)
        assert list(df['record_id']) == ["A", "B"]

    def test_empty(self, today, inventory_thresholds):
        df = build_expiry_table([], today, inventory_thresholds)
        assert df.empty
        assert list(df.columns) == EXPIRY_TABLE_COLUMNS

    def test_raw_rows(self, today, inventory_thresholds):
        df = build_expiry_table(
            [{"id": 7, "batch_number": "B-7", "manufacturing_date": "2025-05-01",
              "expiry_date": "2025-06-21"}],
            today,
            inventory_thresholds,
        )
        assert df['record_id'].iloc[0] == "7"
        assert df['name'].iloc[0] == "B-7"
        assert df['band'].iloc[0] == "expiring_soon"

    def test_inverted_dates_logged(self, today, inventory_thresholds, caplog):
        records = [
            LifecycleRecord(record_id="X", reference_date=date(2025, 6, 1), expiry_date=date(2025, 5, 1)),
        ]
        with caplog.at_level(logging.WARNING, logger="src.analysis.expiry_report"):
            df = build_expiry_table(records, today, inventory_thresholds)

        assert df['band'].iloc[0] == "expired"
        assert "Record X expires" in caplog.text

    def test_threshold_table_and_preset(self, today, license_records, license_thresholds):
        """A ThresholdTable or a preset gives the same table as raw pairs."""
        expected = build_expiry_table(license_records, today, license_thresholds)
        table = ThresholdTable(license_thresholds)

        pd.testing.assert_frame_equal(build_expiry_table(license_records, today, table), expected)
        pd.testing.assert_frame_equal(
            build_expiry_table(license_records, today, LICENSE_EXPIRY_THRESHOLDS), expected
        )


class TestSummarizeInventoryAlerts:
    """Tests for summarize_inventory_alerts."""

    def test_counts(self, today, stock_positions):
        alerts = summarize_inventory_alerts(stock_positions, today)
        assert alerts == InventoryAlerts(
            expired=1,
            expiring_15d=1,
            expiring_30d=1,
            low_stock=1,
            reorder_needed=2,
        )

    def test_empty(self, today):
        assert summarize_inventory_alerts([], today).to_dict() == {
            'expired': 0,
            'expiring_15d': 0,
            'expiring_30d': 0,
            'low_stock': 0,
            'reorder_needed': 0,
        }

    def test_alert_bucket_edges(self, today):
        positions = [
            {"record": {"id": "d14", "purchase_date": "2025-01-01", "expiry_date": "2025-06-15"},
             "stock_level": 10},
            {"record": {"id": "d15", "purchase_date": "2025-01-01", "expiry_date": "2025-06-16"},
             "stock_level": 10},
            {"record": {"id": "d30", "purchase_date": "2025-01-01", "expiry_date": "2025-07-01"},
             "stock_level": 10},
        ]
        alerts = summarize_inventory_alerts(positions, today)
        assert alerts.expiring_15d == 1
        assert alerts.expiring_30d == 1


class TestSummarizeLicensePortfolio:
    """Tests for summarize_license_portfolio."""

    def test_portfolio(self, today, license_records, license_thresholds):
        stats = summarize_license_portfolio(license_records, today, license_thresholds)
        assert stats == LicensePortfolioStats(
            total=4,
            active=2,
            expiring_soon=1,
            expired=1,
            compliance_score=75,
        )

    def test_empty_portfolio_scores_full(self, today, license_thresholds):
        stats = summarize_license_portfolio([], today, license_thresholds)
        assert stats.total == 0
        assert stats.compliance_score == 100

    def test_all_expired(self, today, license_thresholds):
        records = [
            LifecycleRecord(record_id="L1", reference_date=date(2024, 1, 1), expiry_date=date(2025, 1, 1)),
        ]
        stats = summarize_license_portfolio(records, today, license_thresholds)
        assert stats.compliance_score == 0
        assert "score 0%" in str(stats)

    def test_threshold_table(self, today, license_records, license_thresholds):
        table = ThresholdTable(reversed(license_thresholds))
        assert summarize_license_portfolio(license_records, today, table) == \
            summarize_license_portfolio(license_records, today, license_thresholds)

    def test_invalid_thresholds(self, today):
        with pytest.raises(ValueError):
            summarize_license_portfolio([], today, [(30, "a"), (30, "b")])
