"""Analysis module for the compliance dashboard.

This module applies the status engine over snapshots of records, including:
- Per-record expiry tables
- Ingredient inventory alert counters
- License portfolio compliance statistics
"""

from .expiry_report import (
    EXPIRY_TABLE_COLUMNS,
    InventoryAlerts,
    LicensePortfolioStats,
    build_expiry_table,
    summarize_inventory_alerts,
    summarize_license_portfolio,
)

__all__ = [
    "EXPIRY_TABLE_COLUMNS",
    "InventoryAlerts",
    "LicensePortfolioStats",
    "build_expiry_table",
    "summarize_inventory_alerts",
    "summarize_license_portfolio",
]
