"""Centralized constants for expiry banding and stock badges.

Threshold presets used by the dashboard views. Each preset is a list of
``(max_days, label)`` pairs; callers pass them to ``ThresholdTable`` or
directly to ``classify_expiry``.
"""

# ============================================================================
# RESERVED BAND LABELS
# ============================================================================

#: Record carries no expiry date
NO_EXPIRY = "no_expiry"

#: Expiry date is before today
EXPIRED = "expired"

#: Expiry date is further away than every configured threshold
HEALTHY = "healthy"

RESERVED_LABELS = frozenset({NO_EXPIRY, EXPIRED, HEALTHY})


# ============================================================================
# THRESHOLD PRESETS (days remaining)
# ============================================================================

#: Ingredient lots and production batches
INVENTORY_EXPIRY_THRESHOLDS = [
    (15, "critical"),
    (30, "expiring_soon"),
    (60, "warning"),
]

#: Licenses and permits (renewal countdown)
LICENSE_EXPIRY_THRESHOLDS = [
    (7, "critical"),
    (30, "expiring_soon"),
    (90, "renewal_due"),
]

#: Supplier certificates and compliance documents
DOCUMENT_EXPIRY_THRESHOLDS = [
    (30, "expiring_soon"),
]


# ============================================================================
# STOCK BADGE CONSTANTS
# ============================================================================

#: Days remaining at or below which a stocked item is flagged as expiring soon
DEFAULT_SOON_WINDOW_DAYS = 30

#: Alert buckets on the ingredient list (half-open day ranges)
CRITICAL_ALERT_DAYS = 15
SOON_ALERT_DAYS = 30
