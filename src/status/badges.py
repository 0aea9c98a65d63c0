"""Stock badge selection for batches and ingredient lots."""

from enum import Enum

from .bands import ExpiryBand
from .constants import DEFAULT_SOON_WINDOW_DAYS


class BadgeKind(str, Enum):
    """Stock status badge shown next to a batch or ingredient."""
    RECALLED = "recalled"
    EXPIRED = "expired"
    OUT_OF_STOCK = "out_of_stock"
    EXPIRING_SOON = "expiring_soon"
    LOW_STOCK = "low_stock"
    IN_STOCK = "in_stock"

    def __str__(self) -> str:
        return self.value


def select_stock_badge(
    stock_level: float,
    reorder_level: float,
    band: ExpiryBand,
    soon_window_days: int = DEFAULT_SOON_WINDOW_DAYS,
    recalled: bool = False,
) -> BadgeKind:
    """
    Pick the badge for a stocked item.

    Precedence (first match wins):
    1. RECALLED (only when ``recalled`` is set)
    2. EXPIRED (band)
    3. OUT_OF_STOCK (stock_level == 0)
    4. EXPIRING_SOON (band within ``soon_window_days``)
    5. LOW_STOCK (stock_level < reorder_level)
    6. IN_STOCK

    Expiry conditions always outrank stock-level conditions, except that an
    empty item is reported as out of stock before it is reported as expiring.

    Args:
        stock_level: Units currently in stock
        reorder_level: Units below which the item should be reordered
        band: Expiry band of the item
        soon_window_days: Days remaining at or below which the item is expiring soon
        recalled: Whether the batch has been recalled

    Returns:
        The selected BadgeKind
    """
    if recalled:
        return BadgeKind.RECALLED
    if band.is_expired:
        return BadgeKind.EXPIRED
    if stock_level == 0:
        return BadgeKind.OUT_OF_STOCK
    if band.is_within(soon_window_days):
        return BadgeKind.EXPIRING_SOON
    if stock_level < reorder_level:
        return BadgeKind.LOW_STOCK
    return BadgeKind.IN_STOCK


def stock_percentage(stock_level: float, capacity: float) -> float:
    """
    Stock as a percentage of capacity (batch size or reorder level), capped at 100.

    Returns 0.0 when capacity is not positive.
    """
    if capacity <= 0:
        return 0.0
    return min((stock_level / capacity) * 100, 100.0)
