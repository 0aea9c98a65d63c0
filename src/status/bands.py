"""
Expiry banding for date-bounded records.

This module classifies how urgent a record's expiry is relative to a given
day, using a caller-supplied threshold table instead of hard-coded cut-offs.
Batches, ingredient lots, licenses and documents all share this logic; only
their threshold tables differ (see ``constants``).
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Tuple, Union

from .constants import EXPIRED, HEALTHY, NO_EXPIRY, RESERVED_LABELS

DateLike = Union[date, datetime]


def _as_date(value: DateLike) -> date:
    """Drop the time-of-day so differences count calendar days."""
    if isinstance(value, datetime):
        return value.date()
    return value


def days_until(today: DateLike, expiry_date: Optional[DateLike]) -> Optional[int]:
    """
    Whole calendar days from ``today`` until ``expiry_date``.

    Negative when the expiry date has passed, 0 on the expiry day itself.

    Args:
        today: Current day or instant
        expiry_date: Expiry day or instant (None if the record never expires)

    Returns:
        Day difference, or None when there is no expiry date
    """
    if expiry_date is None:
        return None
    return (_as_date(expiry_date) - _as_date(today)).days


def renewal_due_date(expiry_date: Optional[DateLike], reminder_days: int) -> Optional[date]:
    """Day on which a renewal reminder falls due (expiry minus reminder window)."""
    if expiry_date is None:
        return None
    return _as_date(expiry_date) - timedelta(days=reminder_days)


@dataclass(frozen=True)
class ExpiryBand:
    """
    Result of classifying a record's expiry.

    Attributes:
        label: Band label (caller label, or one of no_expiry/expired/healthy)
        days_remaining: Whole days until expiry (None when there is no expiry)
        max_days: Threshold that matched (None for reserved bands)
    """
    label: str
    days_remaining: Optional[int] = None
    max_days: Optional[int] = None

    @property
    def has_expiry(self) -> bool:
        return self.label != NO_EXPIRY

    @property
    def is_expired(self) -> bool:
        return self.label == EXPIRED

    @property
    def is_healthy(self) -> bool:
        return self.label == HEALTHY

    def is_within(self, days: int) -> bool:
        """Check if the record expires within ``days`` days (not yet expired)."""
        if self.days_remaining is None:
            return False
        return 0 <= self.days_remaining <= days

    def __str__(self) -> str:
        if self.days_remaining is None:
            return self.label
        return f"{self.label} ({self.days_remaining}d)"


NO_EXPIRY_BAND = ExpiryBand(label=NO_EXPIRY)


class ThresholdTable:
    """
    Ordered ``(max_days, label)`` pairs defining expiry bands.

    Pairs are sorted ascending by day count on construction, so the first
    threshold a record fits under is also the tightest one.

    Example:
        table = ThresholdTable([(30, "soon"), (15, "critical")])
        table.match(20)  # -> (30, "soon")
    """

    def __init__(self, thresholds: Iterable[Tuple[int, str]]):
        pairs = sorted((int(days), str(label)) for days, label in thresholds)

        seen_days = set()
        for days, label in pairs:
            if days < 0:
                raise ValueError(f"Threshold day count cannot be negative: {days}")
            if days in seen_days:
                raise ValueError(f"Duplicate threshold day count: {days}")
            if label in RESERVED_LABELS:
                raise ValueError(f"Threshold label '{label}' is reserved")
            seen_days.add(days)

        self._pairs: List[Tuple[int, str]] = pairs

    @classmethod
    def coerce(cls, thresholds: Union["ThresholdTable", Iterable[Tuple[int, str]]]) -> "ThresholdTable":
        """Return ``thresholds`` as a table, building one from raw pairs if needed."""
        if isinstance(thresholds, cls):
            return thresholds
        return cls(thresholds)

    @property
    def labels(self) -> List[str]:
        return [label for _, label in self._pairs]

    def match(self, days_remaining: int) -> Optional[Tuple[int, str]]:
        """Find the first threshold with ``days_remaining <= max_days``."""
        for max_days, label in self._pairs:
            if days_remaining <= max_days:
                return max_days, label
        return None

    def __iter__(self):
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __repr__(self) -> str:
        return f"ThresholdTable({self._pairs!r})"


def classify_expiry(
    today: DateLike,
    expiry_date: Optional[DateLike],
    thresholds: Union[ThresholdTable, Iterable[Tuple[int, str]]],
) -> ExpiryBand:
    """
    Classify a record's expiry into a band.

    Order of checks:
    1. No expiry date -> no_expiry
    2. Expiry before today -> expired
    3. First threshold (ascending) with days_remaining <= max_days -> its label
    4. Otherwise -> healthy

    Args:
        today: Current day or instant
        expiry_date: Expiry day or instant, or None
        thresholds: Threshold table or raw ``(max_days, label)`` pairs

    Returns:
        The matching ExpiryBand
    """
    table = ThresholdTable.coerce(thresholds)

    remaining = days_until(today, expiry_date)
    if remaining is None:
        return NO_EXPIRY_BAND

    if remaining < 0:
        return ExpiryBand(label=EXPIRED, days_remaining=remaining)

    matched = table.match(remaining)
    if matched is None:
        return ExpiryBand(label=HEALTHY, days_remaining=remaining)

    max_days, label = matched
    return ExpiryBand(label=label, days_remaining=remaining, max_days=max_days)
