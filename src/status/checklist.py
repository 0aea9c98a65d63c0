"""Compliance checklist scoring."""

import math
from dataclasses import dataclass
from typing import Any, Iterable

from src.models.records import ChecklistItem, coerce_records


@dataclass(frozen=True)
class ChecklistScore:
    """Completion of a compliance checklist."""
    percent: int = 0
    completed_count: int = 0
    total_count: int = 0

    @property
    def pending_count(self) -> int:
        return self.total_count - self.completed_count

    @property
    def is_complete(self) -> bool:
        return self.total_count > 0 and self.completed_count == self.total_count

    def __str__(self) -> str:
        return f"{self.completed_count}/{self.total_count} ({self.percent}%)"


def score_checklist(items: Iterable[Any]) -> ChecklistScore:
    """
    Score a checklist as the rounded percentage of completed items.

    Percentages round half up. An empty checklist scores 0%.

    Args:
        items: ChecklistItem instances or raw rows with a ``completed`` flag

    Returns:
        ChecklistScore
    """
    checklist = coerce_records(ChecklistItem, items)
    total_count = len(checklist)
    completed_count = sum(1 for item in checklist if item.completed)

    if total_count == 0:
        return ChecklistScore()

    percent = int(math.floor(completed_count / total_count * 100 + 0.5))
    return ChecklistScore(
        percent=percent,
        completed_count=completed_count,
        total_count=total_count,
    )
