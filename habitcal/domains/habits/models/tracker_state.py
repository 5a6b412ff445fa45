"""In-memory tracker aggregate (not persisted as a row)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

DEFAULT_HABIT = "Exercise"

# DayKey -> done flag. Absent and False both mean "not done".
CompletionRecord = Dict[str, bool]
Records = Dict[str, CompletionRecord]
# (year, zero-based month)
MonthView = Tuple[int, int]


@dataclass(frozen=True)
class TrackerState:
    """Aggregate root for one tracker session.

    Workflow operations take a state and return a new one; nothing mutates a
    state in place. ``selected_habit`` is always a member of ``catalog``.
    """

    catalog: Tuple[str, ...]
    records: Records
    selected_habit: str
    viewed_month: MonthView

    @property
    def selected_record(self) -> CompletionRecord:
        return self.records.get(self.selected_habit, {})
