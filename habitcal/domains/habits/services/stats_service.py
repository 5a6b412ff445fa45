"""Derived statistics over a single habit's completion record."""

from __future__ import annotations

from datetime import date, timedelta
from enum import Enum
from typing import Optional

from habitcal.domains.habits.models.tracker_state import CompletionRecord
from habitcal.domains.habits.services import calendar_service
from habitcal.domains.habits.services.calendar_service import parse_day_key

STREAK_MAX_DAYS = 3650


class StreakTier(str, Enum):
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def count_done_days(record: Optional[CompletionRecord]) -> int:
    return sum(1 for done in (record or {}).values() if done is True)


def count_done_days_in_month(record: Optional[CompletionRecord], month: int, year: int) -> int:
    """Done days whose key falls in ``month`` (zero-based) of ``year``.

    Keys that do not parse as dates are skipped.
    """
    total = 0
    for key, done in (record or {}).items():
        if done is not True:
            continue
        parsed = parse_day_key(key)
        if parsed and parsed.year == year and parsed.month == month + 1:
            total += 1
    return total


def current_streak(
    record: Optional[CompletionRecord],
    today: Optional[date] = None,
    max_days: int = STREAK_MAX_DAYS,
) -> int:
    """Consecutive done days ending at today, inclusive.

    Keys are read the same way as in ``count_done_days_in_month``: ISO and
    legacy keys both count, unparseable keys never do. The walk stops at the
    first day not marked done, or after ``max_days`` days, in which case
    ``max_days`` is returned.
    """
    done_days = {parse_day_key(key) for key, done in (record or {}).items() if done is True}
    cursor = today or calendar_service.local_today()
    streak = 0
    while streak < max_days and cursor in done_days:
        streak += 1
        if cursor == date.min:
            break
        cursor = cursor - timedelta(days=1)
    return streak


def streak_tier(streak: int) -> StreakTier:
    if streak >= 15:
        return StreakTier.HIGH
    if streak >= 5:
        return StreakTier.MEDIUM
    if streak >= 1:
        return StreakTier.LOW
    return StreakTier.NONE


def habit_stats(
    record: Optional[CompletionRecord],
    month: int,
    year: int,
    today: Optional[date] = None,
    max_days: int = STREAK_MAX_DAYS,
) -> dict:
    streak = current_streak(record, today, max_days)
    return {
        "total_done": count_done_days(record),
        "month_done": count_done_days_in_month(record, month, year),
        "current_streak": streak,
        "tier": streak_tier(streak).value,
    }
