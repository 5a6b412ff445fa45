"""Habit tracker services: calendar, store, statistics, persistence, workflow."""

from __future__ import annotations

from habitcal.domains.habits.services.calendar_service import (
    current_month,
    day_key,
    enumerate_days,
    is_future_day,
    next_month,
    parse_day_key,
    previous_month,
)
from habitcal.domains.habits.services.persistence_service import (
    load_catalog,
    load_records,
    load_state,
    save_catalog,
    save_records,
    save_state,
)
from habitcal.domains.habits.services.stats_service import (
    StreakTier,
    count_done_days,
    count_done_days_in_month,
    current_streak,
    habit_stats,
    streak_tier,
)
from habitcal.domains.habits.services.store_service import (
    canonical_records,
    create_habit,
    delete_habit,
    select_habit,
    toggle_day,
)

__all__ = [
    "StreakTier",
    "canonical_records",
    "count_done_days",
    "count_done_days_in_month",
    "create_habit",
    "current_month",
    "current_streak",
    "day_key",
    "delete_habit",
    "enumerate_days",
    "habit_stats",
    "is_future_day",
    "load_catalog",
    "load_records",
    "load_state",
    "next_month",
    "parse_day_key",
    "previous_month",
    "save_catalog",
    "save_records",
    "save_state",
    "select_habit",
    "streak_tier",
    "toggle_day",
]
