"""Tracker workflow: apply user intents to a ``TrackerState``.

Each intent takes the current state and returns a new one (or the same object
when the intent is ignored). Persistence happens in ``commit`` at the request
boundary, never inside the intents.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from habitcal.domains.habits.models.tracker_state import DEFAULT_HABIT, TrackerState
from habitcal.domains.habits.services import calendar_service as cal
from habitcal.domains.habits.services import persistence_service, stats_service, store_service

logger = logging.getLogger(__name__)


def add_habit(state: TrackerState, name: str) -> TrackerState:
    catalog, records, selected = store_service.create_habit(state.catalog, state.records, name)
    if selected is None:
        return state
    return replace(state, catalog=tuple(catalog), records=records, selected_habit=selected)


def remove_habit(state: TrackerState, name: str, default: str = DEFAULT_HABIT) -> TrackerState:
    if name not in state.catalog and name not in state.records:
        logger.debug("Ignoring delete of unknown habit %r", name)
        return state
    catalog, records, selected = store_service.delete_habit(
        state.catalog, state.records, name, default=default
    )
    return replace(state, catalog=tuple(catalog), records=records, selected_habit=selected)


def toggle(state: TrackerState, day: cal.DayLike, today: Optional[date] = None) -> TrackerState:
    """Toggle ``day`` for the selected habit."""
    records = store_service.toggle_day(state.records, state.selected_habit, day, today)
    if records is state.records:
        return state
    return replace(state, records=records)


def select(state: TrackerState, name: str) -> TrackerState:
    selected = store_service.select_habit(state.catalog, state.selected_habit, name)
    if selected == state.selected_habit:
        return state
    return replace(state, selected_habit=selected)


def show_previous_month(state: TrackerState) -> TrackerState:
    view = cal.previous_month(state.viewed_month)
    if view == state.viewed_month:
        logger.debug("Ignoring navigation before the first representable month")
        return state
    return replace(state, viewed_month=view)


def show_next_month(state: TrackerState, today: Optional[date] = None) -> TrackerState:
    view = cal.next_month(state.viewed_month, today)
    if view == state.viewed_month:
        logger.debug("Ignoring navigation past the current month")
        return state
    return replace(state, viewed_month=view)


def commit(previous: TrackerState, current: TrackerState) -> bool:
    """Persist ``current`` when it differs from ``previous``; report whether it did."""
    if current is previous or current == previous:
        return False
    persistence_service.save_state(current)
    return True


def tracker_view(
    state: TrackerState,
    today: Optional[date] = None,
    max_days: int = stats_service.STREAK_MAX_DAYS,
) -> dict:
    """Everything a presentation layer needs to draw the tracker."""
    today = today or cal.local_today()
    year, month = state.viewed_month
    record = state.selected_record
    days = [
        {
            "key": cal.day_key(day),
            "day": day.day,
            # Sunday-first grid column, 0 = Sunday
            "weekday": (day.weekday() + 1) % 7,
            "done": record.get(cal.day_key(day)) is True,
            "is_future": cal.is_future_day(day, today),
        }
        for day in cal.enumerate_days(month, year)
    ]
    habits = [
        {
            "name": name,
            "month_done": stats_service.count_done_days_in_month(
                state.records.get(name), month, year
            ),
        }
        for name in state.catalog
    ]
    return {
        "habits": habits,
        "selected_habit": state.selected_habit,
        "month": {
            "year": year,
            "month": month,
            "can_go_next": cal.next_month(state.viewed_month, today) != state.viewed_month,
        },
        "days": days,
        "stats": stats_service.habit_stats(record, month, year, today, max_days),
        "today": today,
    }
