"""Habit store: catalog and completion-record operations.

Every function here is pure. Inputs are never mutated; callers get new
containers back, and unaffected per-habit records are shared with the input
so reference comparison can detect what changed.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Sequence, Tuple

from habitcal.domains.habits.models.tracker_state import DEFAULT_HABIT, Records
from habitcal.domains.habits.services.calendar_service import (
    DayLike,
    coerce_day,
    day_key,
    is_future_day,
)

logger = logging.getLogger(__name__)

StoreResult = Tuple[List[str], Records, Optional[str]]


def create_habit(catalog: Sequence[str], records: Records, name: str) -> StoreResult:
    """Append ``name`` (trimmed) to the catalog and select it.

    Empty and duplicate names are ignored: the inputs come back unchanged and
    the selection slot is ``None`` so the caller keeps its current selection.
    No record entry is created for the new habit.
    """
    name_norm = (name or "").strip()
    if not name_norm:
        logger.debug("Ignoring habit with empty name")
        return list(catalog), records, None
    if name_norm in catalog:
        logger.debug("Ignoring duplicate habit %r", name_norm)
        return list(catalog), records, None
    return [*catalog, name_norm], records, name_norm


def delete_habit(
    catalog: Sequence[str],
    records: Records,
    name: str,
    *,
    default: str = DEFAULT_HABIT,
) -> StoreResult:
    """Remove ``name`` and its record; the caller has already confirmed.

    An emptied catalog is replaced with ``[default]``. The new selection is the
    first remaining habit.
    """
    remaining = [habit for habit in catalog if habit != name]
    if not remaining:
        remaining = [default]
    if name in records:
        records = {habit: record for habit, record in records.items() if habit != name}
    return remaining, records, remaining[0]


def canonical_records(records: Records) -> Records:
    """Only ``True`` flags, and no empty per-habit records.

    Absent and ``False`` mean the same thing, so dropping ``False`` loses
    nothing. In this shape ``toggle_day`` applied twice to the same day gives
    back an equal mapping.
    """
    canonical: Records = {}
    for habit, record in records.items():
        done = {key: True for key, flag in record.items() if flag is True}
        if done:
            canonical[habit] = done
    return canonical


def toggle_day(
    records: Records,
    habit: str,
    day: DayLike,
    today: Optional[date] = None,
) -> Records:
    """Flip the done flag for ``(habit, day)``.

    Future days and unparseable keys are refused and the input mapping is
    returned as-is. Switching a day off drops its key (and the habit's record
    once it is empty), so for records in ``canonical_records`` shape a double
    toggle restores the original mapping.
    """
    parsed = coerce_day(day)
    if parsed is None:
        logger.debug("Ignoring toggle for unparseable day %r", day)
        return records
    if is_future_day(parsed, today):
        logger.debug("Ignoring toggle for future day %s", parsed)
        return records

    key = day_key(parsed)
    record = dict(records.get(habit, {}))
    if record.get(key):
        record.pop(key)
    else:
        record[key] = True

    updated = dict(records)
    if record:
        updated[habit] = record
    else:
        updated.pop(habit, None)
    return updated


def select_habit(catalog: Sequence[str], current: str, name: str) -> str:
    """``name`` if it is a tracked habit, else the current selection."""
    if name in catalog:
        return name
    logger.debug("Ignoring selection of unknown habit %r", name)
    return current
