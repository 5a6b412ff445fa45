"""Tracker persistence: JSON values in the ``habits_tracker_kv`` table.

Loaders return ``None`` for missing or corrupt values and never raise; the
state loader substitutes defaults for anything it cannot use. Records are
salvaged entry by entry rather than dropped whole.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any, List, Optional

from pydantic import TypeAdapter, ValidationError

from habitcal.domains.habits.models.tracker_models import TrackerSetting
from habitcal.domains.habits.models.tracker_state import (
    DEFAULT_HABIT,
    MonthView,
    Records,
    TrackerState,
)
from habitcal.domains.habits.schemas.tracker_schemas import (
    CatalogPayload,
    DayFlag,
    DayFlagsPayload,
    RecordsPayload,
    SelectedPayload,
    ViewedMonthPayload,
)
from habitcal.domains.habits.services.calendar_service import (
    clamp_month,
    current_month,
    normalize_day_key,
)
from habitcal.domains.habits.services.store_service import canonical_records
from habitcal.extensions import db

logger = logging.getLogger(__name__)

CATALOG_KEY = "habitList"
RECORDS_KEY = "doneDays"
SELECTED_KEY = "selectedHabit"
VIEWED_MONTH_KEY = "viewedMonth"


def _read(key: str, adapter: TypeAdapter) -> Optional[Any]:
    row = db.session.get(TrackerSetting, key)
    if row is None:
        return None
    try:
        return adapter.validate_python(json.loads(row.value))
    except (ValueError, ValidationError) as exc:
        logger.warning("Discarding corrupt tracker value %r: %s", key, exc)
        return None


def _write(key: str, value: Any) -> None:
    payload = json.dumps(value, ensure_ascii=False)
    row = db.session.get(TrackerSetting, key)
    if row is None:
        db.session.add(TrackerSetting(key=key, value=payload))
    else:
        row.value = payload


def load_catalog() -> Optional[List[str]]:
    catalog = _read(CATALOG_KEY, CatalogPayload)
    if catalog is None:
        return None
    # Drop blanks and repeats so the catalog invariants hold after load.
    cleaned: List[str] = []
    for name in catalog:
        if name.strip() and name not in cleaned:
            cleaned.append(name)
    if not cleaned:
        logger.warning("Stored habit catalog is empty; using defaults")
        return None
    return cleaned


def save_catalog(catalog: List[str]) -> None:
    _write(CATALOG_KEY, list(catalog))
    db.session.commit()


def load_records() -> Optional[Records]:
    """Stored records with day keys normalized to ISO dates.

    Legacy browser keys ("Mon Jan 01 2024") are rewritten; a key that does
    not parse is kept verbatim so nothing is silently lost. When a legacy and
    an ISO key name the same day, a ``True`` flag wins.

    Only a value that is not a JSON object of habits is discarded as a whole.
    A habit whose record is not an object, or a flag that is not a boolean, is
    skipped with a warning and the rest is kept. The result is in
    ``canonical_records`` shape.
    """
    raw = _read(RECORDS_KEY, RecordsPayload)
    if raw is None:
        return None
    records: Records = {}
    for habit, record in raw.items():
        try:
            flags = DayFlagsPayload.validate_python(record)
        except ValidationError:
            logger.warning("Skipping malformed record for habit %r", habit)
            continue
        normalized = {}
        for key, done in flags.items():
            try:
                done = DayFlag.validate_python(done)
            except ValidationError:
                logger.warning("Skipping non-boolean flag %r for %r on %r", done, habit, key)
                continue
            iso = normalize_day_key(key)
            normalized[iso] = normalized.get(iso, False) or done
        records[habit] = normalized
    return canonical_records(records)


def save_records(records: Records) -> None:
    _write(RECORDS_KEY, records)
    db.session.commit()


def load_selected() -> Optional[str]:
    return _read(SELECTED_KEY, SelectedPayload)


def load_viewed_month() -> Optional[MonthView]:
    view = _read(VIEWED_MONTH_KEY, ViewedMonthPayload)
    if view is None:
        return None
    year, month = view
    if not 0 <= month <= 11 or year < 1:
        logger.warning("Discarding out-of-range viewed month %r", view)
        return None
    return year, month


def load_state(today: Optional[date] = None, default: str = DEFAULT_HABIT) -> TrackerState:
    """Build the tracker state from storage, falling back to defaults."""
    catalog = load_catalog() or [default]
    records = load_records() or {}
    selected = load_selected()
    if selected not in catalog:
        selected = catalog[0]
    view = load_viewed_month()
    view = clamp_month(view, today) if view else current_month(today)
    return TrackerState(
        catalog=tuple(catalog),
        records=records,
        selected_habit=selected,
        viewed_month=view,
    )


def save_state(state: TrackerState) -> None:
    """Write every part of ``state`` in one transaction."""
    _write(CATALOG_KEY, list(state.catalog))
    _write(RECORDS_KEY, state.records)
    _write(SELECTED_KEY, state.selected_habit)
    _write(VIEWED_MONTH_KEY, list(state.viewed_month))
    db.session.commit()
