"""Calendar helpers: month enumeration, day keys, future-day rule, navigation.

Months are zero-based (0 = January) throughout the tracker, matching the
``viewed_month`` tuples stored in ``TrackerState``.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import List, Optional, Union

from habitcal.domains.habits.models.tracker_state import MonthView

# Keys written by the original browser tracker, e.g. "Mon Jan 01 2024".
LEGACY_DAY_KEY_FORMAT = "%a %b %d %Y"

DayLike = Union[date, str]


def local_today() -> date:
    """Today's date from the local system clock."""
    return date.today()


def enumerate_days(month: int, year: int) -> List[date]:
    """Every date of ``month`` (zero-based) in ``year``, ascending.

    Walks forward from day 1 while the month component is unchanged, so month
    lengths and leap years fall out of the date arithmetic.
    """
    days: List[date] = []
    current = date(year, month + 1, 1)
    while current.month == month + 1:
        days.append(current)
        current = current + timedelta(days=1)
    return days


def day_key(day: date) -> str:
    return day.isoformat()


def parse_day_key(key: str) -> Optional[date]:
    """Parse an ISO or legacy day key; ``None`` when it is not a date."""
    if not isinstance(key, str):
        return None
    raw = key.strip()
    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass
    try:
        return datetime.strptime(raw, LEGACY_DAY_KEY_FORMAT).date()
    except ValueError:
        return None


def normalize_day_key(key: str) -> str:
    """Canonical ISO form of ``key``; unparseable keys come back untouched."""
    parsed = parse_day_key(key)
    return day_key(parsed) if parsed else key


def coerce_day(day: DayLike) -> Optional[date]:
    if isinstance(day, datetime):
        return day.date()
    if isinstance(day, date):
        return day
    return parse_day_key(day)


def is_future_day(day: date, today: Optional[date] = None) -> bool:
    """True when ``day`` is a calendar day after today (time of day ignored)."""
    today = today or local_today()
    if isinstance(day, datetime):
        day = day.date()
    return day > today


def current_month(today: Optional[date] = None) -> MonthView:
    today = today or local_today()
    return today.year, today.month - 1


# Earliest month a date can fall in, zero-based like every MonthView.
FIRST_MONTH: MonthView = (date.min.year, date.min.month - 1)


def previous_month(view: MonthView) -> MonthView:
    """The month before ``view``, or ``view`` itself at ``FIRST_MONTH``."""
    year, month = view
    if (year, month) <= FIRST_MONTH:
        return view
    if month == 0:
        return year - 1, 11
    return year, month - 1


def next_month(view: MonthView, today: Optional[date] = None) -> MonthView:
    """The month after ``view``, or ``view`` itself when that would pass this month."""
    year, month = view
    candidate = (year + 1, 0) if month == 11 else (year, month + 1)
    if candidate > current_month(today):
        return view
    return candidate


def clamp_month(view: MonthView, today: Optional[date] = None) -> MonthView:
    now = current_month(today)
    return now if view > now else view
