"""Habits domain models."""

from habitcal.domains.habits.models.tracker_models import TrackerSetting
from habitcal.domains.habits.models.tracker_state import (
    DEFAULT_HABIT,
    CompletionRecord,
    MonthView,
    Records,
    TrackerState,
)

__all__ = [
    "DEFAULT_HABIT",
    "CompletionRecord",
    "MonthView",
    "Records",
    "TrackerSetting",
    "TrackerState",
]
