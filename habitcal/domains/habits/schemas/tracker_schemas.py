"""Tracker DTOs and persisted-payload schemas."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr, TypeAdapter

# Persisted JSON values (habitList / doneDays / selectedHabit / viewedMonth)
CatalogPayload = TypeAdapter(List[StrictStr])
# Records are checked one habit and one flag at a time so a bad entry only
# costs that entry.
RecordsPayload = TypeAdapter(Dict[StrictStr, Any])
DayFlagsPayload = TypeAdapter(Dict[StrictStr, Any])
DayFlag = TypeAdapter(StrictBool)
SelectedPayload = TypeAdapter(StrictStr)
ViewedMonthPayload = TypeAdapter(Tuple[StrictInt, StrictInt])


class HabitCreate(BaseModel):
    name: str = Field(max_length=255)


class HabitSelect(BaseModel):
    name: str = Field(max_length=255)


class HabitDelete(BaseModel):
    confirm: bool = False


class DayToggle(BaseModel):
    day: date


class CalendarDayResponse(BaseModel):
    key: str
    day: int
    weekday: int
    done: bool
    is_future: bool


class HabitOptionResponse(BaseModel):
    name: str
    month_done: int


class HabitStatsResponse(BaseModel):
    total_done: int
    month_done: int
    current_streak: int
    tier: str


class MonthResponse(BaseModel):
    year: int
    # zero-based, 0 = January
    month: int
    can_go_next: bool


class TrackerResponse(BaseModel):
    habits: List[HabitOptionResponse]
    selected_habit: str
    month: MonthResponse
    days: List[CalendarDayResponse]
    stats: HabitStatsResponse
    today: date
    changed: Optional[bool] = None
