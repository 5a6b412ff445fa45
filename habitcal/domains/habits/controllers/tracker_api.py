"""Habit tracker JSON API controllers (thin, schema-validated).

Every endpoint answers with the full tracker view so a client can redraw from
one response. Ignored intents (duplicate names, future days, navigating past
the current month) still return 200 with ``changed: false``.
"""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from habitcal.core.auth.csrf import issue_csrf_token
from habitcal.core.utils.decorators import csrf_protected
from habitcal.domains.habits.models.tracker_state import TrackerState
from habitcal.domains.habits.schemas.tracker_schemas import (
    DayToggle,
    HabitCreate,
    HabitDelete,
    HabitSelect,
    TrackerResponse,
)
from habitcal.domains.habits.services import calendar_service, persistence_service
from habitcal.domains.habits.services import tracker_service

tracker_api_bp = Blueprint("tracker_api", __name__)


def _load():
    today = calendar_service.local_today()
    state = persistence_service.load_state(today, default=current_app.config["HABITS_DEFAULT_NAME"])
    return state, today


def _render(state: TrackerState, today, changed=None):
    view = tracker_service.tracker_view(
        state, today, max_days=current_app.config["HABITS_STREAK_MAX_DAYS"]
    )
    resp = TrackerResponse(**view, changed=changed)
    return jsonify({"ok": True, "tracker": resp.model_dump(mode="json")})


def _apply(intent):
    """Run ``intent(state, today)``, persist any change and render the result."""
    state, today = _load()
    updated = intent(state, today)
    changed = tracker_service.commit(state, updated)
    return _render(updated, today, changed)


def _validation_error(exc: ValidationError):
    return jsonify({"ok": False, "error": "validation_error", "details": exc.errors(include_context=False)}), 400


@tracker_api_bp.get("")
def tracker():
    state, today = _load()
    return _render(state, today)


@tracker_api_bp.get("/csrf")
def csrf_token():
    return jsonify({"ok": True, "csrf_token": issue_csrf_token()})


@tracker_api_bp.post("")
@csrf_protected
def create_habit():
    try:
        data = HabitCreate.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        return _validation_error(exc)
    return _apply(lambda state, today: tracker_service.add_habit(state, data.name))


@tracker_api_bp.post("/select")
@csrf_protected
def select_habit():
    try:
        data = HabitSelect.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        return _validation_error(exc)
    return _apply(lambda state, today: tracker_service.select(state, data.name))


@tracker_api_bp.delete("/<path:name>")
@csrf_protected
def delete_habit(name: str):
    try:
        data = HabitDelete.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        return _validation_error(exc)
    if not data.confirm:
        return jsonify({"ok": False, "error": "confirmation_required"}), 400
    default = current_app.config["HABITS_DEFAULT_NAME"]
    return _apply(lambda state, today: tracker_service.remove_habit(state, name, default=default))


@tracker_api_bp.post("/toggle")
@csrf_protected
def toggle_day():
    try:
        data = DayToggle.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        return _validation_error(exc)
    return _apply(lambda state, today: tracker_service.toggle(state, data.day, today))


@tracker_api_bp.post("/month/previous")
@csrf_protected
def previous_month():
    return _apply(lambda state, today: tracker_service.show_previous_month(state))


@tracker_api_bp.post("/month/next")
@csrf_protected
def next_month():
    return _apply(tracker_service.show_next_month)
