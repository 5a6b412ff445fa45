"""Tests for the habit store: create, delete, toggle, select."""

import copy
from datetime import date, timedelta

import pytest

from habitcal.domains.habits.services.store_service import (
    canonical_records,
    create_habit,
    delete_habit,
    select_habit,
    toggle_day,
)

pytestmark = pytest.mark.unit

TODAY = date(2024, 3, 13)


# ============== create_habit ==============


class TestCreateHabit:
    def test_trims_appends_and_selects(self):
        catalog, records, selected = create_habit(["Exercise"], {}, "  Read  ")
        assert catalog == ["Exercise", "Read"]
        assert selected == "Read"
        assert records == {}

    def test_duplicate_is_noop(self):
        catalog, records, selected = create_habit(["Exercise", "Read"], {}, "Read")
        assert catalog == ["Exercise", "Read"]
        assert selected is None

    def test_duplicate_after_trimming_is_noop(self):
        catalog, _, selected = create_habit(["Read"], {}, " Read ")
        assert catalog == ["Read"]
        assert selected is None

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_empty_name_is_noop(self, name):
        catalog, records, selected = create_habit(["Exercise"], {"Exercise": {}}, name)
        assert catalog == ["Exercise"]
        assert records == {"Exercise": {}}
        assert selected is None

    def test_names_are_case_sensitive(self):
        catalog, _, selected = create_habit(["read"], {}, "Read")
        assert catalog == ["read", "Read"]
        assert selected == "Read"

    def test_does_not_create_record_or_mutate_input(self):
        catalog_in = ["Exercise"]
        records_in = {"Exercise": {"2024-03-01": True}}
        catalog, records, _ = create_habit(catalog_in, records_in, "Read")
        assert catalog_in == ["Exercise"]
        assert "Read" not in records
        assert records is records_in


# ============== delete_habit ==============


class TestDeleteHabit:
    def test_last_habit_falls_back_to_default(self):
        catalog, records, selected = delete_habit(["Read"], {"Read": {"2024-03-01": True}}, "Read")
        assert catalog == ["Exercise"]
        assert records == {}
        assert selected == "Exercise"

    def test_removes_record_key_entirely(self):
        records_in = {"Read": {"2024-03-01": False}, "Exercise": {"2024-03-02": True}}
        catalog, records, selected = delete_habit(["Exercise", "Read"], records_in, "Read")
        assert catalog == ["Exercise"]
        assert "Read" not in records
        assert records["Exercise"] is records_in["Exercise"]
        assert "Read" in records_in
        assert selected == "Exercise"

    def test_selects_first_remaining(self):
        catalog, _, selected = delete_habit(["Exercise", "Read", "Walk"], {}, "Exercise")
        assert catalog == ["Read", "Walk"]
        assert selected == "Read"

    def test_default_keeps_existing_record(self):
        records_in = {"Exercise": {"2024-03-01": True}, "Read": {}}
        catalog, records, selected = delete_habit(["Read"], records_in, "Read")
        assert catalog == ["Exercise"]
        assert records == {"Exercise": {"2024-03-01": True}}
        assert selected == "Exercise"

    def test_custom_default(self):
        catalog, _, selected = delete_habit(["Read"], {}, "Read", default="Walk")
        assert catalog == ["Walk"]
        assert selected == "Walk"


# ============== canonical_records ==============


class TestCanonicalRecords:
    def test_drops_false_flags_and_empty_records(self):
        original = {"Read": {"2024-03-01": True, "2024-03-02": False}, "Walk": {}, "Swim": {"2024-03-03": False}}
        snapshot = copy.deepcopy(original)
        assert canonical_records(original) == {"Read": {"2024-03-01": True}}
        assert original == snapshot

    @pytest.mark.parametrize(
        "records",
        [
            {"Read": {"2024-03-10": False}},
            {"Read": {}},
            {"Read": {"2024-03-09": True, "2024-03-10": False}, "Walk": {}},
        ],
    )
    def test_double_toggle_is_identity(self, records):
        canonical = canonical_records(records)
        once = toggle_day(canonical, "Read", "2024-03-10", TODAY)
        assert toggle_day(once, "Read", "2024-03-10", TODAY) == canonical


# ============== toggle_day ==============


class TestToggleDay:
    def test_marks_absent_day_done(self):
        records = toggle_day({}, "Read", date(2024, 3, 10), TODAY)
        assert records == {"Read": {"2024-03-10": True}}

    def test_marks_explicit_false_done(self):
        records = toggle_day({"Read": {"2024-03-10": False}}, "Read", "2024-03-10", TODAY)
        assert records == {"Read": {"2024-03-10": True}}

    def test_double_toggle_is_identity(self):
        original = {
            "Read": {"2024-03-01": True, "2024-03-02": True},
            "Exercise": {"2024-03-05": True},
        }
        snapshot = copy.deepcopy(original)
        for day in ("2024-03-02", "2024-03-09"):
            once = toggle_day(original, "Read", day, TODAY)
            twice = toggle_day(once, "Read", day, TODAY)
            assert twice == snapshot
        assert toggle_day(toggle_day({}, "Walk", TODAY, TODAY), "Walk", TODAY, TODAY) == {}

    def test_does_not_mutate_and_shares_other_records(self):
        original = {"Read": {"2024-03-01": True}, "Exercise": {"2024-03-05": True}}
        snapshot = copy.deepcopy(original)
        updated = toggle_day(original, "Read", "2024-03-02", TODAY)
        assert original == snapshot
        assert updated is not original
        assert updated["Read"] is not original["Read"]
        assert updated["Exercise"] is original["Exercise"]

    def test_today_can_be_toggled(self):
        assert toggle_day({}, "Read", TODAY, TODAY) == {"Read": {"2024-03-13": True}}

    def test_future_day_is_refused(self):
        original = {"Read": {"2024-03-01": True}}
        updated = toggle_day(original, "Read", TODAY + timedelta(days=1), TODAY)
        assert updated is original
        assert updated == {"Read": {"2024-03-01": True}}

    def test_legacy_key_is_stored_as_iso(self):
        records = toggle_day({}, "Read", "Mon Mar 11 2024", TODAY)
        assert records == {"Read": {"2024-03-11": True}}

    def test_unparseable_day_is_refused(self):
        original = {}
        assert toggle_day(original, "Read", "someday", TODAY) is original


# ============== select_habit ==============


class TestSelectHabit:
    def test_selects_known_habit(self):
        assert select_habit(["Exercise", "Read"], "Exercise", "Read") == "Read"

    def test_unknown_habit_keeps_current(self):
        assert select_habit(["Exercise"], "Exercise", "Nope") == "Exercise"
