"""Tests for the persistence layer: habits, snapshots and completion toggles."""

from datetime import date, timedelta

import pytest
from sqlalchemy import select
from sqlalchemy.orm import Session

from productivepro.crud import (
    archive_habit,
    build_schedule,
    build_snapshot,
    create_habit,
    delete_habit,
    get_completion_keys,
    list_habits,
    reset_challenge,
    seed_demo_habits_if_empty,
    set_completion,
    toggle_completion,
    update_habit,
)
from productivepro.engine import Challenge, Everyday, SpecificWeekdays, Weekday
from productivepro.models import HabitCompletion

from tests.helpers import TODAY


class TestBuildSchedule:
    def test_everyday_default(self) -> None:
        assert build_schedule("") == Everyday()

    def test_weekdays(self) -> None:
        schedule = build_schedule("weekdays", ["mon", "Fri"])
        assert schedule == SpecificWeekdays(frozenset({Weekday.MON, Weekday.FRI}))

    def test_challenge(self) -> None:
        assert build_schedule("challenge", challenge_days=30) == Challenge(30)

    @pytest.mark.parametrize(
        ("kind", "days", "duration"),
        [("monthly", [], 0), ("weekdays", ["mon", "xyz"], 0), ("challenge", [], 0)],
    )
    def test_invalid(self, kind: str, days: list[str], duration: int) -> None:
        with pytest.raises(ValueError):
            build_schedule(kind, days, duration)


class TestHabitCrud:
    def test_create_and_snapshot(self, db_session: Session) -> None:
        habit = create_habit(db_session, "Read", schedule_type="weekdays", selected_days=["fri", "mon"])
        assert habit.selected_days_csv == "mon,fri"
        snapshot = build_snapshot(db_session, habit)
        assert snapshot.schedule == SpecificWeekdays.of(["mon", "fri"])
        assert snapshot.completed_dates == frozenset()
        assert snapshot.challenge_duration_days == 0

    def test_weekday_habit_may_have_no_days(self, db_session: Session) -> None:
        habit = create_habit(db_session, "Someday", schedule_type="weekdays", selected_days=[])
        assert build_snapshot(db_session, habit).schedule == SpecificWeekdays()

    def test_update_schedule_keeps_other_fields(self, db_session: Session) -> None:
        habit = create_habit(db_session, "Run")
        habit = update_habit(db_session, habit, {"schedule_type": "challenge", "challenge_days": 14, "title": "Run more"})
        assert habit.title == "Run more"
        assert habit.schedule_type == "challenge"
        assert habit.challenge_days == 14

    def test_update_days_only(self, db_session: Session) -> None:
        habit = create_habit(db_session, "Gym", schedule_type="weekdays", selected_days=["mon"])
        habit = update_habit(db_session, habit, {"selected_days": ["tue", "thu"]})
        assert habit.selected_days_csv == "tue,thu"

    def test_archive_hides_from_active_list(self, db_session: Session) -> None:
        keep = create_habit(db_session, "Keep")
        gone = create_habit(db_session, "Gone")
        archive_habit(db_session, gone)
        assert [h.id for h in list_habits(db_session)] == [keep.id]
        assert len(list_habits(db_session, active_only=False)) == 2

    def test_delete_removes_completions(self, db_session: Session) -> None:
        habit = create_habit(db_session, "Stretch")
        toggle_completion(db_session, habit, TODAY, TODAY)
        delete_habit(db_session, habit)
        assert db_session.scalars(select(HabitCompletion)).all() == []

    def test_seed_only_when_empty(self, db_session: Session) -> None:
        seed_demo_habits_if_empty(db_session)
        seeded = len(list_habits(db_session))
        seed_demo_habits_if_empty(db_session)
        assert seeded == 3
        assert len(list_habits(db_session)) == seeded


class TestCompletionToggles:
    def test_toggle_on_and_off(self, db_session: Session) -> None:
        habit = create_habit(db_session, "Walk")
        first = toggle_completion(db_session, habit, TODAY, TODAY)
        assert first.completed is True
        assert get_completion_keys(db_session, habit) == ["2024-03-10"]

        second = toggle_completion(db_session, habit, TODAY, TODAY)
        assert second.completed is False
        assert get_completion_keys(db_session, habit) == []

    def test_set_completion_is_idempotent(self, db_session: Session) -> None:
        habit = create_habit(db_session, "Walk")
        set_completion(db_session, habit, "2024-03-09", True, TODAY)
        set_completion(db_session, habit, "2024-03-09", True, TODAY)
        assert get_completion_keys(db_session, habit) == ["2024-03-09"]

    def test_best_streak_is_monotonic(self, db_session: Session) -> None:
        habit = create_habit(db_session, "Meditate")
        for offset in range(3):
            set_completion(db_session, habit, TODAY - timedelta(days=offset), True, TODAY)
        assert habit.best_streak == 3

        set_completion(db_session, habit, TODAY - timedelta(days=1), False, TODAY)
        assert habit.best_streak == 3
        assert build_snapshot(db_session, habit).best_streak_recorded == 3

    def test_backfilled_run_raises_best_streak(self, db_session: Session) -> None:
        habit = create_habit(db_session, "Journal")
        for day in (date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 4), date(2024, 1, 5)):
            set_completion(db_session, habit, day, True, TODAY)
        assert habit.best_streak == 2

        result = set_completion(db_session, habit, date(2024, 1, 3), True, TODAY)
        assert habit.best_streak == 5
        assert result.snapshot.best_streak_recorded == 5

    def test_future_completions_do_not_raise_best_streak(self, db_session: Session) -> None:
        """Ticking the rest of the week ahead of time must not be recorded as a streak."""
        monday = date(2024, 3, 4)
        habit = create_habit(db_session, "Stretch")
        for offset in range(7):
            set_completion(db_session, habit, monday + timedelta(days=offset), True, monday)
        assert habit.best_streak == 1

        for offset in range(1, 7):
            set_completion(db_session, habit, monday + timedelta(days=offset), False, monday)
        assert habit.best_streak == 1
        assert get_completion_keys(db_session, habit) == ["2024-03-04"]

    def test_far_future_toggle_does_not_fail(self, db_session: Session) -> None:
        habit = create_habit(db_session, "Plan")
        result = set_completion(db_session, habit, date.max, True, TODAY)
        assert result.completed is True
        assert habit.best_streak == 0

    def test_challenge_credit_is_bounded(self, db_session: Session) -> None:
        habit = create_habit(db_session, "No sugar", schedule_type="challenge", challenge_days=2)
        for offset in range(3):
            set_completion(db_session, habit, TODAY - timedelta(days=offset), True, TODAY)
        assert habit.challenge_completed == 2

        for offset in range(3):
            set_completion(db_session, habit, TODAY - timedelta(days=offset), False, TODAY)
        assert habit.challenge_completed == 0

    def test_reset_challenge_keeps_history(self, db_session: Session) -> None:
        habit = create_habit(db_session, "Cold shower", schedule_type="challenge", challenge_days=30)
        toggle_completion(db_session, habit, TODAY, TODAY)
        reset_challenge(db_session, habit)
        assert habit.challenge_completed == 0
        assert get_completion_keys(db_session, habit) == ["2024-03-10"]

    def test_reset_non_challenge_raises(self, db_session: Session) -> None:
        habit = create_habit(db_session, "Walk")
        with pytest.raises(ValueError):
            reset_challenge(db_session, habit)
