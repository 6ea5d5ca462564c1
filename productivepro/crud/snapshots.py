from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from productivepro.engine import Challenge, Everyday, HabitSnapshot, ScheduleKind, ScheduleType, SpecificWeekdays, to_key
from productivepro.engine.calendar_keys import parse_weekday
from productivepro.models import Habit, HabitCompletion


def _split_days(raw: Optional[str]) -> list[str]:
    return [x.strip() for x in (raw or "").split(",") if x.strip()]


def build_schedule(schedule_type: str, selected_days: Iterable[str] = (), challenge_days: int = 0) -> ScheduleType:
    """Turn stored/raw schedule fields into a schedule variant.

    Raises ``ValueError`` for an unknown kind, an unknown weekday tag or a
    challenge without a positive duration.
    """
    try:
        kind = ScheduleKind((schedule_type or "everyday").strip().lower())
    except ValueError as exc:
        raise ValueError(f"unknown schedule type: {schedule_type!r}") from exc

    if kind is ScheduleKind.WEEKDAYS:
        return SpecificWeekdays(frozenset(parse_weekday(d) for d in selected_days))
    if kind is ScheduleKind.CHALLENGE:
        if int(challenge_days or 0) <= 0:
            raise ValueError("challenge_days must be positive for a challenge habit")
        return Challenge(int(challenge_days))
    return Everyday()


def schedule_for(habit: Habit) -> ScheduleType:
    return build_schedule(habit.schedule_type, _split_days(habit.selected_days_csv), habit.challenge_days)


def selected_days_for(habit: Habit) -> list[str]:
    schedule = schedule_for(habit)
    if isinstance(schedule, SpecificWeekdays):
        return [d.value for d in schedule.ordered_days()]
    return []


def get_completion_keys(db: Session, habit: Habit) -> list[str]:
    return list(
        db.scalars(
            select(HabitCompletion.completed_on)
            .where(HabitCompletion.habit_id == habit.id)
            .order_by(HabitCompletion.completed_on.asc())
        )
    )


def build_snapshot(db: Session, habit: Habit) -> HabitSnapshot:
    schedule = schedule_for(habit)
    return HabitSnapshot(
        schedule=schedule,
        completed_dates=frozenset(get_completion_keys(db, habit)),
        challenge_duration_days=schedule.duration_days if isinstance(schedule, Challenge) else 0,
        challenge_completed_count=habit.challenge_completed or 0,
        best_streak_recorded=habit.best_streak or 0,
        created_on=to_key(habit.created_at) if habit.created_at else None,
    )
