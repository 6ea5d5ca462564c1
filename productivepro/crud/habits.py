import logging
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from productivepro.crud.snapshots import build_schedule, schedule_for
from productivepro.engine import Challenge, SpecificWeekdays
from productivepro.models import Habit

logger = logging.getLogger(__name__)

DEMO_HABITS = [
    {"title": "Morning walk", "category": "Health", "schedule_type": "everyday"},
    {"title": "Read 20 pages", "category": "Education", "schedule_type": "weekdays", "selected_days": ["mon", "wed", "fri"]},
    {"title": "No sugar", "category": "Health", "schedule_type": "challenge", "challenge_days": 30},
]

EDITABLE_FIELDS = ("title", "category", "has_timer", "is_active")


def _apply_schedule(habit: Habit, schedule_type: str, selected_days: list[str], challenge_days: int) -> None:
    schedule = build_schedule(schedule_type, selected_days, challenge_days)
    habit.schedule_type = schedule.kind.value
    if isinstance(schedule, SpecificWeekdays):
        habit.selected_days_csv = ",".join(d.value for d in schedule.ordered_days())
    else:
        habit.selected_days_csv = ""
    if isinstance(schedule, Challenge):
        habit.challenge_days = schedule.duration_days
        habit.challenge_completed = min(habit.challenge_completed or 0, schedule.duration_days)
    else:
        habit.challenge_days = 0
        habit.challenge_completed = 0


def create_habit(
    db: Session,
    title: str,
    category: str = "Personal",
    schedule_type: str = "everyday",
    selected_days: Optional[list[str]] = None,
    challenge_days: int = 0,
    has_timer: bool = False,
) -> Habit:
    habit = Habit(title=title, category=category, has_timer=has_timer, challenge_completed=0, best_streak=0)
    _apply_schedule(habit, schedule_type, selected_days or [], challenge_days)
    db.add(habit)
    db.commit()
    db.refresh(habit)
    logger.info("Created habit %s (%s)", habit.id, habit.schedule_type)
    return habit


def get_habit(db: Session, habit_id: int) -> Optional[Habit]:
    return db.get(Habit, habit_id)


def list_habits(db: Session, active_only: bool = True) -> list[Habit]:
    query = select(Habit).order_by(Habit.created_at.asc(), Habit.id.asc())
    if active_only:
        query = query.where(Habit.is_active.is_(True))
    return list(db.scalars(query))


def update_habit(db: Session, habit: Habit, changes: dict[str, Any]) -> Habit:
    for key in EDITABLE_FIELDS:
        if key in changes and changes[key] is not None:
            setattr(habit, key, changes[key])

    if {"schedule_type", "selected_days", "challenge_days"} & changes.keys():
        current = schedule_for(habit)
        schedule_type = changes.get("schedule_type") or current.kind.value
        selected_days = changes.get("selected_days")
        if selected_days is None:
            selected_days = [d.value for d in current.ordered_days()] if isinstance(current, SpecificWeekdays) else []
        challenge_days = changes.get("challenge_days")
        if challenge_days is None:
            challenge_days = current.duration_days if isinstance(current, Challenge) else 0
        _apply_schedule(habit, schedule_type, selected_days, challenge_days)

    db.add(habit)
    db.commit()
    db.refresh(habit)
    return habit


def archive_habit(db: Session, habit: Habit) -> Habit:
    habit.is_active = False
    db.add(habit)
    db.commit()
    db.refresh(habit)
    logger.info("Archived habit %s", habit.id)
    return habit


def delete_habit(db: Session, habit: Habit) -> None:
    habit_id = habit.id
    db.delete(habit)
    db.commit()
    logger.info("Deleted habit %s", habit_id)


def seed_demo_habits_if_empty(db: Session) -> None:
    existing = db.scalar(select(Habit.id).limit(1))
    if existing:
        return

    for item in DEMO_HABITS:
        create_habit(db, **item)
