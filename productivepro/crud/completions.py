import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from productivepro.crud.snapshots import build_snapshot
from productivepro.engine import HabitSnapshot, best_streak, longest_streak, to_key
from productivepro.engine.calendar_keys import DateLike
from productivepro.models import Habit, HabitCompletion

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToggleResult:
    date: str
    completed: bool
    snapshot: HabitSnapshot


def _find_completion(db: Session, habit: Habit, date_key: str) -> Optional[HabitCompletion]:
    return db.scalar(
        select(HabitCompletion).where(
            and_(HabitCompletion.habit_id == habit.id, HabitCompletion.completed_on == date_key)
        )
    )


def _credit_challenge(habit: Habit, delta: int) -> None:
    if habit.schedule_type != "challenge" or habit.challenge_days <= 0:
        return
    habit.challenge_completed = max(0, min(habit.challenge_days, (habit.challenge_completed or 0) + delta))


def _record_best_streak(db: Session, habit: Habit, today: DateLike) -> HabitSnapshot:
    snapshot = build_snapshot(db, habit)
    candidate = max(best_streak(snapshot, today), longest_streak(snapshot, today))
    if candidate > (habit.best_streak or 0):
        logger.info("Habit %s best streak %s -> %s", habit.id, habit.best_streak, candidate)
        habit.best_streak = candidate
        snapshot = build_snapshot(db, habit)
    return snapshot


def set_completion(db: Session, habit: Habit, day: DateLike, done: bool, today: DateLike) -> ToggleResult:
    """Make ``day`` completed or not; a no-op when it already is."""
    date_key = to_key(day)
    existing = _find_completion(db, habit, date_key)

    if done and existing is None:
        db.add(HabitCompletion(habit_id=habit.id, completed_on=date_key))
        _credit_challenge(habit, 1)
        logger.info("Habit %s completed on %s", habit.id, date_key)
    elif not done and existing is not None:
        db.delete(existing)
        _credit_challenge(habit, -1)
        logger.info("Habit %s completion on %s removed", habit.id, date_key)

    db.flush()
    snapshot = _record_best_streak(db, habit, today)
    db.add(habit)
    db.commit()
    db.refresh(habit)
    return ToggleResult(date=date_key, completed=done, snapshot=snapshot)


def toggle_completion(db: Session, habit: Habit, day: DateLike, today: DateLike) -> ToggleResult:
    date_key = to_key(day)
    done = _find_completion(db, habit, date_key) is None
    return set_completion(db, habit, date_key, done, today)


def reset_challenge(db: Session, habit: Habit) -> Habit:
    """Restart challenge bookkeeping; completion history is kept."""
    if habit.schedule_type != "challenge":
        raise ValueError("habit is not a challenge")
    habit.challenge_completed = 0
    db.add(habit)
    db.commit()
    db.refresh(habit)
    logger.info("Habit %s challenge reset", habit.id)
    return habit

