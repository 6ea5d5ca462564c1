from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import HTTPException
from sqlalchemy.orm import Session

from productivepro.config import settings
from productivepro.crud import build_snapshot, get_habit
from productivepro.engine import (
    ChallengeProgress,
    HabitSnapshot,
    ScoreWindow,
    best_streak,
    challenge_progress,
    current_streak,
    is_scheduled,
    monthly_consistency,
    parse_key,
    productivity_score,
    success_rate,
    to_key,
    weekly_consistency,
)
from productivepro.models import Habit
from productivepro.schemas import ChallengeProgressOut, HabitMetricsOut, ProductivityScoresOut


def _app_timezone() -> ZoneInfo:
    try:
        return ZoneInfo(settings.APP_TIMEZONE)
    except ZoneInfoNotFoundError:
        return ZoneInfo("UTC")


def today_local() -> date:
    return datetime.now(_app_timezone()).date()


def resolve_day(raw: Optional[str]) -> date:
    if not raw:
        return today_local()
    try:
        return parse_key(raw)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"invalid date: {raw}") from exc


def get_habit_or_404(db: Session, habit_id: int) -> Habit:
    habit = get_habit(db, habit_id)
    if not habit:
        raise HTTPException(status_code=404, detail="Habit not found")
    return habit


def _challenge_out(progress: ChallengeProgress) -> ChallengeProgressOut:
    return ChallengeProgressOut(completed=progress.completed, remaining=progress.remaining, percent=progress.percent)


def metrics_for(habit: Habit, snapshot: HabitSnapshot, today: date) -> HabitMetricsOut:
    challenge = None
    if snapshot.challenge_duration_days > 0:
        challenge = _challenge_out(challenge_progress(snapshot))

    return HabitMetricsOut(
        habit_id=habit.id,
        today=to_key(today),
        scheduled_today=is_scheduled(snapshot.schedule, today),
        completed_today=snapshot.is_completed(today),
        current_streak=current_streak(snapshot, today),
        best_streak=best_streak(snapshot, today),
        success_rate=success_rate(snapshot, today),
        weekly_consistency=weekly_consistency(snapshot, today),
        monthly_consistency=monthly_consistency(snapshot, today),
        productivity=ProductivityScoresOut(
            week=productivity_score(snapshot, today, ScoreWindow.WEEK),
            month=productivity_score(snapshot, today, ScoreWindow.MONTH),
            year=productivity_score(snapshot, today, ScoreWindow.YEAR),
        ),
        challenge=challenge,
    )


def habit_metrics(db: Session, habit: Habit, today: date) -> HabitMetricsOut:
    return metrics_for(habit, build_snapshot(db, habit), today)
