from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from productivepro.api.common import resolve_day
from productivepro.api.deps import get_db
from productivepro.crud import build_snapshot, list_habits
from productivepro.engine import ScoreWindow, aggregate_productivity, current_streak, to_key
from productivepro.engine.insights import (
    DayTally,
    average_daily_completions,
    best_day,
    completion_message,
    completion_rate,
    consistency_series,
    daily_breakdown,
    streak_message,
)
from productivepro.schemas import DayTallyOut, InsightsSummaryOut, SeriesPointOut

router = APIRouter(prefix="/v1/insights", tags=["insights"])


def _tally_out(tally: DayTally) -> DayTallyOut:
    return DayTallyOut(date=tally.date, weekday=tally.weekday, completed=tally.completed, total=tally.total, rate=tally.rate)


@router.get("/summary", response_model=InsightsSummaryOut)
def insights_summary(
    window: str = "week",
    today: Optional[str] = None,
    series_days: int = 14,
    db: Session = Depends(get_db),
) -> InsightsSummaryOut:
    try:
        score_window = ScoreWindow(window)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail="window must be one of week, month, year") from exc
    series_days = max(1, min(series_days, 90))

    today_date = resolve_day(today)
    snapshots = [build_snapshot(db, h) for h in list_habits(db)]
    summary = aggregate_productivity(snapshots, today_date, score_window)
    rate = completion_rate(snapshots, today_date)
    max_streak = max((current_streak(s, today_date) for s in snapshots), default=0)
    top_day = best_day(snapshots, today_date)

    return InsightsSummaryOut(
        today=to_key(today_date),
        window=score_window.value,
        habit_count=summary.habit_count,
        productivity_score=summary.score,
        productivity_status=summary.status.value,
        completion_rate=rate,
        max_streak=max_streak,
        avg_daily=average_daily_completions(snapshots, today_date),
        best_day=_tally_out(top_day) if top_day else None,
        weekly=[_tally_out(t) for t in daily_breakdown(snapshots, today_date, 7)],
        consistency=[SeriesPointOut(**point) for point in consistency_series(snapshots, today_date, series_days)],
        completion_message=completion_message(rate, len(snapshots)),
        streak_message=streak_message(max_streak),
    )
