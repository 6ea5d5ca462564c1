from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from productivepro.api.common import get_habit_or_404, habit_metrics, metrics_for, resolve_day
from productivepro.api.deps import get_db
from productivepro.crud import (
    archive_habit,
    build_snapshot,
    create_habit,
    delete_habit,
    get_completion_keys,
    list_habits,
    reset_challenge,
    schedule_for,
    selected_days_for,
    set_completion,
    toggle_completion,
    update_habit,
)
from productivepro.engine import (
    calendar_month_consistency,
    calendar_week_consistency,
    calendar_year_consistency,
    to_key,
    window_consistency,
)
from productivepro.engine.calendar_keys import month_bounds, week_bounds, year_bounds
from productivepro.engine.consistency import window_counts
from productivepro.engine.insights import week_strip
from productivepro.engine.schedule import schedule_label
from productivepro.models import Habit
from productivepro.schemas import (
    ConsistencyOut,
    HabitIn,
    HabitMetricsOut,
    HabitOut,
    HabitUpdateIn,
    ToggleIn,
    ToggleOut,
    WeekDayOut,
)

router = APIRouter(prefix="/v1/habits", tags=["habits"])

PERIOD_KINDS = ("week", "month", "year")


def _habit_out(db: Session, habit: Habit) -> HabitOut:
    return HabitOut(
        id=habit.id,
        title=habit.title,
        category=habit.category,
        schedule_type=habit.schedule_type,
        schedule_label=schedule_label(schedule_for(habit)),
        selected_days=selected_days_for(habit),
        challenge_days=habit.challenge_days,
        challenge_completed=habit.challenge_completed,
        best_streak=habit.best_streak,
        has_timer=habit.has_timer,
        is_active=habit.is_active,
        created_at=habit.created_at,
        completed_dates=get_completion_keys(db, habit),
    )


@router.post("", response_model=HabitOut)
def habit_create(payload: HabitIn, db: Session = Depends(get_db)) -> HabitOut:
    try:
        habit = create_habit(
            db,
            title=payload.title.strip(),
            category=payload.category.strip() or "Personal",
            schedule_type=payload.schedule_type,
            selected_days=payload.selected_days,
            challenge_days=payload.challenge_days,
            has_timer=payload.has_timer,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _habit_out(db, habit)


@router.get("", response_model=List[HabitOut])
def habit_list(include_archived: bool = False, db: Session = Depends(get_db)) -> List[HabitOut]:
    return [_habit_out(db, h) for h in list_habits(db, active_only=not include_archived)]


@router.get("/{habit_id}", response_model=HabitOut)
def habit_detail(habit_id: int, db: Session = Depends(get_db)) -> HabitOut:
    return _habit_out(db, get_habit_or_404(db, habit_id))


@router.patch("/{habit_id}", response_model=HabitOut)
def habit_update(habit_id: int, payload: HabitUpdateIn, db: Session = Depends(get_db)) -> HabitOut:
    habit = get_habit_or_404(db, habit_id)
    try:
        habit = update_habit(db, habit, payload.model_dump(exclude_unset=True))
    except ValueError as exc:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _habit_out(db, habit)


@router.delete("/{habit_id}")
def habit_delete(habit_id: int, hard: bool = False, db: Session = Depends(get_db)) -> Dict[str, Any]:
    habit = get_habit_or_404(db, habit_id)
    if hard:
        delete_habit(db, habit)
    else:
        archive_habit(db, habit)
    return {"ok": True, "id": habit_id, "deleted": hard}


@router.post("/{habit_id}/toggle", response_model=ToggleOut)
def habit_toggle(
    habit_id: int,
    payload: ToggleIn,
    today: Optional[str] = None,
    db: Session = Depends(get_db),
) -> ToggleOut:
    habit = get_habit_or_404(db, habit_id)
    today_date = resolve_day(today)
    day = payload.date or today_date

    if payload.done is None:
        result = toggle_completion(db, habit, day, today_date)
    else:
        result = set_completion(db, habit, day, payload.done, today_date)

    return ToggleOut(
        habit_id=habit.id,
        date=result.date,
        completed=result.completed,
        metrics=metrics_for(habit, result.snapshot, today_date),
    )


@router.post("/{habit_id}/challenge/reset", response_model=HabitOut)
def habit_challenge_reset(habit_id: int, db: Session = Depends(get_db)) -> HabitOut:
    habit = get_habit_or_404(db, habit_id)
    try:
        habit = reset_challenge(db, habit)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _habit_out(db, habit)


@router.get("/{habit_id}/metrics", response_model=HabitMetricsOut)
def habit_metrics_view(habit_id: int, today: Optional[str] = None, db: Session = Depends(get_db)) -> HabitMetricsOut:
    habit = get_habit_or_404(db, habit_id)
    return habit_metrics(db, habit, resolve_day(today))


@router.get("/{habit_id}/consistency", response_model=ConsistencyOut)
def habit_consistency(
    habit_id: int,
    start: Optional[str] = None,
    end: Optional[str] = None,
    period: Optional[str] = None,
    anchor: Optional[str] = None,
    db: Session = Depends(get_db),
) -> ConsistencyOut:
    habit = get_habit_or_404(db, habit_id)
    snapshot = build_snapshot(db, habit)

    if period:
        if period not in PERIOD_KINDS:
            raise HTTPException(status_code=400, detail=f"period must be one of {', '.join(PERIOD_KINDS)}")
        anchor_day = resolve_day(anchor)
        if period == "week":
            window = week_bounds(anchor_day)
            value = calendar_week_consistency(snapshot, anchor_day)
        elif period == "month":
            window = month_bounds(anchor_day.year, anchor_day.month)
            value = calendar_month_consistency(snapshot, anchor_day.year, anchor_day.month)
        else:
            window = year_bounds(anchor_day.year)
            value = calendar_year_consistency(snapshot, anchor_day.year)
        completed, scheduled = window_counts(snapshot, *window)
        return ConsistencyOut(
            habit_id=habit.id,
            start=to_key(window[0]),
            end=to_key(window[1]),
            completed=completed,
            scheduled=scheduled,
            percent=value,
        )

    if not start or not end:
        raise HTTPException(status_code=400, detail="start and end, or period, are required")
    start_day = resolve_day(start)
    end_day = resolve_day(end)
    if start_day > end_day:
        raise HTTPException(status_code=400, detail="start must not be after end")

    completed, scheduled = window_counts(snapshot, start_day, end_day)
    return ConsistencyOut(
        habit_id=habit.id,
        start=to_key(start_day),
        end=to_key(end_day),
        completed=completed,
        scheduled=scheduled,
        percent=window_consistency(snapshot, start_day, end_day),
    )


@router.get("/{habit_id}/week", response_model=List[WeekDayOut])
def habit_week(habit_id: int, today: Optional[str] = None, db: Session = Depends(get_db)) -> List[WeekDayOut]:
    habit = get_habit_or_404(db, habit_id)
    snapshot = build_snapshot(db, habit)
    return [
        WeekDayOut(
            date=d.date,
            weekday=d.weekday,
            scheduled=d.scheduled,
            completed=d.completed,
            is_today=d.is_today,
        )
        for d in week_strip(snapshot, resolve_day(today))
    ]
