import datetime
from typing import Optional

from pydantic import BaseModel


class ToggleIn(BaseModel):
    date: Optional[datetime.date] = None
    done: Optional[bool] = None


class ChallengeProgressOut(BaseModel):
    completed: int
    remaining: int
    percent: int


class ProductivityScoresOut(BaseModel):
    week: int
    month: int
    year: int


class HabitMetricsOut(BaseModel):
    habit_id: int
    today: str
    scheduled_today: bool
    completed_today: bool
    current_streak: int
    best_streak: int
    success_rate: int
    weekly_consistency: int
    monthly_consistency: int
    productivity: ProductivityScoresOut
    challenge: Optional[ChallengeProgressOut] = None


class ToggleOut(BaseModel):
    habit_id: int
    date: str
    completed: bool
    metrics: HabitMetricsOut


class ConsistencyOut(BaseModel):
    habit_id: int
    start: str
    end: str
    completed: int
    scheduled: int
    percent: int


class WeekDayOut(BaseModel):
    date: str
    weekday: str
    scheduled: bool
    completed: bool
    is_today: bool
