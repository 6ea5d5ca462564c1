from typing import Optional

from pydantic import BaseModel


class DayTallyOut(BaseModel):
    date: str
    weekday: str
    completed: int
    total: int
    rate: int


class SeriesPointOut(BaseModel):
    date: str
    rate: int


class InsightsSummaryOut(BaseModel):
    today: str
    window: str
    habit_count: int
    productivity_score: int
    productivity_status: str
    completion_rate: int
    max_streak: int
    avg_daily: int
    best_day: Optional[DayTallyOut] = None
    weekly: list[DayTallyOut]
    consistency: list[SeriesPointOut]
    completion_message: str
    streak_message: str
