from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class HabitIn(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    category: str = "Personal"
    schedule_type: str = "everyday"
    selected_days: list[str] = []
    challenge_days: int = 0
    has_timer: bool = False


class HabitUpdateIn(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    category: Optional[str] = None
    schedule_type: Optional[str] = None
    selected_days: Optional[list[str]] = None
    challenge_days: Optional[int] = None
    has_timer: Optional[bool] = None
    is_active: Optional[bool] = None


class HabitOut(BaseModel):
    id: int
    title: str
    category: str
    schedule_type: str
    schedule_label: str
    selected_days: list[str]
    challenge_days: int
    challenge_completed: int
    best_streak: int
    has_timer: bool
    is_active: bool
    created_at: Optional[datetime] = None
    completed_dates: list[str]
