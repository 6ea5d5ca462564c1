from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from productivepro.engine.calendar_keys import DateLike
from productivepro.engine.consistency import MONTH_DAYS, WEEK_DAYS, YEAR_DAYS, success_rate, trailing_consistency
from productivepro.engine.habit import HabitSnapshot
from productivepro.engine.math_utils import round_half_up
from productivepro.engine.streaks import current_streak

SUCCESS_WEIGHT = 0.4
STREAK_WEIGHT = 0.3
CONSISTENCY_WEIGHT = 0.3
STREAK_POINTS_PER_DAY = 10


class ScoreWindow(str, Enum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


WINDOW_DAYS = {
    ScoreWindow.WEEK: WEEK_DAYS,
    ScoreWindow.MONTH: MONTH_DAYS,
    ScoreWindow.YEAR: YEAR_DAYS,
}


class ProductivityStatus(str, Enum):
    NO_DATA = "no_data"
    NO_PROGRESS = "no_progress"
    ACTIVE = "active"


@dataclass(frozen=True)
class ProductivitySummary:
    score: int
    status: ProductivityStatus
    habit_count: int
    scores: tuple[int, ...] = ()


def productivity_score(habit: HabitSnapshot, today: DateLike, window: ScoreWindow = ScoreWindow.WEEK) -> int:
    """Blend of lifetime success rate, current streak and window consistency."""
    streak_term = min(current_streak(habit, today) * STREAK_POINTS_PER_DAY, 100)
    score = (
        SUCCESS_WEIGHT * success_rate(habit, today)
        + STREAK_WEIGHT * streak_term
        + CONSISTENCY_WEIGHT * trailing_consistency(habit, today, WINDOW_DAYS[ScoreWindow(window)])
    )
    return max(0, min(round_half_up(score), 100))


def aggregate_productivity(
    habits: Sequence[HabitSnapshot],
    today: DateLike,
    window: ScoreWindow = ScoreWindow.WEEK,
) -> ProductivitySummary:
    """Equal-weight average across habits.

    An empty habit list is ``NO_DATA``; a non-empty list averaging zero is
    ``NO_PROGRESS``.
    """
    if not habits:
        return ProductivitySummary(score=0, status=ProductivityStatus.NO_DATA, habit_count=0)

    scores = tuple(productivity_score(h, today, window) for h in habits)
    average = round_half_up(sum(scores) / len(scores))
    status = ProductivityStatus.NO_PROGRESS if average == 0 else ProductivityStatus.ACTIVE
    return ProductivitySummary(score=average, status=status, habit_count=len(scores), scores=scores)
