from productivepro.engine.calendar_keys import Weekday, parse_key, to_key, weekday_tag
from productivepro.engine.challenge import ChallengeProgress, challenge_progress
from productivepro.engine.consistency import (
    calendar_month_consistency,
    calendar_week_consistency,
    calendar_year_consistency,
    monthly_consistency,
    success_rate,
    trailing_consistency,
    weekly_consistency,
    window_consistency,
)
from productivepro.engine.habit import HabitSnapshot
from productivepro.engine.schedule import Challenge, Everyday, ScheduleKind, ScheduleType, SpecificWeekdays, is_scheduled
from productivepro.engine.scoring import (
    ProductivityStatus,
    ProductivitySummary,
    ScoreWindow,
    aggregate_productivity,
    productivity_score,
)
from productivepro.engine.streaks import best_streak, current_streak, longest_streak

__all__ = [
    "Weekday",
    "parse_key",
    "to_key",
    "weekday_tag",
    "ScheduleKind",
    "ScheduleType",
    "Everyday",
    "SpecificWeekdays",
    "Challenge",
    "is_scheduled",
    "HabitSnapshot",
    "current_streak",
    "best_streak",
    "longest_streak",
    "window_consistency",
    "trailing_consistency",
    "weekly_consistency",
    "monthly_consistency",
    "calendar_week_consistency",
    "calendar_month_consistency",
    "calendar_year_consistency",
    "success_rate",
    "ScoreWindow",
    "ProductivityStatus",
    "ProductivitySummary",
    "productivity_score",
    "aggregate_productivity",
    "ChallengeProgress",
    "challenge_progress",
]
