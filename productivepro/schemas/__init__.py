from productivepro.schemas.habit import HabitIn, HabitOut, HabitUpdateIn
from productivepro.schemas.insights import DayTallyOut, InsightsSummaryOut, SeriesPointOut
from productivepro.schemas.report import (
    ChallengeProgressOut,
    ConsistencyOut,
    HabitMetricsOut,
    ProductivityScoresOut,
    ToggleIn,
    ToggleOut,
    WeekDayOut,
)

__all__ = [
    "HabitIn",
    "HabitUpdateIn",
    "HabitOut",
    "ToggleIn",
    "ToggleOut",
    "HabitMetricsOut",
    "ProductivityScoresOut",
    "ChallengeProgressOut",
    "ConsistencyOut",
    "WeekDayOut",
    "DayTallyOut",
    "SeriesPointOut",
    "InsightsSummaryOut",
]
