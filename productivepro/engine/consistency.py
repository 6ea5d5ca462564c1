"""Completion rate over a window of calendar days.

``window_consistency`` is the only loop; every weekly, monthly, yearly and
full-history figure is that loop with different bounds.
"""

import logging

from productivepro.engine.calendar_keys import (
    DateLike,
    iter_days,
    month_bounds,
    shift,
    to_date,
    to_key,
    week_bounds,
    year_bounds,
)
from productivepro.engine.habit import HabitSnapshot
from productivepro.engine.math_utils import percent
from productivepro.engine.schedule import is_scheduled

logger = logging.getLogger(__name__)

WEEK_DAYS = 7
MONTH_DAYS = 30
YEAR_DAYS = 365


def window_counts(habit: HabitSnapshot, start: DateLike, end: DateLike) -> tuple[int, int]:
    """Return ``(completed, scheduled)`` for the inclusive window."""
    scheduled = 0
    completed = 0
    for day in iter_days(start, end):
        if not is_scheduled(habit.schedule, day):
            continue
        scheduled += 1
        if to_key(day) in habit.completed_dates:
            completed += 1
    return completed, scheduled


def window_consistency(habit: HabitSnapshot, start: DateLike, end: DateLike) -> int:
    if to_date(start) > to_date(end):
        logger.debug("Reversed consistency window %s..%s", to_key(start), to_key(end))
        return 0
    completed, scheduled = window_counts(habit, start, end)
    return percent(completed, scheduled)


def trailing_consistency(habit: HabitSnapshot, today: DateLike, days: int) -> int:
    if days <= 0:
        return 0
    end = to_date(today)
    return window_consistency(habit, shift(end, -(days - 1)), end)


def weekly_consistency(habit: HabitSnapshot, today: DateLike) -> int:
    return trailing_consistency(habit, today, WEEK_DAYS)


def monthly_consistency(habit: HabitSnapshot, today: DateLike) -> int:
    return trailing_consistency(habit, today, MONTH_DAYS)


def calendar_week_consistency(habit: HabitSnapshot, day: DateLike) -> int:
    start, end = week_bounds(day)
    return window_consistency(habit, start, end)


def calendar_month_consistency(habit: HabitSnapshot, year: int, month: int) -> int:
    start, end = month_bounds(year, month)
    return window_consistency(habit, start, end)


def calendar_year_consistency(habit: HabitSnapshot, year: int) -> int:
    start, end = year_bounds(year)
    return window_consistency(habit, start, end)


def history_start(habit: HabitSnapshot, today: DateLike) -> DateLike:
    """First day of the habit's full history window."""
    candidates = [key for key in (habit.created_on, habit.earliest_completion()) if key]
    if not candidates:
        return today
    return min(candidates)


def success_rate(habit: HabitSnapshot, today: DateLike) -> int:
    """Lifetime completion percentage, from creation (or first completion) to ``today``."""
    return window_consistency(habit, history_start(habit, today), today)
