"""Current, best and longest streaks.

A streak counts consecutive obligated days that were completed. Days the
schedule does not obligate are skipped without breaking the run; an
obligated day before ``today`` with no completion ends it. ``today`` itself
never breaks a streak because the day is not over yet.
"""

import logging
from datetime import date, timedelta
from typing import Optional

from productivepro.engine.calendar_keys import DateLike, iter_days, parse_key, shift, to_date, to_key
from productivepro.engine.habit import HabitSnapshot
from productivepro.engine.schedule import is_scheduled

logger = logging.getLogger(__name__)

ANCHOR_LOOKBACK_DAYS = 7
MAX_STREAK_ITERATIONS = 3650


def find_anchor(habit: HabitSnapshot, today: DateLike) -> Optional[date]:
    """Most recent completed day within the lookback window, if the streak is alive.

    Returns ``None`` when an obligated day before ``today`` was missed first,
    or when nothing was completed in the last seven days.
    """
    today_date = to_date(today)
    for offset in range(ANCHOR_LOOKBACK_DAYS):
        day = shift(today_date, -offset)
        if to_key(day) in habit.completed_dates:
            return day
        if offset > 0 and is_scheduled(habit.schedule, day):
            return None
    return None


def _count_back(habit: HabitSnapshot, anchor: date) -> int:
    streak = 0
    day = anchor
    for _ in range(MAX_STREAK_ITERATIONS):
        if to_key(day) in habit.completed_dates:
            streak += 1
        elif is_scheduled(habit.schedule, day):
            return streak
        if day == date.min:
            return streak
        day -= timedelta(days=1)
    logger.debug("Streak count hit the %s day bound at anchor %s", MAX_STREAK_ITERATIONS, anchor)
    return streak


def current_streak(habit: HabitSnapshot, today: DateLike) -> int:
    anchor = find_anchor(habit, today)
    if anchor is None:
        return 0
    return _count_back(habit, anchor)


def best_streak(habit: HabitSnapshot, today: DateLike) -> int:
    """Candidate high-water mark; the caller persists ``max(old, candidate)``."""
    return max(habit.best_streak_recorded, current_streak(habit, today))


def longest_streak(habit: HabitSnapshot, today: Optional[DateLike] = None) -> int:
    """Longest run in the completion history.

    Walks forward from the earliest completion to the latest one, or to
    ``today`` when given so that future-dated completions are ignored. Uses
    the same skip/break policy as ``current_streak``.
    """
    if not habit.completed_dates:
        return 0

    first = parse_key(min(habit.completed_dates))
    last = parse_key(max(habit.completed_dates))
    if today is not None:
        last = min(last, to_date(today))

    longest = 0
    run = 0
    for day in iter_days(first, last):
        if to_key(day) in habit.completed_dates:
            run += 1
            longest = max(longest, run)
        elif is_scheduled(habit.schedule, day):
            run = 0
    return longest
