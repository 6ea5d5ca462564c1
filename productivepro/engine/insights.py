"""Multi-habit views used by the insights dashboard and habit cards."""

from dataclasses import dataclass
from typing import Optional, Sequence

from productivepro.engine.calendar_keys import DateLike, iter_days, shift, to_date, to_key, week_bounds, weekday_tag
from productivepro.engine.habit import HabitSnapshot
from productivepro.engine.math_utils import percent, round_half_up
from productivepro.engine.schedule import is_scheduled


@dataclass(frozen=True)
class DayTally:
    date: str
    weekday: str
    completed: int
    total: int

    @property
    def rate(self) -> int:
        return percent(self.completed, self.total)


@dataclass(frozen=True)
class WeekStripDay:
    date: str
    weekday: str
    scheduled: bool
    completed: bool
    is_today: bool


def tally_day(habits: Sequence[HabitSnapshot], day: DateLike) -> DayTally:
    completed = 0
    total = 0
    for habit in habits:
        if not is_scheduled(habit.schedule, day):
            continue
        total += 1
        if habit.is_completed(day):
            completed += 1
    return DayTally(date=to_key(day), weekday=weekday_tag(day).value, completed=completed, total=total)


def daily_breakdown(habits: Sequence[HabitSnapshot], today: DateLike, days: int = 7) -> list[DayTally]:
    """Oldest-first tallies for the ``days`` days ending at ``today``."""
    end = to_date(today)
    return [tally_day(habits, day) for day in iter_days(shift(end, -(days - 1)), end)]


def consistency_series(habits: Sequence[HabitSnapshot], today: DateLike, days: int = 14) -> list[dict]:
    return [{"date": t.date, "rate": t.rate} for t in daily_breakdown(habits, today, days)]


def completion_rate(habits: Sequence[HabitSnapshot], today: DateLike) -> int:
    tallies = daily_breakdown(habits, today, 7)
    return percent(sum(t.completed for t in tallies), sum(t.total for t in tallies))


def average_daily_completions(habits: Sequence[HabitSnapshot], today: DateLike) -> int:
    """Completions over the trailing week divided by seven, rounded half-up."""
    if not habits:
        return 0
    tallies = daily_breakdown(habits, today, 7)
    return round_half_up(sum(t.completed for t in tallies) / 7)


def best_day(habits: Sequence[HabitSnapshot], today: DateLike) -> Optional[DayTally]:
    """Day of the trailing week with the most completions; earliest wins ties."""
    if not habits:
        return None
    best = None
    for tally in daily_breakdown(habits, today, 7):
        if best is None or tally.completed > best.completed:
            best = tally
    return best


def week_strip(habit: HabitSnapshot, today: DateLike) -> list[WeekStripDay]:
    today_date = to_date(today)
    strip = []
    for day in iter_days(*week_bounds(today_date)):
        strip.append(
            WeekStripDay(
                date=to_key(day),
                weekday=weekday_tag(day).value,
                scheduled=is_scheduled(habit.schedule, day),
                completed=habit.is_completed(day),
                is_today=day == today_date,
            )
        )
    return strip


def completion_message(rate: int, habit_count: int) -> str:
    if habit_count == 0:
        return "Start with one simple habit. Consistency builds character."
    if rate >= 90:
        return "Incredible! You're mastering your habits. Keep it up!"
    if rate >= 70:
        return "Strong week! You're building lasting routines."
    if rate >= 50:
        return "You're halfway there. Every check mark is a win!"
    if rate >= 25:
        return "Progress over perfection. You're showing up!"
    return "New week, new opportunities. You've got this!"


def streak_message(max_streak: int) -> str:
    if max_streak >= 30:
        return "A month-long streak! You're unstoppable."
    if max_streak >= 14:
        return "Two weeks strong! Habits are becoming second nature."
    if max_streak >= 7:
        return "One week down! You're building real momentum."
    if max_streak >= 3:
        return "Three days in a row! Keep the chain going."
    return "Start your streak today. Day one is always the hardest."
