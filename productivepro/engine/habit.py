from dataclasses import dataclass, field
from typing import Iterable, Optional

from productivepro.engine.calendar_keys import DateLike, to_key
from productivepro.engine.schedule import Challenge, Everyday, ScheduleType


@dataclass(frozen=True)
class HabitSnapshot:
    """Read-only view of a habit handed to the engine.

    ``completed_dates`` holds calendar keys. The store builds a fresh snapshot
    on every read; nothing in the engine keeps a reference between calls.
    """

    schedule: ScheduleType = field(default_factory=Everyday)
    completed_dates: frozenset[str] = frozenset()
    challenge_duration_days: int = 0
    challenge_completed_count: int = 0
    best_streak_recorded: int = 0
    created_on: Optional[str] = None

    @classmethod
    def build(
        cls,
        schedule: Optional[ScheduleType] = None,
        completed: Iterable[DateLike] = (),
        challenge_completed_count: int = 0,
        best_streak_recorded: int = 0,
        created_on: Optional[DateLike] = None,
    ) -> "HabitSnapshot":
        schedule = schedule if schedule is not None else Everyday()
        duration = schedule.duration_days if isinstance(schedule, Challenge) else 0
        return cls(
            schedule=schedule,
            completed_dates=frozenset(to_key(d) for d in completed),
            challenge_duration_days=duration,
            challenge_completed_count=challenge_completed_count,
            best_streak_recorded=max(0, best_streak_recorded),
            created_on=to_key(created_on) if created_on is not None else None,
        )

    def is_completed(self, day: DateLike) -> bool:
        return to_key(day) in self.completed_dates

    def earliest_completion(self) -> Optional[str]:
        if not self.completed_dates:
            return None
        return min(self.completed_dates)
