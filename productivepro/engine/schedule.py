from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Union

from productivepro.engine.calendar_keys import DateLike, Weekday, WEEKDAYS_MONDAY_FIRST, parse_weekday, weekday_tag


class ScheduleKind(str, Enum):
    EVERYDAY = "everyday"
    WEEKDAYS = "weekdays"
    CHALLENGE = "challenge"


@dataclass(frozen=True)
class Everyday:
    kind: ScheduleKind = field(default=ScheduleKind.EVERYDAY, init=False)


@dataclass(frozen=True)
class SpecificWeekdays:
    selected_days: frozenset[Weekday] = frozenset()
    kind: ScheduleKind = field(default=ScheduleKind.WEEKDAYS, init=False)

    @classmethod
    def of(cls, days: Iterable[Union[Weekday, str]]) -> "SpecificWeekdays":
        return cls(frozenset(d if isinstance(d, Weekday) else parse_weekday(d) for d in days))

    def ordered_days(self) -> list[Weekday]:
        return [d for d in WEEKDAYS_MONDAY_FIRST if d in self.selected_days]


@dataclass(frozen=True)
class Challenge:
    duration_days: int
    kind: ScheduleKind = field(default=ScheduleKind.CHALLENGE, init=False)


ScheduleType = Union[Everyday, SpecificWeekdays, Challenge]


def is_scheduled(schedule: ScheduleType, day: DateLike) -> bool:
    """Whether ``day`` is an obligated day under ``schedule``."""
    if isinstance(schedule, SpecificWeekdays):
        return weekday_tag(day) in schedule.selected_days
    if isinstance(schedule, (Everyday, Challenge)):
        return True
    raise TypeError(f"unsupported schedule: {schedule!r}")


def schedule_label(schedule: ScheduleType) -> str:
    if isinstance(schedule, SpecificWeekdays):
        return "weekdays"
    if isinstance(schedule, Challenge):
        return "challenge"
    return "daily"
