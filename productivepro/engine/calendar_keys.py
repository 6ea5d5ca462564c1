"""Calendar keys: timezone-free ``YYYY-MM-DD`` strings.

Every date comparison and completion lookup in the engine goes through these
helpers, so a habit's completion set is always a set of keys and never a set
of timestamps.
"""

from datetime import date, datetime, timedelta
from enum import Enum
from typing import Iterator, Union

KEY_FORMAT = "%Y-%m-%d"

DateLike = Union[date, str]


class Weekday(str, Enum):
    MON = "mon"
    TUE = "tue"
    WED = "wed"
    THU = "thu"
    FRI = "fri"
    SAT = "sat"
    SUN = "sun"


# date.weekday(): 0 = Monday .. 6 = Sunday
WEEKDAYS_MONDAY_FIRST = (
    Weekday.MON,
    Weekday.TUE,
    Weekday.WED,
    Weekday.THU,
    Weekday.FRI,
    Weekday.SAT,
    Weekday.SUN,
)


def to_key(value: DateLike) -> str:
    if isinstance(value, str):
        return to_key(parse_key(value))
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def parse_key(key: str) -> date:
    """Parse a calendar key, raising ``ValueError`` when it is malformed."""
    raw = (key or "").strip()
    if len(raw) != 10:
        raise ValueError(f"invalid calendar key: {key!r}")
    return datetime.strptime(raw, KEY_FORMAT).date()


def to_date(value: DateLike) -> date:
    if isinstance(value, str):
        return parse_key(value)
    if isinstance(value, datetime):
        return value.date()
    return value


def weekday_tag(value: DateLike) -> Weekday:
    """Return the weekday tag of a date.

    This is the only place a native weekday index is turned into a tag.
    """
    return WEEKDAYS_MONDAY_FIRST[to_date(value).weekday()]


def parse_weekday(value: str) -> Weekday:
    raw = (value or "").strip().lower()[:3]
    try:
        return Weekday(raw)
    except ValueError as exc:
        raise ValueError(f"unknown weekday: {value!r}") from exc


def shift(value: DateLike, days: int) -> date:
    """Move ``value`` by ``days``, clamped to the representable date range."""
    day = to_date(value)
    if days >= 0:
        return day + timedelta(days=min(days, (date.max - day).days))
    return day - timedelta(days=min(-days, (day - date.min).days))


def iter_days(start: DateLike, end: DateLike) -> Iterator[date]:
    """Yield every date from ``start`` to ``end`` inclusive."""
    current = to_date(start)
    last = to_date(end)
    if current > last:
        return
    while True:
        yield current
        if current == last:
            return
        current += timedelta(days=1)


def week_bounds(value: DateLike) -> tuple[date, date]:
    """Monday and Sunday of the calendar week containing ``value``."""
    day = to_date(value)
    monday = shift(day, -day.weekday())
    return monday, shift(day, 6 - day.weekday())


def month_bounds(year: int, month: int) -> tuple[date, date]:
    first = date(year, month, 1)
    if month == 12:
        return first, date(year, 12, 31)
    return first, date(year, month + 1, 1) - timedelta(days=1)


def year_bounds(year: int) -> tuple[date, date]:
    return date(year, 1, 1), date(year, 12, 31)
