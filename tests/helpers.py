"""Date helpers shared by the test modules."""

from datetime import date, timedelta

# 2024-03-10 is a Sunday.
TODAY = date(2024, 3, 10)


def days_back(count: int, end: date = TODAY) -> list[date]:
    """``count`` consecutive dates ending at ``end``."""
    return [end - timedelta(days=offset) for offset in range(count)]


def date_span(start: date, end: date) -> list[date]:
    """Every date from ``start`` to ``end`` inclusive."""
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]
