"""Tests for calendar keys and schedule evaluation."""

from datetime import date

import pytest

from productivepro.engine import Challenge, Everyday, SpecificWeekdays, Weekday, is_scheduled
from productivepro.engine.calendar_keys import (
    iter_days,
    month_bounds,
    parse_key,
    parse_weekday,
    shift,
    to_key,
    week_bounds,
    weekday_tag,
)
from productivepro.engine.schedule import schedule_label


class TestCalendarKeys:
    """Key formatting, parsing and weekday mapping."""

    def test_to_key_formats_date(self) -> None:
        assert to_key(date(2024, 3, 9)) == "2024-03-09"

    def test_to_key_normalizes_string(self) -> None:
        assert to_key("2024-03-09") == "2024-03-09"

    @pytest.mark.parametrize("raw", ["2024-3-9", "2024/03/09", "", "2024-02-30", "yesterday"])
    def test_parse_key_rejects_malformed(self, raw: str) -> None:
        with pytest.raises(ValueError):
            parse_key(raw)

    def test_parse_key_accepts_leap_day(self) -> None:
        assert parse_key("2024-02-29") == date(2024, 2, 29)

    @pytest.mark.parametrize(
        ("day", "expected"),
        [
            (date(2024, 3, 4), Weekday.MON),
            (date(2024, 3, 6), Weekday.WED),
            (date(2024, 3, 9), Weekday.SAT),
            (date(2024, 3, 10), Weekday.SUN),
        ],
    )
    def test_weekday_tag(self, day: date, expected: Weekday) -> None:
        assert weekday_tag(day) is expected

    def test_parse_weekday_accepts_long_names(self) -> None:
        assert parse_weekday("Monday") is Weekday.MON
        assert parse_weekday(" sun ") is Weekday.SUN

    def test_parse_weekday_rejects_unknown(self) -> None:
        with pytest.raises(ValueError):
            parse_weekday("funday")

    def test_week_bounds_monday_to_sunday(self) -> None:
        assert week_bounds(date(2024, 3, 6)) == (date(2024, 3, 4), date(2024, 3, 10))
        assert week_bounds(date(2024, 3, 10)) == (date(2024, 3, 4), date(2024, 3, 10))

    def test_month_bounds_handles_leap_february_and_december(self) -> None:
        assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
        assert month_bounds(2023, 12) == (date(2023, 12, 1), date(2023, 12, 31))

    def test_keys_are_zero_padded(self) -> None:
        assert to_key(date.min) == "0001-01-01"
        assert parse_key("0001-01-01") == date.min

    def test_shift_clamps_to_date_range(self) -> None:
        assert shift(date(2024, 3, 10), -6) == date(2024, 3, 4)
        assert shift(date(9999, 12, 30), 5) == date.max
        assert shift(date(1, 1, 2), -5) == date.min

    def test_iter_days_reaches_last_date(self) -> None:
        assert list(iter_days(date(9999, 12, 30), date.max)) == [date(9999, 12, 30), date.max]
        assert list(iter_days(date(2024, 3, 10), date(2024, 3, 9))) == []

    def test_bounds_at_end_of_calendar(self) -> None:
        assert week_bounds(date.max) == (date(9999, 12, 27), date.max)
        assert month_bounds(9999, 12) == (date(9999, 12, 1), date.max)


class TestIsScheduled:
    """Schedule evaluation for each schedule variant."""

    def test_everyday_is_always_scheduled(self) -> None:
        for day in range(4, 11):
            assert is_scheduled(Everyday(), date(2024, 3, day))

    def test_challenge_is_always_scheduled(self) -> None:
        assert is_scheduled(Challenge(30), date(2024, 3, 9))
        assert is_scheduled(Challenge(30), date(2024, 3, 10))

    def test_specific_weekdays(self) -> None:
        schedule = SpecificWeekdays.of(["mon", "wed", "fri"])
        scheduled = [d for d in range(4, 11) if is_scheduled(schedule, date(2024, 3, d))]
        assert scheduled == [4, 6, 8]

    def test_sunday_only(self) -> None:
        schedule = SpecificWeekdays(frozenset({Weekday.SUN}))
        assert is_scheduled(schedule, date(2024, 3, 10))
        assert not is_scheduled(schedule, date(2024, 3, 4))

    def test_empty_weekday_set_is_never_scheduled(self) -> None:
        schedule = SpecificWeekdays()
        assert not any(is_scheduled(schedule, date(2024, 3, d)) for d in range(4, 11))

    def test_accepts_calendar_key(self) -> None:
        assert is_scheduled(SpecificWeekdays.of(["sat"]), "2024-03-09")

    def test_ordered_days(self) -> None:
        schedule = SpecificWeekdays.of(["sun", "fri", "mon"])
        assert schedule.ordered_days() == [Weekday.MON, Weekday.FRI, Weekday.SUN]

    def test_schedule_labels(self) -> None:
        assert schedule_label(Everyday()) == "daily"
        assert schedule_label(SpecificWeekdays.of(["mon"])) == "weekdays"
        assert schedule_label(Challenge(7)) == "challenge"
