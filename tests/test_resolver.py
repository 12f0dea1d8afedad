from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from pod_progress.weeks.resolver import (
    QUARTER_WEEKS,
    current_week_number,
    quarter_label,
    quarter_start,
    recent_weeks,
    week_date_range,
    week_start,
    weekday_of,
    weeks_elapsed,
)

# Q2 2025 starts on Tuesday 2025-04-01; Q4 2025 on Wednesday 2025-10-01.
IN_Q2 = date(2025, 4, 15)
IN_Q4 = date(2025, 10, 20)


@pytest.mark.parametrize(
    ("reference", "expected"),
    [
        (date(2025, 1, 1), date(2025, 1, 1)),
        (date(2025, 5, 17), date(2025, 4, 1)),
        (date(2025, 9, 30), date(2025, 7, 1)),
        (datetime(2025, 12, 31, 23, 59), date(2025, 10, 1)),
    ],
)
def test_quarter_start(reference: date, expected: date) -> None:
    assert quarter_start(reference) == expected


def test_quarter_label() -> None:
    assert quarter_label(date(2025, 4, 1)) == "Q2 2025"
    assert quarter_label(date(2025, 12, 31)) == "Q4 2025"
    assert quarter_label(date(2026, 3, 31)) == "Q1 2026"


def test_weekday_of_uses_sunday_zero() -> None:
    assert weekday_of(date(2025, 4, 6)) == 0  # Sunday
    assert weekday_of(date(2025, 4, 7)) == 1  # Monday
    assert weekday_of(date(2025, 4, 12)) == 6  # Saturday


def test_week_one_rolls_forward_to_monday() -> None:
    assert week_start(1, 1, IN_Q2) == date(2025, 4, 7)
    assert week_date_range(1, 1, IN_Q2) == "Apr 7 - Apr 13"


def test_wednesday_quarter_start_rolls_to_following_monday() -> None:
    first = week_start(1, 1, IN_Q4)
    assert first == date(2025, 10, 6)
    assert 4 <= (first - quarter_start(IN_Q4)).days <= 6


def test_week_one_starts_on_quarter_start_when_weekdays_match() -> None:
    assert week_start(1, 2, IN_Q2) == date(2025, 4, 1)


@pytest.mark.parametrize("day", range(7))
def test_week_one_falls_on_week_start_day(day: int) -> None:
    first = week_start(1, day, IN_Q2)
    assert weekday_of(first) == day
    assert 0 <= (first - quarter_start(IN_Q2)).days <= 6


@pytest.mark.parametrize("day", range(7))
def test_consecutive_weeks_are_seven_days_apart(day: int) -> None:
    for n in range(1, 13):
        assert week_start(n + 1, day, IN_Q4) == week_start(n, day, IN_Q4) + timedelta(days=7)


def test_week_date_range_crosses_month() -> None:
    assert week_date_range(4, 1, IN_Q2) == "Apr 28 - May 4"


@pytest.mark.parametrize(
    ("today", "expected"),
    [
        (date(2025, 4, 1), 1),   # before week 1 begins
        (date(2025, 4, 7), 1),
        (date(2025, 4, 13), 1),
        (date(2025, 4, 14), 2),
        (datetime(2025, 4, 14, 23, 30), 2),
        (date(2025, 4, 22), 3),
        (date(2025, 6, 30), 12),  # week 13 clamps to 12
    ],
)
def test_current_week_number(today: date, expected: int) -> None:
    assert current_week_number(1, today) == expected


@pytest.mark.parametrize("day", range(7))
def test_current_week_number_always_in_range(day: int) -> None:
    d = date(2025, 4, 1)
    while d < date(2025, 7, 1):
        assert 1 <= current_week_number(day, d) <= QUARTER_WEEKS
        d += timedelta(days=1)


def test_current_week_matches_week_start() -> None:
    for n in range(1, 13):
        assert current_week_number(3, week_start(n, 3, IN_Q4)) == n


def test_weeks_elapsed_lists_started_weeks() -> None:
    weeks = weeks_elapsed(1, date(2025, 4, 22))
    assert [w.number for w in weeks] == [1, 2, 3]
    assert [w.date_range for w in weeks] == [
        "Apr 7 - Apr 13",
        "Apr 14 - Apr 20",
        "Apr 21 - Apr 27",
    ]


def test_weeks_elapsed_before_first_week_still_offers_week_one() -> None:
    assert [w.number for w in weeks_elapsed(1, date(2025, 4, 2))] == [1]


def test_recent_weeks_newest_first() -> None:
    assert recent_weeks(1, 4, date(2025, 4, 22)) == [3, 2, 1]
    assert recent_weeks(1, 4, date(2025, 5, 19)) == [7, 6, 5, 4]


def test_recent_weeks_defaults_to_thirteen_back() -> None:
    assert recent_weeks(1, today=date(2025, 6, 30)) == list(range(12, 0, -1))
    assert len(recent_weeks(1, today=date(2025, 5, 19))) == 7

