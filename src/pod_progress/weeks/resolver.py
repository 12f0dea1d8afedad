"""Quarter-relative week calendar.

Maps a pod's tracking weeks onto calendar dates. Week 1 of a quarter starts
on the first occurrence of the pod's week-start day on or after the quarter's
first day; every later week starts exactly seven days after the previous one.

Weekdays use the 0 = Sunday ... 6 = Saturday convention of `PodSettings`.
All arithmetic is done on `date` values, so time of day and daylight-saving
shifts never affect a result.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from pod_progress.models import WeekInfo

# Highest week number handed to week selectors.
QUARTER_WEEKS = 12


def _as_date(value: date | datetime | None) -> date:
    """Truncate a datetime to its calendar day; `None` means today."""
    if value is None:
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    return value


def weekday_of(d: date) -> int:
    """Return the weekday of `d` with Sunday as 0."""
    return d.isoweekday() % 7


def quarter_start(reference: date | datetime | None = None) -> date:
    """Return the first day of the quarter containing `reference`.

    Args:
        reference: Any date or datetime; defaults to today.

    Returns:
        January, April, July or October 1 of the same year.
    """
    d = _as_date(reference)
    first_month = (d.month - 1) // 3 * 3 + 1
    return date(d.year, first_month, 1)


def quarter_label(reference: date | datetime | None = None) -> str:
    """Return the goal quarter label ("Q2 2025") for `reference`."""
    d = _as_date(reference)
    return f"Q{(d.month - 1) // 3 + 1} {d.year}"


def week_start(
    week_number: int,
    week_start_day: int = 1,
    today: date | datetime | None = None,
) -> date:
    """Return the first day of quarter week `week_number` (1-indexed).

    When the quarter already starts on `week_start_day`, week 1 starts on the
    quarter's first day; otherwise it rolls forward to the next matching
    weekday (1-6 days later).

    Args:
        week_number: Quarter-relative week, 1 for the first week.
        week_start_day: Pod week-start day, 0 = Sunday.
        today: Day whose quarter is used; defaults to today.
    """
    q_start = quarter_start(today)
    offset = (week_start_day - weekday_of(q_start)) % 7
    first_week = q_start + timedelta(days=offset)
    return first_week + timedelta(days=(week_number - 1) * 7)


def format_week_date(d: date) -> str:
    return f"{d:%b} {d.day}"


def week_date_range(
    week_number: int,
    week_start_day: int = 1,
    today: date | datetime | None = None,
) -> str:
    """Return a "Apr 7 - Apr 13" label covering the seven days of a week."""
    start = week_start(week_number, week_start_day, today)
    end = start + timedelta(days=6)
    return f"{format_week_date(start)} - {format_week_date(end)}"


def current_week_number(
    week_start_day: int = 1,
    today: date | datetime | None = None,
) -> int:
    """Return the quarter week containing `today`, clamped into [1, 12].

    Elapsed time is counted in whole days including the current one and
    rounded up to whole weeks, so the first day of week n yields n. Days
    before week 1 collapse to 1 and days after week 12 collapse to 12.
    """
    d = _as_date(today)
    days = (d - week_start(1, week_start_day, d)).days + 1
    week = -(-days // 7)
    return min(max(1, week), QUARTER_WEEKS)


def weeks_elapsed(
    week_start_day: int = 1,
    today: date | datetime | None = None,
) -> list[WeekInfo]:
    """Return weeks 1..current with their date ranges, oldest first."""
    d = _as_date(today)
    current = current_week_number(week_start_day, d)
    return [
        WeekInfo(number=n, date_range=week_date_range(n, week_start_day, d))
        for n in range(1, current + 1)
    ]


def recent_weeks(
    week_start_day: int = 1,
    count: int = 13,
    today: date | datetime | None = None,
) -> list[int]:
    """Return up to `count` week numbers ending at the current week, newest first."""
    current = current_week_number(week_start_day, today)
    return [w for w in range(current, current - count, -1) if w >= 1]
