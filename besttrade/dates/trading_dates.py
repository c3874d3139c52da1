from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional

from besttrade.errors import InvalidTimeFormat

# Strict HH:mm, zero-padded 24h clock. Range is checked after matching.
TIME_PATTERN = re.compile(r"([0-9]{2}):([0-9]{2})")

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]


def is_trading_day(d: date) -> bool:
    """Mon-Fri only. Exchange holidays are not modelled."""
    return d.weekday() < 5


def previous_trading_day(d: date) -> date:
    """Step back one calendar day, then skip any weekend."""
    candidate = d - timedelta(days=1)
    while not is_trading_day(candidate):
        candidate -= timedelta(days=1)
    return candidate


def find_last_trading_date_before(calculation_date: date) -> date:
    """
    Last trading day strictly before calculation_date.

    Monday, Saturday and Sunday all map to the preceding Friday.
    """
    return previous_trading_day(calculation_date)


def build_trading_dates(last_trading_date: date, n: int) -> List[date]:
    """
    Returns n trading dates, oldest first, ending at last_trading_date.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n == 0:
        return []

    dates = [last_trading_date] * n
    for i in range(n - 2, -1, -1):
        dates[i] = previous_trading_day(dates[i + 1])
    return dates


def parse_time(text: Optional[str], field: str = "time", index: Optional[int] = None) -> time:
    """
    Parse a zero-padded 24h "HH:mm" string.

    "9:30", "25:00", "aa:bb", "" and whitespace-only input are rejected with
    InvalidTimeFormat (carrying field/index so callers can point at the bad cell).
    """
    if text is None or not isinstance(text, str) or not text.strip():
        raise InvalidTimeFormat(text, field=field, index=index)

    m = TIME_PATTERN.fullmatch(text)
    if m is None:
        raise InvalidTimeFormat(text, field=field, index=index)

    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 23 or minute > 59:
        raise InvalidTimeFormat(text, field=field, index=index)

    return time(hour, minute)


def to_instant(d: date, t: time) -> datetime:
    """Combine a date and a time-of-day into a UTC instant."""
    return datetime.combine(d, t, tzinfo=timezone.utc)


def format_instant(ts: Optional[datetime]) -> str:
    """Render an instant as YYYY-MM-DDTHH:MM in UTC ("n/a" when absent)."""
    if ts is None:
        return "n/a"
    return ts.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M")


def format_day_label(day_index: int) -> str:
    """
    Weekday label for a day index, assuming day 0 is a Monday.

    0 -> "Monday", 4 -> "Friday", 5 -> "Monday next week", 10 -> "Monday (week +2)"
    """
    if day_index < 0:
        raise ValueError(f"day_index must be non-negative: {day_index}")

    weekday = WEEKDAY_NAMES[day_index % 5]
    week_offset = day_index // 5
    if week_offset == 0:
        return weekday
    if week_offset == 1:
        return f"{weekday} next week"
    return f"{weekday} (week +{week_offset})"
