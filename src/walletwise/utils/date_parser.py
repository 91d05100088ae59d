"""Date parsing and calendar utilities.

All datetimes handled by walletwise are naive local time. Aware values are
converted to local time and stripped of their tzinfo on the way in.
"""

from datetime import date, datetime, time, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

INVALID_DATE_LABEL = "Invalid Date"

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def to_local_naive(value: datetime) -> datetime:
    """Return value as a naive datetime in local time."""
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def start_of_day(moment: datetime) -> datetime:
    """Local midnight of the day containing moment."""
    return datetime.combine(moment.date(), time.min)


def start_of_week(moment: datetime) -> datetime:
    """Monday 00:00 of the ISO week containing moment."""
    return start_of_day(moment) - timedelta(days=moment.weekday())


def start_of_month(moment: datetime) -> datetime:
    """First day of the month containing moment, at 00:00."""
    return start_of_day(moment).replace(day=1)


def parse_datetime(date_str: str, now: Optional[datetime] = None) -> datetime:
    """Parse a date string into a datetime.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", "2024-01-15 14:30"
    - Relative dates: "now", "today", "yesterday", "last month", "this week", etc.

    "now" and "today" keep the current time of day; other relative dates
    resolve to midnight.

    Args:
        date_str: Date string in various formats
        now: Reference moment for relative dates (defaults to the current time)

    Returns:
        Naive local datetime

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    now = now or datetime.now()
    midnight = start_of_day(now)

    relative_dates = {
        "now": now,
        "today": now,
        "yesterday": midnight - timedelta(days=1),
        "tomorrow": midnight + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str.startswith("last "):
        period = date_str[5:]
        if period == "month":
            return start_of_month(now) - relativedelta(months=1)
        elif period == "year":
            return midnight.replace(month=1, day=1) - relativedelta(years=1)
        elif period == "week":
            return start_of_week(now) - timedelta(days=7)
        elif period in WEEKDAYS:
            target_day = WEEKDAYS.index(period)
            days_ago = (now.weekday() - target_day) % 7
            if days_ago == 0:
                days_ago = 7
            return midnight - timedelta(days=days_ago)

    elif date_str.startswith("this "):
        period = date_str[5:]
        if period == "month":
            return start_of_month(now)
        elif period == "year":
            return midnight.replace(month=1, day=1)
        elif period == "week":
            return start_of_week(now)

    try:
        return to_local_naive(date_parser.parse(date_str))
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_timestamp(value: object) -> Optional[datetime]:
    """Coerce a stored or user-supplied date into a datetime.

    Returns None for values that cannot be interpreted as a date. Callers
    treat None as a malformed date rather than an error.
    """
    if isinstance(value, datetime):
        return to_local_naive(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str) and value.strip():
        try:
            return to_local_naive(date_parser.parse(value.strip()))
        except (ValueError, TypeError, OverflowError):
            return None
    return None


def format_display_date(value: Optional[datetime]) -> str:
    """Format a date as en-US numeric M/D/YYYY, or the invalid-date sentinel."""
    if value is None:
        return INVALID_DATE_LABEL
    return f"{value.month}/{value.day}/{value.year}"


def format_short_date(value: Optional[datetime]) -> str:
    """Format a date as an en-US short label like "Oct 5"."""
    if value is None:
        return ""
    return f"{value.strftime('%b')} {value.day}"
