"""Date and month parsing utilities."""

import re
from datetime import date, datetime, timedelta
from typing import Optional
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

MONTH_PATTERN = re.compile(r"^\d{4}-\d{2}$")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow"

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_month(month_str: str) -> str:
    """Parse a month string into "YYYY-MM".

    Accepts "YYYY-MM", "this month", "last month", "next month", or anything
    parse_date understands (the day is dropped).

    Raises:
        ValueError: If month string cannot be parsed
    """
    month_str = month_str.strip().lower()
    if MONTH_PATTERN.match(month_str):
        try:
            datetime.strptime(month_str, "%Y-%m")
        except ValueError:
            raise ValueError(f"Invalid month '{month_str}', expected YYYY-MM")
        return month_str

    today = date.today()
    if month_str == "this month":
        return today.strftime("%Y-%m")
    if month_str == "last month":
        return (today - relativedelta(months=1)).strftime("%Y-%m")
    if month_str == "next month":
        return (today + relativedelta(months=1)).strftime("%Y-%m")

    return parse_date(month_str).strftime("%Y-%m")


def recent_months(count: int = 12, today: Optional[date] = None) -> list[str]:
    """Return the last `count` months as "YYYY-MM", current month first."""
    first = (today or date.today()).replace(day=1)
    return [(first - relativedelta(months=i)).strftime("%Y-%m") for i in range(count)]
