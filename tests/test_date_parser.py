"""Tests for date and month parsing."""

import pytest
from datetime import date, timedelta
from dateutil.relativedelta import relativedelta
from fleetledger.utils.date_parser import parse_date, parse_month, recent_months


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_relative_dates():
    """Test parsing 'today', 'yesterday' and 'tomorrow'."""
    assert parse_date("today") == date.today()
    assert parse_date(" Yesterday ") == date.today() - timedelta(days=1)
    assert parse_date("tomorrow") == date.today() + timedelta(days=1)


def test_parse_invalid_date():
    """Test invalid date raises ValueError."""
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")


def test_parse_month_iso():
    assert parse_month("2024-05") == "2024-05"


def test_parse_month_relative():
    today = date.today()
    assert parse_month("this month") == today.strftime("%Y-%m")
    assert parse_month("last month") == (today - relativedelta(months=1)).strftime("%Y-%m")
    assert parse_month("next month") == (today + relativedelta(months=1)).strftime("%Y-%m")


def test_parse_month_from_date():
    assert parse_month("2024-05-17") == "2024-05"


def test_parse_month_invalid():
    with pytest.raises(ValueError, match="Invalid month"):
        parse_month("2024-13")
    with pytest.raises(ValueError):
        parse_month("whenever")


def test_recent_months_across_year():
    assert recent_months(3, today=date(2024, 2, 29)) == ["2024-02", "2024-01", "2023-12"]


def test_recent_months_default_count():
    months = recent_months()
    assert len(months) == 12
    assert months[0] == date.today().strftime("%Y-%m")
