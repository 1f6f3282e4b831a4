"""Utility functions for fleetledger."""

from fleetledger.utils.date_parser import parse_date, parse_month, recent_months
from fleetledger.utils.amount_parser import parse_amount
from fleetledger.utils.client_resolver import resolve_client

__all__ = ["parse_date", "parse_month", "recent_months", "parse_amount", "resolve_client"]
