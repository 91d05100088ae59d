"""Utility functions for walletwise."""

from walletwise.utils.date_parser import parse_datetime, parse_timestamp
from walletwise.utils.amount_parser import parse_amount

__all__ = ["parse_datetime", "parse_timestamp", "parse_amount"]
