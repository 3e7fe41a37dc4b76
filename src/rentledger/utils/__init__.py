"""Utility functions for rentledger."""

from rentledger.utils.date_parser import parse_date
from rentledger.utils.amount_parser import DotPolicy, parse_amount

__all__ = ["parse_date", "parse_amount", "DotPolicy"]
