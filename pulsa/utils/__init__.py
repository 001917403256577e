"""Pulsa Utility Functions."""

from pulsa.utils.helpers import (
    TRANSACTION_DATE_FORMAT,
    format_transaction_date,
    parse_transaction_date,
)

__all__ = [
    "TRANSACTION_DATE_FORMAT",
    "format_transaction_date",
    "parse_transaction_date",
]
