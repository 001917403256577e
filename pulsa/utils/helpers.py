"""Date and response formatting helpers."""

import re
from datetime import date, datetime

from pulsa.core.exceptions import ValidationError

# Transaction dates travel as dd-mm-yyyy in both directions.
TRANSACTION_DATE_FORMAT = "%d-%m-%Y"
_TRANSACTION_DATE_RE = re.compile(r"^\d{2}-\d{2}-\d{4}$")


def parse_transaction_date(value: str) -> date:
    """Parse a transaction date in strict ``dd-mm-yyyy`` form.

    Two-digit day and month are required; ``strptime`` alone would also
    accept ``5-1-2024``.

    Raises:
        ValidationError: If the string is not a valid dd-mm-yyyy date
    """
    if not isinstance(value, str) or not _TRANSACTION_DATE_RE.match(value):
        raise ValidationError(
            "invalid date format. Please use dd-mm-yyyy format",
            {"transaction_date": value},
        )
    try:
        return datetime.strptime(value, TRANSACTION_DATE_FORMAT).date()
    except ValueError as e:
        raise ValidationError(
            f"invalid date format. Please use dd-mm-yyyy format: {e}",
            {"transaction_date": value},
        ) from e


def format_transaction_date(value: date | None) -> str:
    """Format a date as ``dd-mm-yyyy``; ``None`` becomes an empty string."""
    if value is None:
        return ""
    return value.strftime(TRANSACTION_DATE_FORMAT)
