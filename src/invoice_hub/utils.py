"""
Utility functions for invoice data formatting.

Provides helpers for:
- Date parsing (day-first and ISO formats supported)
- Currency and amount formatting
- Due date arithmetic for payment reminders
"""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

CURRENCY = "EUR"
CURRENCY_SYMBOL = "€"


def parse_date(date_str: str | None) -> date | None:
    """
    Parse a display date string into a date object.

    Args:
        date_str: Date string in d/m/Y format (e.g., "25/12/2024") or ISO format

    Returns:
        date object if parsing succeeds, None otherwise
    """
    if date_str:
        date_str = date_str.strip()
    if not date_str:
        return None

    # Invoices are issued in Ireland, so day-first comes before ISO
    for fmt in ("%d/%m/%Y", "%d/%m/%y"):
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            pass

    try:
        return datetime.fromisoformat(date_str).date()
    except (ValueError, TypeError):
        pass

    return None


def format_amount(value: float) -> str:
    """
    Format a number with exactly two decimals and no grouping.

    Half cents round away from zero, using the exact binary value of the
    float, so 6.125 gives "6.13" while 1.005 (stored as 1.00499...) gives
    "1.00".
    """
    cents = Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{cents:f}"


def format_currency(value: float, currency: str = CURRENCY) -> str:
    """
    Format a currency amount with the currency code prefix.

    Args:
        value: Numeric amount to format.
        currency: Currency code (e.g., 'EUR').

    Returns:
        Formatted string like 'EUR 1234.56'.
    """
    return f"{currency} {format_amount(value)}"


def format_symbol_amount(value: float) -> str:
    """Format an amount with the euro symbol, e.g. '€184.50'."""
    return f"{CURRENCY_SYMBOL}{format_amount(value)}"


def format_print_date(value: date) -> str:
    """Format a date as DD/MM/YYYY for printed documents."""
    return value.strftime("%d/%m/%Y")


def days_until_due(due_date: str | None, today: date | None = None) -> int | None:
    """
    Return the number of days from today until the due date.

    Negative values mean the invoice is overdue.

    Args:
        due_date: Display due date string.
        today: Reference date, defaults to the local calendar date.

    Returns:
        Day difference, or None when the due date cannot be parsed.
    """
    parsed = parse_date(due_date)
    if parsed is None:
        return None
    return (parsed - (today or date.today())).days
