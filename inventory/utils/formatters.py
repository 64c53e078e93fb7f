"""
Formatting helpers for reports (CLI tables and JSON payloads).
"""
from decimal import Decimal, InvalidOperation
from datetime import date, datetime
from typing import Union, Optional


def num(value: Union[int, float, Decimal, str, None], decimals: Optional[int] = None) -> str:
    """
    Format a number with thousands separators.

    Examples:
        num(1500) -> "1,500"
        num(85000.00) -> "85,000"
        num(1500.5, 2) -> "1,500.50"
        num(None) -> "-"
    """
    if value is None or value == "":
        return "-"

    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return "-"

    if decimals is not None:
        return f"{number.quantize(Decimal(10) ** -decimals):,}"

    # Drop insignificant decimals
    if number == number.to_integral_value():
        return f"{int(number):,}"
    return f"{number.normalize():,}"


def money(value: Union[int, float, Decimal, str, None]) -> str:
    """Money with two decimals. money(85000) -> "85,000.00"."""
    return num(value, decimals=2)


def datetime_fmt(value: Union[datetime, date, None]) -> str:
    """dd/mm/yyyy HH:MM, or dd/mm/yyyy for plain dates."""
    if value is None:
        return "-"
    if isinstance(value, datetime):
        return value.strftime('%d/%m/%Y %H:%M')
    return value.strftime('%d/%m/%Y')


def iso(value: Union[datetime, date, None]) -> Optional[str]:
    """ISO-8601 string for JSON payloads."""
    return value.isoformat() if value else None


def pad_row(*columns, widths=(25, 10)) -> str:
    """
    Left-justify columns into fixed widths; the last column is not padded.

    pad_row('HP Printer', 8, 'Tech') -> 'HP Printer               8         Tech'
    """
    cells = []
    for index, column in enumerate(columns):
        text = '' if column is None else str(column)
        if index < len(columns) - 1:
            width = widths[index] if index < len(widths) else widths[-1]
            text = text.ljust(width)
        cells.append(text)
    return ''.join(cells)
