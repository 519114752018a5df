"""Display helpers shared by the insight cards and the text report."""

import calendar
import datetime


def format_long_date(value: datetime.date) -> str:
    """Render a date as ``Month D, YYYY`` (e.g. ``April 15, 2025``)."""
    return f"{calendar.month_name[value.month]} {value.day}, {value.year}"


def format_count(value: int) -> str:
    """Render an integer with comma thousands separators."""
    return f"{value:,}"
