"""Age engine: derives an age breakdown and the next milestone from two dates.

Everything here is pure and stateless.  Invalid input (a missing date, a
malformed date, or a birth date after the reference date) is reported by
returning ``None`` rather than raising, so presentation code can fall back
to a placeholder without a try/except around every keystroke.

The ``months`` and ``days`` components are intentionally approximate:
``months`` is the whole-month count modulo 12, and ``days`` is the day count
since the last birthday modulo a fixed 30 rather than the true length of the
current month.  Keep both formulas as they are; displayed results depend on
them.
"""

import calendar
import datetime
import logging
import re
from dataclasses import dataclass

from dateutil.relativedelta import relativedelta

logger: logging.Logger = logging.getLogger(__name__)

MILESTONE_AGES: tuple[int, ...] = (1, 5, 10, 13, 16, 18, 21, 25, 30, 40, 50, 60, 65, 75, 90)

INVALID_INPUT_PLACEHOLDER: str = "Set a valid birth date"

_DAYS_MODULUS = 30
_ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

DateInput = datetime.date | str | None


@dataclass(frozen=True)
class AgeBreakdown:
    """Age between a birth date and a reference date.

    Attributes:
        years: Completed birthdays.
        months: Whole months elapsed, modulo 12.
        days: Days since the last birthday, modulo 30.
        total_days_lived: Whole days between the two dates.
        next_milestone_age: Smallest entry of ``MILESTONE_AGES`` above
            ``years``, or None once every milestone has passed.
        next_milestone_date: The birthday on which that age is reached.
        days_until_next_milestone: Days from the reference date to
            ``next_milestone_date``.
    """

    years: int
    months: int
    days: int
    total_days_lived: int
    next_milestone_age: int | None = None
    next_milestone_date: datetime.date | None = None
    days_until_next_milestone: int | None = None


def parse_calendar_date(value: object) -> datetime.date | None:
    """Normalise a date-like value to a ``datetime.date``.

    Accepts a ``date``, a ``datetime`` (the time of day is dropped) or a
    ``YYYY-MM-DD`` string.  Returns None for anything else, including strings
    that look right but name an impossible day such as ``2023-02-29``.
    """
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str):
        return None

    candidate = value.strip()
    if not _ISO_DATE_PATTERN.match(candidate):
        return None
    try:
        return datetime.date.fromisoformat(candidate)
    except ValueError:
        return None


def add_years(value: datetime.date, years: int) -> datetime.date | None:
    """Return ``value`` moved forward by whole years.

    A 29 February start lands on 28 February in common years.  Returns None
    when the result would be past ``datetime.date.max``.
    """
    try:
        return value + relativedelta(years=years)
    except (ValueError, OverflowError):
        return None


def completed_years(start: datetime.date, end: datetime.date) -> int:
    """Whole years from ``start`` to ``end`` (``start <= end``).

    The year counts once ``end`` reaches the month and day of ``start``.  A
    29 February start therefore completes its year on 1 March in common
    years, not on 28 February.
    """
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


def _rolled_date(year: int, month_index: int, day: int) -> datetime.date:
    """Build a date the lenient way: months past December and days past the
    month's end roll forward into the following month or year."""
    year += month_index // 12
    month_index %= 12
    return datetime.date(year, month_index + 1, 1) + datetime.timedelta(days=day - 1)


def _is_last_day_of_month(value: datetime.date) -> bool:
    return value.day == calendar.monthrange(value.year, value.month)[1]


def completed_months(start: datetime.date, end: datetime.date) -> int:
    """Whole months from ``start`` to ``end`` (``start <= end``).

    ``end`` is moved back by the calendar-month difference and the month
    counts as complete if that lands on or after ``start``.  Two quirks are
    kept on purpose:

    - an ``end`` on 28 or 29 February is first pushed to "30 February",
      which rolls into early March (2000-01-31 to 2000-02-28 is one month);
    - an ``end`` on the last day of its month completes the month only when
      the calendar-month difference is exactly one (2023-01-31 to
      2023-04-30 is two months, not three).
    """
    difference = (end.year - start.year) * 12 + end.month - start.month
    if difference < 1:
        return 0

    year, month_index, day = end.year, end.month - 1, end.day
    if end.month == 2 and end.day > 27:
        pushed = _rolled_date(year, 1, 30)
        year, month_index, day = pushed.year, pushed.month - 1, pushed.day

    last_month_not_full = _rolled_date(year, month_index - difference, day) < start
    if difference == 1 and _is_last_day_of_month(end) and end > start:
        last_month_not_full = False
    return difference - int(last_month_not_full)


def next_milestone_age(years: int) -> int | None:
    """Return the first milestone age strictly greater than ``years``."""
    return next((age for age in MILESTONE_AGES if age > years), None)


def compute_age(birth: DateInput, reference: DateInput) -> AgeBreakdown | None:
    """Compute the age breakdown of ``birth`` as seen on ``reference``.

    Args:
        birth: The birth date.
        reference: The date the age is measured at, usually today.

    Returns:
        A fresh ``AgeBreakdown``, or None when either date is missing or
        malformed, or when ``birth`` is after ``reference``.
    """
    birth_date = parse_calendar_date(birth)
    reference_date = parse_calendar_date(reference)

    if birth_date is None or reference_date is None:
        logger.debug(
            "compute_age rejected input: birth_valid=%s reference_valid=%s",
            birth_date is not None,
            reference_date is not None,
        )
        return None
    if birth_date > reference_date:
        logger.debug("compute_age rejected input: birth date is after reference date")
        return None

    years = completed_years(birth_date, reference_date)
    months = completed_months(birth_date, reference_date) % 12

    last_birthday = add_years(birth_date, years)
    days = (reference_date - last_birthday).days % _DAYS_MODULUS
    total_days_lived = (reference_date - birth_date).days

    milestone_age = next_milestone_age(years)
    milestone_date = add_years(birth_date, milestone_age) if milestone_age is not None else None
    if milestone_date is None:
        milestone_age = None
    days_until = (milestone_date - reference_date).days if milestone_date is not None else None

    return AgeBreakdown(
        years=years,
        months=months,
        days=days,
        total_days_lived=total_days_lived,
        next_milestone_age=milestone_age,
        next_milestone_date=milestone_date,
        days_until_next_milestone=days_until,
    )


def summarize(breakdown: AgeBreakdown | None) -> str:
    """One-line age summary, or the invalid-input placeholder."""
    if breakdown is None:
        return INVALID_INPUT_PLACEHOLDER
    return f"{breakdown.years} years {breakdown.months} months {breakdown.days} days"
