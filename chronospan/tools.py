"""Strands tools that expose the age engine to the assistant.

Each function is decorated with ``@tool`` so the Strands framework can
expose it to the language model.  Input validation is performed before any
computation so that the model receives a clear error message rather than a
cryptic Python traceback.
"""

import dataclasses
import datetime
import logging

from strands import tool

from chronospan.engine import compute_age, parse_calendar_date
from chronospan.insights import build_milestone_insights, build_time_signatures

logger: logging.Logger = logging.getLogger(__name__)

_MAX_DATE_LEN = 10
_MIN_DATE = datetime.date(1900, 1, 1)
_MAX_DATE = datetime.date(2100, 12, 31)


def _validate_date_param(name: str, value: object) -> datetime.date:
    """Check one tool argument and return it as a date.

    Raises:
        ValueError: naming ``name`` when the value is not a string, is too
            long, is not a valid YYYY-MM-DD date, or is outside the
            supported range.
    """
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string.")
    if len(value) > _MAX_DATE_LEN:
        raise ValueError(f"{name} exceeds maximum length of {_MAX_DATE_LEN}.")

    parsed = parse_calendar_date(value)
    if parsed is None:
        raise ValueError(f"{name} is not a valid ISO date (YYYY-MM-DD).")
    if not (_MIN_DATE <= parsed <= _MAX_DATE):
        raise ValueError(f"{name} is outside the allowed range (1900-01-01 to 2100-12-31).")
    return parsed


@tool
def get_current_date() -> str:
    """Get today's date in YYYY-MM-DD format.

    Use this tool to retrieve the current date when the user does not give a
    reference date and you need to calculate their age as of today.

    Returns:
        Today's date as a string in YYYY-MM-DD format.
    """
    today = datetime.date.today().isoformat()
    logger.debug("get_current_date called, returning %s", today)
    return today


@tool
def calculate_age(birth_date: str, reference_date: str) -> dict:
    """Calculate a person's age and their next milestone birthday.

    Use this tool once you know the birth date and the reference date (use
    get_current_date first when the user means "today").  The result holds
    years, months and days of age, total days lived, the next milestone age
    with its date and the days remaining, plus ready-to-display time
    signature and milestone insight rows.

    Args:
        birth_date: The birth date in YYYY-MM-DD format.
        reference_date: The date to measure the age at, in YYYY-MM-DD format.
            Must not be earlier than birth_date.

    Returns:
        A dictionary describing the age breakdown and its insights.

    Raises:
        ValueError: If either date is not in YYYY-MM-DD format, is outside
            1900-01-01 to 2100-12-31, or if birth_date is after
            reference_date.
    """
    # Log input lengths, not raw values.
    logger.debug(
        "calculate_age called with %d-char birth_date, %d-char reference_date",
        len(birth_date) if isinstance(birth_date, str) else -1,
        len(reference_date) if isinstance(reference_date, str) else -1,
    )

    birth = _validate_date_param("birth_date", birth_date)
    reference = _validate_date_param("reference_date", reference_date)

    breakdown = compute_age(birth, reference)
    if breakdown is None:
        raise ValueError(
            f"birth_date ({birth_date}) must not be after reference_date ({reference_date})."
        )

    result = dataclasses.asdict(breakdown)
    if breakdown.next_milestone_date is not None:
        result["next_milestone_date"] = breakdown.next_milestone_date.isoformat()
    result["time_signature"] = [
        dataclasses.asdict(item) for item in build_time_signatures(breakdown.total_days_lived)
    ]
    result["milestone_insights"] = [
        dataclasses.asdict(item) for item in build_milestone_insights(breakdown)
    ]
    logger.debug("calculate_age result: %d years, %d days lived", breakdown.years, breakdown.total_days_lived)
    return result
