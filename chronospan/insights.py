"""Insight cards derived from an ``AgeBreakdown``.

Two cards are built here: the "time signature" (lived duration restated as
weeks, hours and heartbeats) and the "precision milestones" countdown.  Each
builder returns a list of label/value rows; an empty list means the card has
nothing to show yet.
"""

from dataclasses import dataclass

from chronospan.engine import AgeBreakdown
from chronospan.formatting import format_count, format_long_date

# Illustrative average only; not a medical figure.
HEARTBEATS_PER_DAY: int = 104_000

LEGACY_MILESTONE_AGE: int = 50


@dataclass(frozen=True)
class InsightItem:
    """A single label/value row on an insight card."""

    label: str
    value: str


@dataclass(frozen=True)
class TimeSignature:
    weeks_experienced: int
    hours_alive: int
    approx_heartbeats: int


def compute_time_signature(total_days_lived: int | None) -> TimeSignature | None:
    """Restate ``total_days_lived`` in other units.

    Returns None when there is no lived duration to describe (None or 0).
    """
    if not total_days_lived:
        return None
    return TimeSignature(
        weeks_experienced=total_days_lived // 7,
        hours_alive=total_days_lived * 24,
        approx_heartbeats=total_days_lived * HEARTBEATS_PER_DAY,
    )


def build_time_signatures(total_days_lived: int | None) -> list[InsightItem]:
    signature = compute_time_signature(total_days_lived)
    if signature is None:
        return []
    return [
        InsightItem("Weeks experienced", format_count(signature.weeks_experienced)),
        InsightItem("Hours alive", format_count(signature.hours_alive)),
        InsightItem("Approx. heartbeats", format_count(signature.approx_heartbeats)),
    ]


def milestone_mood(age: int) -> str:
    """Label the tone of an upcoming milestone."""
    return "Legacy focus" if age >= LEGACY_MILESTONE_AGE else "Momentum phase"


def build_milestone_insights(breakdown: AgeBreakdown | None) -> list[InsightItem]:
    """Rows for the next-milestone card.

    Empty when ``breakdown`` is None or every milestone has already passed.
    """
    if breakdown is None or breakdown.next_milestone_age is None or breakdown.next_milestone_date is None:
        return []

    days_remaining = breakdown.days_until_next_milestone
    return [
        InsightItem(
            f"Next milestone: {breakdown.next_milestone_age}",
            format_long_date(breakdown.next_milestone_date),
        ),
        InsightItem("Days remaining", str(days_remaining) if days_remaining is not None else "--"),
        InsightItem("Seasonal narrative", milestone_mood(breakdown.next_milestone_age)),
    ]
