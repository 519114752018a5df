"""Plain-text rendering of the age studio page.

``render_report`` lays out the same blocks as the web page it replaces:
the current-age headline, the Years/Months/Days cards, the upcoming
milestone and the two insight cards.  Nothing here computes anything; it
only formats what ``chronospan.engine`` and ``chronospan.insights`` return.
"""

from chronospan.engine import AgeBreakdown, summarize
from chronospan.formatting import format_count, format_long_date
from chronospan.insights import InsightItem, build_milestone_insights, build_time_signatures

TITLE: str = "ChronoSpan Age Studio"
EMPTY_CARD_MESSAGE: str = "Awaiting a valid birth date to unlock insights."
MISSING_VALUE: str = "-"

TIME_SIGNATURE_TITLE: str = "Time signature"
TIME_SIGNATURE_DESCRIPTION: str = (
    "Your age is continuously evolving. These cards translate your chronology "
    "into evocative snapshots."
)
MILESTONES_TITLE: str = "Precision milestones"
MILESTONES_DESCRIPTION: str = (
    "Spotlight the next chapters worth celebrating, curated from cultural, "
    "professional, and wellness markers."
)


def render_insight_card(title: str, description: str, items: list[InsightItem]) -> list[str]:
    lines = [f"== {title} ==", description]
    if not items:
        lines.append(f"  {EMPTY_CARD_MESSAGE}")
        return lines
    width = max(len(item.label) for item in items)
    lines.extend(f"  {item.label.ljust(width)}  {item.value}" for item in items)
    return lines


def _render_statistics(breakdown: AgeBreakdown | None) -> list[str]:
    cards = (
        ("Years", breakdown.years if breakdown else MISSING_VALUE),
        ("Months", breakdown.months if breakdown else MISSING_VALUE),
        ("Days", breakdown.days if breakdown else MISSING_VALUE),
    )
    return ["  ".join(f"[{label}: {value}]" for label, value in cards)]


def _render_upcoming_milestone(breakdown: AgeBreakdown | None) -> list[str]:
    if breakdown is None or breakdown.next_milestone_age is None or breakdown.next_milestone_date is None:
        return []
    lines = [
        "Upcoming milestone",
        f"  Turning {breakdown.next_milestone_age}",
        f"  {format_long_date(breakdown.next_milestone_date)}",
    ]
    if breakdown.days_until_next_milestone is not None:
        lines.append(f"  {breakdown.days_until_next_milestone} days remaining")
    return lines


def render_report(breakdown: AgeBreakdown | None) -> str:
    """Render the full report for ``breakdown`` (None renders the placeholders)."""
    lines = [TITLE, "", "Current age", f"  {summarize(breakdown)}"]
    if breakdown is not None:
        lines.append(f"  {format_count(breakdown.total_days_lived)} days lived")
    lines.append("")
    lines.extend(_render_statistics(breakdown))

    milestone_lines = _render_upcoming_milestone(breakdown)
    if milestone_lines:
        lines.append("")
        lines.extend(milestone_lines)

    time_signatures = build_time_signatures(breakdown.total_days_lived if breakdown else None)
    lines.append("")
    lines.extend(render_insight_card(TIME_SIGNATURE_TITLE, TIME_SIGNATURE_DESCRIPTION, time_signatures))
    lines.append("")
    lines.extend(
        render_insight_card(MILESTONES_TITLE, MILESTONES_DESCRIPTION, build_milestone_insights(breakdown))
    )
    return "\n".join(lines)
