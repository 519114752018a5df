"""chronospan: age breakdowns, milestone countdowns and time-signature insights.

Public API
----------
compute_age
    Pure function returning an ``AgeBreakdown`` (or None for invalid input).
build_time_signatures, build_milestone_insights
    Insight-card rows derived from a breakdown.
render_report
    Plain-text rendering of a breakdown and its insights.

The optional Strands assistant lives in ``chronospan.agent`` and is not
imported here, so using the engine never initialises the SDK.

Example
-------
>>> from chronospan import compute_age
>>> compute_age("1995-04-15", "2024-04-15").years
29
"""

from chronospan.engine import MILESTONE_AGES, AgeBreakdown, compute_age, summarize
from chronospan.insights import InsightItem, build_milestone_insights, build_time_signatures
from chronospan.report import render_report

__all__: list[str] = [
    "MILESTONE_AGES",
    "AgeBreakdown",
    "InsightItem",
    "build_milestone_insights",
    "build_time_signatures",
    "compute_age",
    "render_report",
    "summarize",
]
