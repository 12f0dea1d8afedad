"""pandas table views of computed results.

These build small DataFrames for display or export. The numbers themselves
come from `rates` and `members`; this module only reshapes them.
"""
from __future__ import annotations

from typing import Iterable

import pandas as pd

from pod_progress.aggregate.rates import weekly_breakdown
from pod_progress.models import MemberStats, Milestone

MILESTONE_COLUMNS = ["week_number", "goal_id", "id", "title", "status", "completed_at"]
BREAKDOWN_COLUMNS = ["week_number", "total", "completed", "in_progress", "not_started", "rate"]
MEMBER_COLUMNS = [
    "rank",
    "member_id",
    "name",
    "goals_count",
    "completion_rate",
    "weekly_total",
    "weekly_completed",
    "weekly_rate",
]


def milestones_by_week(milestones: Iterable[Milestone]) -> pd.DataFrame:
    """Return milestones as rows grouped by week.

    Returns:
        DataFrame with columns `week_number`, `goal_id`, `id`, `title`,
        `status`, `completed_at`, sorted by week; original order is kept
        within a week.
    """
    rows = [
        {
            "week_number": m.week_number,
            "goal_id": m.goal_id,
            "id": m.id,
            "title": m.title,
            "status": m.status.value,
            "completed_at": m.completed_at,
        }
        for m in milestones
    ]
    if not rows:
        return pd.DataFrame(columns=MILESTONE_COLUMNS)

    return (
        pd.DataFrame(rows, columns=MILESTONE_COLUMNS)
        .sort_values("week_number", kind="stable")
        .reset_index(drop=True)
    )


def weekly_trend(milestones: Iterable[Milestone], weeks: Iterable[int]) -> pd.DataFrame:
    """Return one milestone breakdown row per requested week.

    Args:
        milestones: Milestones already scoped to a user or pod.
        weeks: Week numbers to report, in output order.

    Returns:
        DataFrame with columns `week_number`, `total`, `completed`,
        `in_progress`, `not_started`, `rate`.
    """
    milestones = list(milestones)
    rows = [
        {"week_number": w, **weekly_breakdown(milestones, w).model_dump()}
        for w in weeks
    ]
    return pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS)


def member_stats_frame(stats: Iterable[MemberStats]) -> pd.DataFrame:
    """Flatten a member ranking into a table with a 1-based `rank` column."""
    rows = [
        {
            "rank": i,
            "member_id": s.member.id,
            "name": s.member.name,
            "goals_count": s.goals_count,
            "completion_rate": s.completion_rate,
            "weekly_total": s.weekly_breakdown.total,
            "weekly_completed": s.weekly_breakdown.completed,
            "weekly_rate": s.weekly_breakdown.rate,
        }
        for i, s in enumerate(stats, start=1)
    ]
    return pd.DataFrame(rows, columns=MEMBER_COLUMNS)
