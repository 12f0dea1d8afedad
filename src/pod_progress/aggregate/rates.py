"""Completion rates and status breakdowns.

Every percentage is an integer in [0, 100], rounded half up, and an empty
denominator always yields 0.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from pod_progress.models import (
    CheckIn,
    Goal,
    GoalStatusCounts,
    GoalType,
    Milestone,
    MilestoneStatus,
    Pod,
    WeeklyBreakdown,
)


def percent(numerator: int, denominator: int) -> int:
    """Return round(100 * numerator / denominator) with halves rounded up.

    Integer arithmetic keeps .5 cases exact; a zero denominator returns 0.
    """
    if denominator <= 0:
        return 0
    return (200 * numerator + denominator) // (2 * denominator)


def completion_rate(goals: Sequence[Goal]) -> int:
    """Return the percentage of goals whose progress is 100."""
    completed = sum(1 for g in goals if g.progress == 100)
    return percent(completed, len(goals))


def average_progress(goals: Sequence[Goal]) -> int:
    """Return the rounded mean progress of `goals`, 0 when empty."""
    if not goals:
        return 0
    total = sum(g.progress for g in goals)
    return (2 * total + len(goals)) // (2 * len(goals))


def weekly_breakdown(milestones: Iterable[Milestone], week_number: int) -> WeeklyBreakdown:
    """Count milestones of `week_number` by status.

    `not_started` is whatever is neither completed nor in progress.
    """
    week = [m for m in milestones if m.week_number == week_number]
    total = len(week)
    completed = sum(1 for m in week if m.status is MilestoneStatus.COMPLETED)
    in_progress = sum(1 for m in week if m.status is MilestoneStatus.IN_PROGRESS)
    return WeeklyBreakdown(
        total=total,
        completed=completed,
        in_progress=in_progress,
        not_started=total - completed - in_progress,
        rate=percent(completed, total),
    )


def goal_status_counts(goals: Sequence[Goal]) -> GoalStatusCounts:
    completed = sum(1 for g in goals if g.progress == 100)
    in_progress = sum(1 for g in goals if 0 < g.progress < 100)
    return GoalStatusCounts(
        total=len(goals),
        completed=completed,
        in_progress=in_progress,
        not_started=len(goals) - completed - in_progress,
    )


def progress_by_type(goals: Sequence[Goal]) -> dict[GoalType, int]:
    """Return the average progress of life and work goals separately."""
    return {
        "life": average_progress([g for g in goals if g.type == "life"]),
        "work": average_progress([g for g in goals if g.type == "work"]),
    }


def has_checked_in(check_ins: Iterable[CheckIn], user_id: str, week_number: int) -> bool:
    return any(c.user_id == user_id and c.week_number == week_number for c in check_ins)


def check_in_participation(pod: Pod, check_ins: Sequence[CheckIn], week_number: int) -> int:
    """Return the percentage of pod members with a check-in in the pod for the week."""
    pod_check_ins = [c for c in check_ins if c.pod_id == pod.id]
    checked_in = sum(
        1 for member_id in pod.member_ids()
        if has_checked_in(pod_check_ins, member_id, week_number)
    )
    return percent(checked_in, len(pod.members))
