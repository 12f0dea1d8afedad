"""Team and individual views: member ranking, pod and user summaries."""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable

from pod_progress.aggregate.rates import (
    average_progress,
    check_in_participation,
    completion_rate,
    goal_status_counts,
    weekly_breakdown,
)
from pod_progress.aggregate.scope import filter_goals, filter_milestones
from pod_progress.models import (
    Goal,
    MemberStats,
    Milestone,
    MilestoneStatus,
    Pod,
    Scope,
    Snapshot,
    TeamSummary,
    UserSummary,
    WeekInfo,
)
from pod_progress.weeks.resolver import current_week_number, quarter_label, weeks_elapsed

log = logging.getLogger(__name__)


def pod_current_week(pod: Pod, today: date | datetime | None = None) -> int:
    """`current_week_number` using the pod's own week-start day."""
    return current_week_number(pod.settings.week_start_day, today)


def pod_weeks_elapsed(pod: Pod, today: date | datetime | None = None) -> list[WeekInfo]:
    """`weeks_elapsed` using the pod's own week-start day."""
    return weeks_elapsed(pod.settings.week_start_day, today)


def rank_members(
    pod: Pod,
    goals: Iterable[Goal],
    milestones: Iterable[Milestone],
    quarter: str,
    week_number: int,
) -> list[MemberStats]:
    """Rank pod members by goal completion rate for a quarter.

    Each member's goals are limited to `quarter`; the weekly breakdown covers
    milestones of those goals in `week_number`. Members with equal rates keep
    their order in the pod's member list.

    Args:
        pod: Pod whose members are ranked.
        goals: Goals of any users and quarters.
        milestones: Milestones of any goals.
        quarter: Quarter label such as "Q2 2025".
        week_number: Quarter-relative week for the breakdown.

    Returns:
        One `MemberStats` per member, highest completion rate first.
    """
    goals = list(goals)
    milestones = list(milestones)

    stats: list[MemberStats] = []
    for member in pod.members:
        member_goals = filter_goals(goals, Scope(user_id=member.id, quarter=quarter))
        member_milestones = filter_milestones(
            milestones, Scope(week_number=week_number), member_goals
        )
        stats.append(
            MemberStats(
                member=member,
                goals_count=len(member_goals),
                completion_rate=completion_rate(member_goals),
                weekly_breakdown=weekly_breakdown(member_milestones, week_number),
            )
        )

    # sorted() is stable, also with reverse=True
    ranked = sorted(stats, key=lambda s: s.completion_rate, reverse=True)
    log.debug("Ranked %d members of pod %s for %s week %d", len(ranked), pod.id, quarter, week_number)
    return ranked


def team_summary(
    snapshot: Snapshot,
    pod_id: str,
    quarter: str | None = None,
    week_number: int | None = None,
    today: date | datetime | None = None,
) -> TeamSummary | None:
    """Compute the team analytics view of one pod.

    Args:
        snapshot: Consistent view of all entity collections.
        pod_id: Pod to summarise.
        quarter: Quarter label; defaults to the quarter containing `today`.
        week_number: Quarter week; defaults to the pod's current week.
        today: Reference day for the defaults.

    Returns:
        A `TeamSummary`, or None when `pod_id` is not in the snapshot.
    """
    pod = snapshot.pod(pod_id)
    if pod is None:
        log.warning("Pod %s not found in snapshot", pod_id)
        return None

    quarter = quarter or quarter_label(today)
    if week_number is None:
        week_number = pod_current_week(pod, today)

    pod_goals = filter_goals(snapshot.goals, Scope(pod_id=pod.id, quarter=quarter), [pod])
    week_milestones = filter_milestones(
        snapshot.milestones, Scope(week_number=week_number), pod_goals
    )

    return TeamSummary(
        pod_id=pod.id,
        quarter=quarter,
        week_number=week_number,
        goals=goal_status_counts(pod_goals),
        completion_rate=completion_rate(pod_goals),
        average_progress=average_progress(pod_goals),
        weekly_breakdown=weekly_breakdown(week_milestones, week_number),
        check_in_rate=check_in_participation(pod, snapshot.check_ins, week_number),
        members=rank_members(pod, pod_goals, snapshot.milestones, quarter, week_number),
    )


def user_summary(
    snapshot: Snapshot,
    user_id: str,
    quarter: str | None = None,
    week_number: int | None = None,
    today: date | datetime | None = None,
) -> UserSummary:
    """Compute the individual analytics and profile numbers of one user.

    Quarter numbers cover the user's goals in `quarter`; the milestone totals
    cover every goal the user owns. A user without goals gets all zeros.

    Args:
        snapshot: Consistent view of all entity collections.
        user_id: User to summarise.
        quarter: Quarter label; defaults to the quarter containing `today`.
        week_number: Quarter week; defaults to the current week of the first
            pod the user belongs to, or of a Monday week when there is none.
        today: Reference day for the defaults.
    """
    quarter = quarter or quarter_label(today)
    if week_number is None:
        pod = next((p for p in snapshot.pods if user_id in p.member_ids()), None)
        week_number = pod_current_week(pod, today) if pod else current_week_number(1, today)

    all_goals = filter_goals(snapshot.goals, Scope(user_id=user_id))
    quarter_goals = filter_goals(all_goals, Scope(quarter=quarter))
    all_milestones = filter_milestones(snapshot.milestones, Scope(), all_goals)
    week_milestones = filter_milestones(
        all_milestones, Scope(week_number=week_number), quarter_goals
    )
    counts = goal_status_counts(quarter_goals)

    log.debug("User %s: %d goals in %s, %d milestones", user_id, counts.total, quarter, len(all_milestones))
    return UserSummary(
        user_id=user_id,
        quarter=quarter,
        week_number=week_number,
        goals=counts,
        completion_rate=completion_rate(quarter_goals),
        average_progress=average_progress(quarter_goals),
        weekly_breakdown=weekly_breakdown(week_milestones, week_number),
        total_goals=len(all_goals),
        completed_goals=sum(1 for g in all_goals if g.progress == 100),
        total_milestones=len(all_milestones),
        completed_milestones=sum(
            1 for m in all_milestones if m.status is MilestoneStatus.COMPLETED
        ),
    )
