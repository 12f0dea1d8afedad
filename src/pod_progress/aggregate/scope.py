"""Scope filters for goals, milestones and check-ins.

Pod scoping follows ownership: a goal is in a pod when its owner is one of the
pod's members, and a milestone is in scope only through its parent goal.
Check-ins carry their own `pod_id`.
"""
from __future__ import annotations

import logging
from typing import Iterable, Sequence, TypeVar

from pod_progress.models import CheckIn, Goal, Milestone, Pod, Scope

log = logging.getLogger(__name__)

Record = TypeVar("Record", Goal, Milestone, CheckIn)


def _pod_member_ids(pod_id: str, pods: Iterable[Pod]) -> set[str]:
    """Return member ids of `pod_id`, or an empty set when the pod is unknown."""
    for pod in pods:
        if pod.id == pod_id:
            return set(pod.member_ids())
    log.debug("Pod %s not found; scope matches nothing", pod_id)
    return set()


def filter_goals(
    goals: Iterable[Goal],
    scope: Scope,
    pods: Iterable[Pod] = (),
) -> list[Goal]:
    """Return goals matching the user, pod and quarter of `scope`.

    `scope.week_number` does not apply to goals and is ignored.
    """
    members = _pod_member_ids(scope.pod_id, pods) if scope.pod_id is not None else None
    return [
        g for g in goals
        if (scope.user_id is None or g.user_id == scope.user_id)
        and (members is None or g.user_id in members)
        and (scope.quarter is None or g.quarter == scope.quarter)
    ]


def filter_milestones(
    milestones: Iterable[Milestone],
    scope: Scope,
    goals: Iterable[Goal],
    pods: Iterable[Pod] = (),
) -> list[Milestone]:
    """Return milestones whose parent goal is in `scope` and whose week matches.

    Args:
        milestones: Candidate milestones.
        scope: User/pod/quarter apply to the parent goal, week to the milestone.
        goals: Goals used to resolve each milestone's owner.
        pods: Pods used to resolve `scope.pod_id` membership.
    """
    goal_scope = scope.model_copy(update={"week_number": None})
    goal_ids = {g.id for g in filter_goals(goals, goal_scope, pods)}
    return [
        m for m in milestones
        if m.goal_id in goal_ids
        and (scope.week_number is None or m.week_number == scope.week_number)
    ]


def filter_check_ins(check_ins: Iterable[CheckIn], scope: Scope) -> list[CheckIn]:
    """Return check-ins matching user, pod and week; quarter is ignored."""
    return [
        c for c in check_ins
        if (scope.user_id is None or c.user_id == scope.user_id)
        and (scope.pod_id is None or c.pod_id == scope.pod_id)
        and (scope.week_number is None or c.week_number == scope.week_number)
    ]


def filter_by_scope(
    records: Sequence[Record],
    scope: Scope,
    *,
    goals: Iterable[Goal] = (),
    pods: Iterable[Pod] = (),
) -> list[Record]:
    """Filter a homogeneous collection of goals, milestones or check-ins.

    Dispatches on the type of the first record. Milestones need `goals` to
    resolve ownership; pod scoping of goals and milestones needs `pods`.

    Raises:
        TypeError: if the records are not goals, milestones or check-ins.
    """
    if not records:
        return []
    first = records[0]
    if isinstance(first, Goal):
        return filter_goals(records, scope, pods)  # type: ignore[arg-type, return-value]
    if isinstance(first, Milestone):
        return filter_milestones(records, scope, goals, pods)  # type: ignore[arg-type, return-value]
    if isinstance(first, CheckIn):
        return filter_check_ins(records, scope)  # type: ignore[arg-type, return-value]
    raise TypeError(f"Cannot scope records of type {type(first).__name__}")
