from __future__ import annotations

import pytest

from pod_progress.aggregate.scope import (
    filter_by_scope,
    filter_check_ins,
    filter_goals,
    filter_milestones,
)
from pod_progress.models import Scope

from factories import make_check_in, make_goal, make_milestone, make_pod, make_user

PODS = [make_pod("podA", ["u1", "u2"]), make_pod("podB", ["u3"])]
GOALS = [
    make_goal("g1", "u1", quarter="Q2 2025", pod_id="podA"),
    make_goal("g2", "u2", quarter="Q2 2025", pod_id="podA"),
    # owner is not a member of podA, so the goal is not podA's
    make_goal("g3", "u3", quarter="Q2 2025", pod_id="podA"),
    make_goal("g4", "u1", quarter="Q1 2025", pod_id="podA"),
]
MILESTONES = [
    make_milestone("m1", "g1", 3),
    make_milestone("m2", "g2", 3, "completed"),
    make_milestone("m3", "g3", 3),
    make_milestone("m4", "g4", 3),
    make_milestone("m5", "g1", 4, "in-progress"),
    make_milestone("m6", "orphan", 3),
]


def _ids(records: list) -> list[str]:
    return [r.id for r in records]


def test_filter_goals_by_pod_uses_membership() -> None:
    out = filter_goals(GOALS, Scope(pod_id="podA", quarter="Q2 2025"), PODS)
    assert _ids(out) == ["g1", "g2"]


def test_filter_goals_by_user_and_quarter() -> None:
    assert _ids(filter_goals(GOALS, Scope(user_id="u1"))) == ["g1", "g4"]
    assert _ids(filter_goals(GOALS, Scope(user_id="u1", quarter="Q1 2025"))) == ["g4"]
    assert _ids(filter_goals(GOALS, Scope())) == ["g1", "g2", "g3", "g4"]


def test_filter_goals_unknown_pod_matches_nothing() -> None:
    assert filter_goals(GOALS, Scope(pod_id="missing"), PODS) == []


def test_filter_milestones_joins_through_parent_goal() -> None:
    scope = Scope(pod_id="podA", quarter="Q2 2025", week_number=3)
    assert _ids(filter_milestones(MILESTONES, scope, GOALS, PODS)) == ["m1", "m2"]


def test_filter_milestones_by_user_across_quarters() -> None:
    out = filter_milestones(MILESTONES, Scope(user_id="u1"), GOALS)
    assert _ids(out) == ["m1", "m4", "m5"]


def test_filter_milestones_drops_orphans() -> None:
    out = filter_milestones(MILESTONES, Scope(week_number=3), GOALS)
    assert "m6" not in _ids(out)


def test_filter_check_ins_uses_direct_pod_id() -> None:
    check_ins = [
        make_check_in("c1", "u1", 2, pod_id="podA"),
        make_check_in("c2", "u1", 3, pod_id="podA"),
        make_check_in("c3", "u1", 2, pod_id="podB"),
    ]
    assert _ids(filter_check_ins(check_ins, Scope(pod_id="podA", week_number=2))) == ["c1"]
    assert _ids(filter_check_ins(check_ins, Scope(user_id="u1"))) == ["c1", "c2", "c3"]


def test_filter_by_scope_dispatches_on_record_type() -> None:
    scope = Scope(pod_id="podA", quarter="Q2 2025", week_number=3)
    assert _ids(filter_by_scope(GOALS, scope, pods=PODS)) == ["g1", "g2"]
    assert _ids(filter_by_scope(MILESTONES, scope, goals=GOALS, pods=PODS)) == ["m1", "m2"]
    check_ins = [make_check_in("c1", "u1", 3, pod_id="podA")]
    assert _ids(filter_by_scope(check_ins, scope)) == ["c1"]
    assert filter_by_scope([], scope) == []


def test_filter_by_scope_rejects_other_records() -> None:
    with pytest.raises(TypeError):
        filter_by_scope([make_user("u1")], Scope())  # type: ignore[type-var]
