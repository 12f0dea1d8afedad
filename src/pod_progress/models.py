"""Pydantic models for pod snapshots and computed results.

Entity models mirror the records supplied by the surrounding application
(camelCase on the wire, snake_case in Python). They are frozen: the engine
reads them and derives numbers, it never mutates them. Result models define
the shapes handed back to dashboards.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

ENTITY_CONFIG = ConfigDict(
    extra="forbid",
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)

GoalType = Literal["life", "work"]


class MilestoneStatus(str, Enum):
    """Closed set of milestone states."""
    NOT_STARTED = "not-started"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class User(BaseModel):
    """Identity record of a pod member."""
    model_config = ENTITY_CONFIG
    id: str
    name: str
    email: str
    avatar_url: str | None = None
    created_at: datetime | None = None


class PodSettings(BaseModel):
    """Per-pod configuration.

    Attributes:
        week_start_day: First day of the pod's tracking week, 0 = Sunday
            through 6 = Saturday. Values outside that range are rejected here
            so the calendar code never sees them.
    """
    model_config = ENTITY_CONFIG
    week_start_day: int = Field(1, ge=0, le=6)


class Pod(BaseModel):
    """A small group of users sharing goals and week settings."""
    model_config = ENTITY_CONFIG
    id: str
    name: str = ""
    description: str = ""
    members: list[User] = Field(default_factory=list)
    owner_id: str | None = None
    settings: PodSettings = Field(default_factory=PodSettings)
    created_at: datetime | None = None

    def member_ids(self) -> list[str]:
        return [m.id for m in self.members]


class Goal(BaseModel):
    """Quarterly goal owned by one user.

    Attributes:
        quarter: Free-form quarter label such as "Q2 2025".
        progress: Percentage complete in [0, 100].
    """
    model_config = ENTITY_CONFIG
    id: str
    user_id: str
    pod_id: str
    type: GoalType
    quarter: str
    progress: int = Field(0, ge=0, le=100)
    completed_at: datetime | None = None
    title: str = ""
    description: str = ""
    created_at: datetime | None = None


class Milestone(BaseModel):
    """Weekly sub-task of a goal.

    A milestone has no pod of its own; it belongs to whatever pod its parent
    goal's owner is a member of.
    """
    model_config = ENTITY_CONFIG
    id: str
    goal_id: str
    week_number: int = Field(..., ge=1, le=13)
    status: MilestoneStatus = MilestoneStatus.NOT_STARTED
    completed_at: datetime | None = None
    title: str = ""
    description: str = ""
    created_at: datetime | None = None

    @model_validator(mode="after")
    def _completed_at_matches_status(self) -> Milestone:
        is_completed = self.status is MilestoneStatus.COMPLETED
        if is_completed != (self.completed_at is not None):
            raise ValueError("completedAt must be set if and only if status is 'completed'")
        return self


class CheckIn(BaseModel):
    """Weekly written check-in of a member."""
    model_config = ENTITY_CONFIG
    id: str
    user_id: str
    pod_id: str
    week_number: int = Field(..., ge=1, le=13)
    content: str = ""
    challenges: str = ""
    wins: str = ""
    next_steps: str = ""
    created_at: datetime | None = None


class Snapshot(BaseModel):
    """Caller-owned, mutually consistent view of all entity collections."""
    model_config = ENTITY_CONFIG
    users: list[User] = Field(default_factory=list)
    pods: list[Pod] = Field(default_factory=list)
    goals: list[Goal] = Field(default_factory=list)
    milestones: list[Milestone] = Field(default_factory=list)
    check_ins: list[CheckIn] = Field(default_factory=list)

    def pod(self, pod_id: str) -> Pod | None:
        return next((p for p in self.pods if p.id == pod_id), None)


class Scope(BaseModel):
    """Optional filters applied by `filter_by_scope`; unset fields match all."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    user_id: str | None = None
    pod_id: str | None = None
    quarter: str | None = None
    week_number: int | None = None


# ---------------------------------------------------------
# Results
# ---------------------------------------------------------

class WeekInfo(BaseModel):
    """A quarter-relative week and its printable date range."""
    model_config = ConfigDict(extra="forbid")
    number: int = Field(..., ge=1)
    date_range: str


class WeeklyBreakdown(BaseModel):
    """Milestone status counts for one week.

    Attributes:
        total: Milestones scheduled for the week.
        completed: Milestones with status `completed`.
        in_progress: Milestones with status `in-progress`.
        not_started: Everything else (`total - completed - in_progress`).
        rate: Rounded percentage of completed milestones, 0 when empty.
    """
    model_config = ConfigDict(extra="forbid")
    total: int = Field(0, ge=0)
    completed: int = Field(0, ge=0)
    in_progress: int = Field(0, ge=0)
    not_started: int = Field(0, ge=0)
    rate: int = Field(0, ge=0, le=100)


class GoalStatusCounts(BaseModel):
    """Goal counts by progress bucket (100, 1-99, 0)."""
    model_config = ConfigDict(extra="forbid")
    total: int = Field(0, ge=0)
    completed: int = Field(0, ge=0)
    in_progress: int = Field(0, ge=0)
    not_started: int = Field(0, ge=0)


class MemberStats(BaseModel):
    """One row of the team ranking."""
    model_config = ConfigDict(extra="forbid")
    member: User
    goals_count: int = Field(..., ge=0)
    completion_rate: int = Field(..., ge=0, le=100)
    weekly_breakdown: WeeklyBreakdown


class TeamSummary(BaseModel):
    """Everything the team analytics view shows for one pod, quarter and week."""
    model_config = ConfigDict(extra="forbid")
    pod_id: str
    quarter: str
    week_number: int
    goals: GoalStatusCounts
    completion_rate: int = Field(..., ge=0, le=100)
    average_progress: int = Field(..., ge=0, le=100)
    weekly_breakdown: WeeklyBreakdown
    check_in_rate: int = Field(..., ge=0, le=100)
    members: list[MemberStats]


class UserSummary(BaseModel):
    """Individual analytics and profile numbers of one user.

    Attributes:
        goals: Status counts of the user's goals in `quarter`.
        completion_rate: Share of those goals at 100%.
        average_progress: Mean progress of those goals.
        weekly_breakdown: Milestones of those goals in `week_number`.
        total_goals: Goals of the user in any quarter.
        completed_goals: Goals of the user at 100% in any quarter.
        total_milestones: Milestones of all the user's goals.
        completed_milestones: Those milestones with status `completed`.
    """
    model_config = ConfigDict(extra="forbid")
    user_id: str
    quarter: str
    week_number: int
    goals: GoalStatusCounts
    completion_rate: int = Field(..., ge=0, le=100)
    average_progress: int = Field(..., ge=0, le=100)
    weekly_breakdown: WeeklyBreakdown
    total_goals: int = Field(..., ge=0)
    completed_goals: int = Field(..., ge=0)
    total_milestones: int = Field(..., ge=0)
    completed_milestones: int = Field(..., ge=0)
