"""Actor and assignment models consumed by the guards."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from hubguard.roles import Role
from hubguard.teams import TEAM_SCOPES, Team, TeamScope


class GroupMembership(BaseModel):
    """A user's role inside one group."""

    model_config = ConfigDict(frozen=True)

    group_id: str
    group_name: str = ""
    role: Role


class UserWithAccess(BaseModel):
    """An actor together with its group memberships.

    Memberships are keyed by group: a user holds at most one role per group.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    email: str = ""
    global_role: Role | None = None
    group_memberships: tuple[GroupMembership, ...] = ()

    @field_validator("group_memberships")
    @classmethod
    def _one_role_per_group(
        cls, memberships: tuple[GroupMembership, ...]
    ) -> tuple[GroupMembership, ...]:
        seen: set[str] = set()
        for membership in memberships:
            if membership.group_id in seen:
                raise ValueError(f"duplicate membership for group {membership.group_id!r}")
            seen.add(membership.group_id)
        return memberships


class TeamAssignment(BaseModel):
    """The team a user belongs to, bound to a group when the team is group-specific."""

    model_config = ConfigDict(frozen=True)

    team: Team
    group_id: str | None = None

    @model_validator(mode="after")
    def _specific_needs_group(self) -> TeamAssignment:
        if TEAM_SCOPES[self.team] is TeamScope.SPECIFIC and not self.group_id:
            raise ValueError(f"team {self.team.value!r} must be bound to a group")
        return self

    @property
    def scope(self) -> TeamScope:
        return TEAM_SCOPES[self.team]
