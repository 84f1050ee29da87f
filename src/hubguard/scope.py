"""Team-axis guards that enforce team scope against a target group.

``team_has_permission`` only answers whether a team's permission set holds a
permission. Whether that applies to a given group depends on scope: teams
scoped ``all`` cover every group, ``specific`` teams only the group they are
bound to.
"""

from __future__ import annotations

from hubguard.models import TeamAssignment
from hubguard.registry import DEFAULT_REGISTRY, AccessRegistry
from hubguard.teams import Team, TeamPermission, TeamScope, is_team_at_least


def team_covers_group(assignment: TeamAssignment | None, group_id: str) -> bool:
    """Check if the assignment's team applies inside ``group_id``."""
    if assignment is None:
        return False
    if assignment.scope is TeamScope.ALL:
        return True
    return assignment.group_id == group_id


def team_allows(
    assignment: TeamAssignment | None,
    group_id: str,
    permission: TeamPermission | str,
    *,
    registry: AccessRegistry | None = None,
) -> bool:
    """Check a team permission for an action targeting ``group_id``."""
    if not team_covers_group(assignment, group_id):
        return False
    return (registry or DEFAULT_REGISTRY).team_has_permission(assignment.team, permission)


def team_at_least(
    assignment: TeamAssignment | None, group_id: str, min_team: Team | str
) -> bool:
    if not team_covers_group(assignment, group_id):
        return False
    return is_team_at_least(assignment.team, min_team)
