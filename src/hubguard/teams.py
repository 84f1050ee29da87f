"""Team hierarchy: organisation-wide teams, their scope and permissions.

Teams are a second authorization axis, independent of the per-group role.
Team permissions come from their own vocabulary and are never interchangeable
with role capabilities.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType


class Team(StrEnum):
    OWNER = "Owner"
    EXECUTIVE = "Executive"
    MARSHA = "Marsha Team"
    LEGACY = "Legacy"
    TALENT = "Talent"
    MOMENTUM = "Momentum"
    SQUAD = "Squad"


class TeamScope(StrEnum):
    ALL = "all"
    SPECIFIC = "specific"


class TeamPermission(StrEnum):
    HUB_FULL = "hub:full"
    HUB_DEVELOPER = "hub:developer"
    USERS_VIEW = "users:view"
    USERS_MANAGE = "users:manage"
    PROJECTS_VIEW = "projects:view"
    PROJECTS_MANAGE = "projects:manage"
    TASKS_VIEW = "tasks:view"
    TASKS_MANAGE = "tasks:manage"
    MEETINGS_VIEW = "meetings:view"
    MEETINGS_MANAGE = "meetings:manage"
    RECRUITMENT_VIEW = "recruitment:view"
    RECRUITMENT_MANAGE = "recruitment:manage"
    TRAINING_VIEW = "training:view"
    TRAINING_MANAGE = "training:manage"
    ABSENCES_VIEW = "absences:view"
    ABSENCES_MANAGE = "absences:manage"
    STATS_VIEW = "stats:view"
    STATS_MANAGE = "stats:manage"
    ENTITIES_VIEW = "entities:view"
    ENTITIES_MANAGE = "entities:manage"
    SETTINGS_VIEW = "settings:view"
    SETTINGS_MANAGE = "settings:manage"


# Higher = more access. Talent and Momentum sit side by side.
TEAM_RANKS = MappingProxyType(
    {
        Team.OWNER: 7,
        Team.EXECUTIVE: 6,
        Team.MARSHA: 5,
        Team.LEGACY: 4,
        Team.TALENT: 3,
        Team.MOMENTUM: 3,
        Team.SQUAD: 1,
    }
)

TEAM_SCOPES = MappingProxyType(
    {
        Team.OWNER: TeamScope.ALL,
        Team.EXECUTIVE: TeamScope.ALL,
        Team.MARSHA: TeamScope.ALL,
        Team.LEGACY: TeamScope.SPECIFIC,
        Team.TALENT: TeamScope.ALL,
        Team.MOMENTUM: TeamScope.ALL,
        Team.SQUAD: TeamScope.SPECIFIC,
    }
)

TEAM_COLORS = MappingProxyType(
    {
        Team.OWNER: "primary",
        Team.EXECUTIVE: "error",
        Team.MARSHA: "purple",
        Team.LEGACY: "warning",
        Team.TALENT: "success",
        Team.MOMENTUM: "info",
        Team.SQUAD: "neutral",
    }
)

TEAM_DESCRIPTIONS = MappingProxyType(
    {
        Team.OWNER: (
            "Maîtrise totale du Hub. Tous les accès, compte développeur, sans aucune exception."
        ),
        Team.EXECUTIVE: (
            "Toutes les permissions sur toutes les entités. "
            "Accès complet à la gestion et à l'administration."
        ),
        Team.MARSHA: (
            "Mêmes accès que Legacy (modification et traitement managérial) "
            "mais sur toutes les entités."
        ),
        Team.LEGACY: (
            "Accès de modification et de traitement managérial, attitré à une entité spécifique."
        ),
        Team.TALENT: (
            "Accès aux recrutements et permissions classiques sur toutes les entités."
        ),
        Team.MOMENTUM: (
            "Accès aux Référents (Formations) et permissions classiques sur toutes les entités."
        ),
        Team.SQUAD: "Affilié à une entité spécifique par défaut. Aucun accès managérial.",
    }
)

P = TeamPermission

_STANDARD_VIEW = frozenset(
    {
        P.USERS_VIEW,
        P.PROJECTS_VIEW,
        P.TASKS_VIEW,
        P.MEETINGS_VIEW,
        P.ABSENCES_VIEW,
        P.STATS_VIEW,
        P.SETTINGS_VIEW,
    }
)

_STANDARD_MANAGE = _STANDARD_VIEW | {P.PROJECTS_MANAGE, P.TASKS_MANAGE, P.MEETINGS_MANAGE}

_ALL_PERMISSIONS = frozenset(TeamPermission)

TEAM_PERMISSIONS = MappingProxyType(
    {
        Team.OWNER: _ALL_PERMISSIONS,
        Team.EXECUTIVE: _ALL_PERMISSIONS - {P.HUB_DEVELOPER},
        Team.MARSHA: _STANDARD_MANAGE | {P.USERS_MANAGE, P.ABSENCES_MANAGE},
        Team.LEGACY: _STANDARD_MANAGE | {P.USERS_MANAGE, P.ABSENCES_MANAGE},
        Team.TALENT: _STANDARD_VIEW | {P.RECRUITMENT_VIEW, P.RECRUITMENT_MANAGE, P.TASKS_MANAGE},
        Team.MOMENTUM: _STANDARD_VIEW | {P.TRAINING_VIEW, P.TRAINING_MANAGE, P.TASKS_MANAGE},
        Team.SQUAD: frozenset(
            {
                P.PROJECTS_VIEW,
                P.TASKS_VIEW,
                P.TASKS_MANAGE,
                P.MEETINGS_VIEW,
                P.ABSENCES_VIEW,
                P.SETTINGS_VIEW,
            }
        ),
    }
)


def _coerce(team: Team | str) -> Team | None:
    try:
        return Team(team)
    except ValueError:
        return None


def team_rank(team: Team | str) -> int:
    """Return the rank of a team, 0 for unknown teams."""
    resolved = _coerce(team)
    if resolved is None:
        return 0
    return TEAM_RANKS[resolved]


def is_team_at_least(team: Team | str, min_team: Team | str) -> bool:
    """Check if a team meets the minimum team level."""
    if _coerce(team) is None or _coerce(min_team) is None:
        return False
    return team_rank(team) >= team_rank(min_team)


def scope_of(team: Team | str) -> TeamScope:
    """Return where a team's permissions apply.

    Raises ``ValueError`` for an unknown team: scope has no safe default.
    """
    return TEAM_SCOPES[Team(team)]


def team_permissions(team: Team | str) -> frozenset[TeamPermission]:
    resolved = _coerce(team)
    if resolved is None:
        return frozenset()
    return TEAM_PERMISSIONS[resolved]


def team_has_permission(team: Team | str, permission: TeamPermission | str) -> bool:
    """Check if a team's permission set includes ``permission``."""
    try:
        return TeamPermission(permission) in team_permissions(team)
    except ValueError:
        return False


def team_options() -> list[dict[str, str]]:
    """Build team rows for select inputs."""
    return [
        {
            "label": team.value,
            "value": team.value,
            "description": TEAM_DESCRIPTIONS[team],
            "color": TEAM_COLORS[team],
        }
        for team in Team
    ]
