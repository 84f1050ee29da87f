"""Static role to capability table and its lookups."""

from __future__ import annotations

from types import MappingProxyType

from hubguard.capabilities import ALL_CAPABILITIES, Capability
from hubguard.roles import Role

C = Capability

_COLLABORATOR = frozenset(
    {
        C.GROUPS_VIEW,
        C.PROJECTS_VIEW,
        C.TASKS_VIEW,
        C.TASKS_CREATE,
        C.TASKS_EDIT,
        C.TASKS_MANAGE_SUBTASKS,
        C.TASKS_CHANGE_STATUS,
        C.MEETINGS_VIEW,
        C.MEETINGS_VIEW_NOTES,
        C.ABSENCES_VIEW,
        C.ABSENCES_CREATE,
        C.SETTINGS_VIEW,
    }
)

_MANAGER = _COLLABORATOR | {
    C.USERS_VIEW,
    C.PROJECTS_CREATE,
    C.PROJECTS_EDIT,
    C.PROJECTS_ARCHIVE,
    C.PROJECTS_MANAGE_MEMBERS,
    C.PROJECTS_VIEW_STATS,
    C.PROJECTS_EXPORT,
    C.TASKS_DELETE,
    C.TASKS_ASSIGN,
    C.TASKS_CHANGE_PRIORITY,
    C.TASKS_VIEW_ALL,
    C.TASKS_EXPORT,
    C.MEETINGS_CREATE,
    C.MEETINGS_EDIT,
    C.MEETINGS_MANAGE_ATTENDEES,
    C.MEETINGS_EDIT_NOTES,
    C.MEETINGS_EXPORT,
    C.ABSENCES_APPROVE,
    C.RECRUITMENT_VIEW,
    C.TRAINING_VIEW,
    C.STATS_VIEW,
}

# Admin runs the group but cannot create or remove groups, change group
# settings or reach the owner panel.
_ADMIN = ALL_CAPABILITIES - {
    C.GROUPS_CREATE,
    C.GROUPS_DELETE,
    C.SETTINGS_EDIT,
    C.ADMIN_PANEL,
}

CAPABILITY_MAP = MappingProxyType(
    {
        Role.OWNER: ALL_CAPABILITIES,
        Role.ADMIN: frozenset(_ADMIN),
        Role.MANAGER: frozenset(_MANAGER),
        Role.COLLABORATOR: _COLLABORATOR,
        Role.GUEST: frozenset({C.TASKS_VIEW}),
    }
)


def capabilities_for(role: Role | str) -> frozenset[Capability]:
    """Return the capabilities granted to a role, empty for unknown roles."""
    try:
        return CAPABILITY_MAP[Role(role)]
    except ValueError:
        return frozenset()


def role_has_capability(role: Role | str, capability: Capability | str) -> bool:
    """Check if a role grants a capability."""
    try:
        return Capability(capability) in capabilities_for(role)
    except ValueError:
        return False
