"""Capability taxonomy: the closed set of ``domain:action`` permissions."""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType


class UnknownCapabilityError(ValueError):
    """Raised when an external string is not a known capability."""


class Capability(StrEnum):
    # Users
    USERS_VIEW = "users:view"
    USERS_CREATE = "users:create"
    USERS_EDIT = "users:edit"
    USERS_DELETE = "users:delete"

    # Groups
    GROUPS_VIEW = "groups:view"
    GROUPS_CREATE = "groups:create"
    GROUPS_EDIT = "groups:edit"
    GROUPS_DELETE = "groups:delete"

    # Projects
    PROJECTS_VIEW = "projects:view"
    PROJECTS_CREATE = "projects:create"
    PROJECTS_EDIT = "projects:edit"
    PROJECTS_DELETE = "projects:delete"
    PROJECTS_ARCHIVE = "projects:archive"
    PROJECTS_MANAGE_MEMBERS = "projects:manage_members"
    PROJECTS_VIEW_STATS = "projects:view_stats"
    PROJECTS_EXPORT = "projects:export"

    # Tasks
    TASKS_VIEW = "tasks:view"
    TASKS_CREATE = "tasks:create"
    TASKS_EDIT = "tasks:edit"
    TASKS_DELETE = "tasks:delete"
    TASKS_ASSIGN = "tasks:assign"
    TASKS_MANAGE_SUBTASKS = "tasks:manage_subtasks"
    TASKS_CHANGE_STATUS = "tasks:change_status"
    TASKS_CHANGE_PRIORITY = "tasks:change_priority"
    TASKS_VIEW_ALL = "tasks:view_all"
    TASKS_EXPORT = "tasks:export"

    # Meetings
    MEETINGS_VIEW = "meetings:view"
    MEETINGS_CREATE = "meetings:create"
    MEETINGS_EDIT = "meetings:edit"
    MEETINGS_DELETE = "meetings:delete"
    MEETINGS_MANAGE_ATTENDEES = "meetings:manage_attendees"
    MEETINGS_VIEW_NOTES = "meetings:view_notes"
    MEETINGS_EDIT_NOTES = "meetings:edit_notes"
    MEETINGS_EXPORT = "meetings:export"

    # Absences
    ABSENCES_VIEW = "absences:view"
    ABSENCES_CREATE = "absences:create"
    ABSENCES_APPROVE = "absences:approve"

    # Recruitment
    RECRUITMENT_VIEW = "recruitment:view"
    RECRUITMENT_CREATE = "recruitment:create"
    RECRUITMENT_EDIT = "recruitment:edit"

    # Training
    TRAINING_VIEW = "training:view"
    TRAINING_CREATE = "training:create"
    TRAINING_EDIT = "training:edit"

    # Stats
    STATS_VIEW = "stats:view"

    # Settings
    SETTINGS_VIEW = "settings:view"
    SETTINGS_EDIT = "settings:edit"

    # Admin
    ADMIN_PANEL = "admin:panel"

    @property
    def domain(self) -> str:
        return self.value.split(":", 1)[0]

    @property
    def action(self) -> str:
        return self.value.split(":", 1)[1]


DOMAINS = (
    "users",
    "groups",
    "projects",
    "tasks",
    "meetings",
    "absences",
    "recruitment",
    "training",
    "stats",
    "settings",
    "admin",
)

ALL_CAPABILITIES: frozenset[Capability] = frozenset(Capability)
_CAPABILITY_VALUES = frozenset(c.value for c in Capability)

CAPABILITY_DOMAINS = MappingProxyType(
    {domain: tuple(c for c in Capability if c.domain == domain) for domain in DOMAINS}
)


def capabilities_by_domain() -> dict[str, list[str]]:
    """Group capability strings by domain, in declaration order."""
    return {domain: [c.value for c in caps] for domain, caps in CAPABILITY_DOMAINS.items()}


def capability_domain(capability: Capability | str) -> str:
    return parse_capability(capability).domain


def is_known_capability(value: object) -> bool:
    return isinstance(value, str) and value in _CAPABILITY_VALUES


def parse_capability(value: Capability | str) -> Capability:
    """Validate an external capability string."""
    try:
        return Capability(value)
    except ValueError as e:
        raise UnknownCapabilityError(f"Unknown capability: {value!r}") from e
