"""hubguard — role, capability and team authorization for the hub.

Importing the package builds ``DEFAULT_REGISTRY`` and validates the static
tables; an inconsistent table fails the import.
"""

from hubguard.capabilities import Capability, UnknownCapabilityError
from hubguard.capability_map import capabilities_for, role_has_capability
from hubguard.guards import can_do, has_min_role, is_admin_or_above, is_owner_of_any
from hubguard.membership import groups_with_role, is_member_of_group, role_for_group
from hubguard.models import GroupMembership, TeamAssignment, UserWithAccess
from hubguard.registry import DEFAULT_REGISTRY, AccessRegistry, RegistryError
from hubguard.roles import Role, is_role_at_least, roles_at_or_below
from hubguard.scope import team_allows, team_covers_group
from hubguard.teams import Team, TeamPermission, TeamScope, is_team_at_least, team_has_permission

__all__ = [
    "DEFAULT_REGISTRY",
    "AccessRegistry",
    "Capability",
    "GroupMembership",
    "RegistryError",
    "Role",
    "Team",
    "TeamAssignment",
    "TeamPermission",
    "TeamScope",
    "UnknownCapabilityError",
    "UserWithAccess",
    "can_do",
    "capabilities_for",
    "groups_with_role",
    "has_min_role",
    "is_admin_or_above",
    "is_member_of_group",
    "is_owner_of_any",
    "is_role_at_least",
    "is_team_at_least",
    "role_for_group",
    "role_has_capability",
    "roles_at_or_below",
    "team_allows",
    "team_covers_group",
    "team_has_permission",
]
