"""Role-axis decision guards.

Each guard resolves the user's membership first and answers ``False`` when
there is none. A missing membership, an unknown capability and a role below
the threshold all read as ``False``; guards never raise.
"""

from __future__ import annotations

from hubguard.capabilities import Capability
from hubguard.membership import role_for_group
from hubguard.models import UserWithAccess
from hubguard.registry import DEFAULT_REGISTRY, AccessRegistry
from hubguard.roles import Role, is_role_at_least


def can_do(
    user: UserWithAccess,
    group_id: str,
    capability: Capability | str,
    *,
    registry: AccessRegistry | None = None,
) -> bool:
    """Check if the user's role in ``group_id`` grants ``capability``."""
    role = role_for_group(user, group_id)
    if role is None:
        return False
    return (registry or DEFAULT_REGISTRY).role_has_capability(role, capability)


def has_min_role(user: UserWithAccess, group_id: str, min_role: Role | str) -> bool:
    """Check if the user holds at least ``min_role`` in ``group_id``."""
    role = role_for_group(user, group_id)
    if role is None:
        return False
    return is_role_at_least(role, min_role)


def is_owner_of_any(user: UserWithAccess) -> bool:
    """Check if the user is Owner of at least one group, whichever it is."""
    return any(m.role == Role.OWNER for m in user.group_memberships)


def is_admin_or_above(user: UserWithAccess, group_id: str) -> bool:
    return has_min_role(user, group_id, Role.ADMIN)
