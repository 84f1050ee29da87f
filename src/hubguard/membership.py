"""Resolve a user's role per group from its membership list.

Membership lists are short (a handful of groups per user), so lookups are a
linear scan over ``user.group_memberships``.
"""

from __future__ import annotations

from hubguard.models import GroupMembership, UserWithAccess
from hubguard.roles import Role, is_role_at_least


def membership_for_group(user: UserWithAccess, group_id: str) -> GroupMembership | None:
    for membership in user.group_memberships:
        if membership.group_id == group_id:
            return membership
    return None


def role_for_group(user: UserWithAccess, group_id: str) -> Role | None:
    """Get the user's role in a group, or None if not a member."""
    membership = membership_for_group(user, group_id)
    if membership is None:
        return None
    return membership.role


def groups_with_role(user: UserWithAccess, min_role: Role | str) -> list[GroupMembership]:
    """Memberships where the user holds at least ``min_role``, in input order."""
    return [m for m in user.group_memberships if is_role_at_least(m.role, min_role)]


def is_member_of_group(user: UserWithAccess, group_id: str) -> bool:
    return membership_for_group(user, group_id) is not None
