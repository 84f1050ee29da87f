"""Tests for membership resolution."""

from __future__ import annotations

from hubguard.membership import (
    groups_with_role,
    is_member_of_group,
    membership_for_group,
    role_for_group,
)
from hubguard.roles import Role


def test_role_for_group(owner_g1_guest_g2):
    assert role_for_group(owner_g1_guest_g2, "g1") is Role.OWNER
    assert role_for_group(owner_g1_guest_g2, "g2") is Role.GUEST
    assert role_for_group(owner_g1_guest_g2, "g3") is None


def test_role_for_group_without_memberships(no_groups):
    assert role_for_group(no_groups, "g1") is None


def test_membership_for_group(admin_g1):
    membership = membership_for_group(admin_g1, "g1")
    assert membership is not None
    assert membership.group_name == "G1"
    assert membership_for_group(admin_g1, "g2") is None


def test_is_member_of_group(admin_g1):
    assert is_member_of_group(admin_g1, "g1")
    assert not is_member_of_group(admin_g1, "g2")


def test_groups_with_role_keeps_input_order(make_user):
    user = make_user(("g1", "Owner"), ("g2", "Collaborator"), ("g3", "Manager"))
    result = groups_with_role(user, Role.MANAGER)
    assert [m.group_id for m in result] == ["g1", "g3"]


def test_groups_with_role_guest_threshold(make_user):
    user = make_user(("g2", "Collaborator"), ("g1", "Guest"))
    assert [m.group_id for m in groups_with_role(user, "Guest")] == ["g2", "g1"]


def test_groups_with_unknown_role(admin_g1):
    assert groups_with_role(admin_g1, "Superuser") == []
