"""End-to-end checks through the public package surface."""

from __future__ import annotations

import hubguard
from hubguard import (
    Role,
    Team,
    TeamAssignment,
    TeamPermission,
    can_do,
    groups_with_role,
    has_min_role,
    is_admin_or_above,
    is_owner_of_any,
    team_allows,
    team_has_permission,
)


def test_admin_in_one_group(make_user):
    user = make_user(("g1", "Admin"))
    assert can_do(user, "g1", "tasks:assign")
    assert not can_do(user, "g2", "tasks:assign")


def test_guest_below_manager(make_user):
    user = make_user(("g1", "Guest"))
    assert not has_min_role(user, "g1", "Manager")


def test_owner_somewhere_guest_elsewhere(make_user):
    user = make_user(("g1", "Owner"), ("g2", "Guest"))
    assert is_owner_of_any(user)
    assert not is_admin_or_above(user, "g2")


def test_groups_with_manager_or_above(make_user):
    user = make_user(("g1", "Owner"), ("g2", "Collaborator"), ("g3", "Manager"))
    assert [m.group_id for m in groups_with_role(user, Role.MANAGER)] == ["g1", "g3"]


def test_team_scope_changes_the_answer():
    squad = TeamAssignment(team=Team.SQUAD, group_id="g1")
    talent = TeamAssignment(team=Team.TALENT)
    permission = TeamPermission.TASKS_MANAGE

    # the raw table answer ignores scope
    assert team_has_permission(Team.SQUAD, permission)
    assert team_has_permission(Team.TALENT, permission)

    for group_id in ["g2", "g3", "g4"]:
        assert not team_allows(squad, group_id, permission)
        assert team_allows(talent, group_id, permission)
    assert team_allows(squad, "g1", permission)


def test_default_registry_is_exported():
    assert hubguard.DEFAULT_REGISTRY.problems() == []
