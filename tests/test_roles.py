"""Tests for the role hierarchy."""

from __future__ import annotations

import itertools

import pytest

from hubguard.roles import (
    ROLE_RANKS,
    Role,
    is_role_at_least,
    role_options,
    role_rank,
    roles_at_or_below,
)


class TestRoleHierarchy:
    """Test rank lookup and comparison."""

    def test_ranks(self) -> None:
        assert role_rank(Role.OWNER) == 5
        assert role_rank("Admin") == 4
        assert role_rank(Role.MANAGER) == 3
        assert role_rank(Role.COLLABORATOR) == 2
        assert role_rank(Role.GUEST) == 1

    def test_ranks_are_unique(self) -> None:
        assert len(set(ROLE_RANKS.values())) == len(Role)

    def test_rank_totality_and_monotonicity(self) -> None:
        for a, b in itertools.product(Role, Role):
            if role_rank(a) > role_rank(b):
                assert is_role_at_least(a, b)
                assert not is_role_at_least(b, a)
            elif a == b:
                assert is_role_at_least(a, b)

    def test_role_hierarchy(self) -> None:
        assert is_role_at_least("Owner", "Guest")
        assert is_role_at_least("Admin", "Manager")
        assert not is_role_at_least("Manager", "Admin")
        assert not is_role_at_least("Guest", "Collaborator")

    def test_invalid_role(self) -> None:
        assert role_rank("Superuser") == 0
        assert not is_role_at_least("Superuser", "Guest")
        assert not is_role_at_least("Owner", "Superuser")

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            ROLE_RANKS[Role.GUEST] = 9  # type: ignore[index]
        assert role_rank(Role.GUEST) == 1


class TestRolesAtOrBelow:
    def test_owner_sees_everyone(self) -> None:
        assert roles_at_or_below(Role.OWNER) == list(Role)

    def test_manager(self) -> None:
        assert roles_at_or_below("Manager") == [Role.MANAGER, Role.COLLABORATOR, Role.GUEST]

    def test_guest(self) -> None:
        assert roles_at_or_below(Role.GUEST) == [Role.GUEST]

    def test_unknown_role(self) -> None:
        assert roles_at_or_below("nobody") == []


def test_role_options() -> None:
    options = role_options()
    assert [o["value"] for o in options] == [r.value for r in Role]
    assert options[0]["label"] == "Propriétaire"
    assert all(o["description"] for o in options)
