"""Shared test fixtures for hubguard."""

from __future__ import annotations

from pathlib import Path

import pytest

from hubguard.config import Config
from hubguard.models import GroupMembership, UserWithAccess


def build_user(*memberships: tuple[str, str], user_id: str = "user-1") -> UserWithAccess:
    """Build a user from ``(group_id, role)`` pairs."""
    return UserWithAccess(
        id=user_id,
        name="Test User",
        email=f"{user_id}@example.com",
        group_memberships=tuple(
            GroupMembership(group_id=group_id, group_name=group_id.upper(), role=role)
            for group_id, role in memberships
        ),
    )


@pytest.fixture
def make_user():
    return build_user


@pytest.fixture
def admin_g1() -> UserWithAccess:
    return build_user(("g1", "Admin"))


@pytest.fixture
def guest_g1() -> UserWithAccess:
    return build_user(("g1", "Guest"))


@pytest.fixture
def owner_g1_guest_g2() -> UserWithAccess:
    return build_user(("g1", "Owner"), ("g2", "Guest"))


@pytest.fixture
def no_groups() -> UserWithAccess:
    return build_user()


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config(home=tmp_path)
