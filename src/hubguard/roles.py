"""Per-group role hierarchy for hub members."""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType


class Role(StrEnum):
    OWNER = "Owner"
    ADMIN = "Admin"
    MANAGER = "Manager"
    COLLABORATOR = "Collaborator"
    GUEST = "Guest"


ROLE_RANKS = MappingProxyType(
    {
        Role.OWNER: 5,
        Role.ADMIN: 4,
        Role.MANAGER: 3,
        Role.COLLABORATOR: 2,
        Role.GUEST: 1,
    }
)

ROLE_LABELS = MappingProxyType(
    {
        Role.OWNER: "Propriétaire",
        Role.ADMIN: "Administrateur",
        Role.MANAGER: "Responsable",
        Role.COLLABORATOR: "Collaborateur",
        Role.GUEST: "Invité",
    }
)

ROLE_DESCRIPTIONS = MappingProxyType(
    {
        Role.OWNER: "Accès complet à toutes les fonctionnalités et paramètres de l'entité.",
        Role.ADMIN: (
            "Gestion des utilisateurs, projets, tâches, réunions, recrutement et formation."
        ),
        Role.MANAGER: "Gestion des projets, tâches et réunions de son équipe.",
        Role.COLLABORATOR: "Lecture et écriture sur les tâches, lecture sur les réunions.",
        Role.GUEST: "Accès en lecture seule sur les tâches assignées.",
    }
)


def _coerce(role: Role | str) -> Role | None:
    try:
        return Role(role)
    except ValueError:
        return None


def role_rank(role: Role | str) -> int:
    """Return the numeric rank of a role, 0 for anything outside the hierarchy."""
    resolved = _coerce(role)
    if resolved is None:
        return 0
    return ROLE_RANKS[resolved]


def is_role_at_least(role: Role | str, min_role: Role | str) -> bool:
    """Check if a role meets or exceeds the minimum role."""
    if _coerce(role) is None or _coerce(min_role) is None:
        return False
    return role_rank(role) >= role_rank(min_role)


def roles_at_or_below(role: Role | str) -> list[Role]:
    """List the roles a holder of ``role`` may delegate, highest first."""
    if _coerce(role) is None:
        return []
    level = role_rank(role)
    return [r for r in Role if ROLE_RANKS[r] <= level]


def role_options() -> list[dict[str, str]]:
    """Build role rows for select inputs."""
    return [
        {"value": role.value, "label": ROLE_LABELS[role], "description": ROLE_DESCRIPTIONS[role]}
        for role in Role
    ]
