"""Immutable access registry and its startup self-check.

The registry bundles the two grant tables (role capabilities and team
permissions) with the capability taxonomy they must draw from. It is built
once, frozen, and passed to guards explicitly; ``DEFAULT_REGISTRY`` is the
instance built from the static tables when the package is imported.

A registry that fails validation is a programming error: ``create`` raises
``RegistryError`` and, for the default tables, the import itself fails.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

from hubguard.capabilities import ALL_CAPABILITIES, Capability
from hubguard.capability_map import CAPABILITY_MAP
from hubguard.roles import ROLE_RANKS, Role
from hubguard.teams import TEAM_PERMISSIONS, TEAM_RANKS, TEAM_SCOPES, Team, TeamPermission

logger = logging.getLogger(__name__)


class RegistryError(Exception):
    """Raised when the static authorization tables are inconsistent."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = list(problems)
        super().__init__("Invalid access registry: " + "; ".join(self.problems))


def _freeze(
    table: Mapping[str, Iterable[str] | None],
    key_type: type[StrEnum],
    value_type: type[StrEnum],
    label: str,
    problems: list[str],
) -> MappingProxyType:
    frozen: dict = {}
    for raw_key, raw_values in table.items():
        try:
            key = key_type(raw_key)
        except ValueError:
            problems.append(f"{label}: unknown key {raw_key!r}")
            continue
        if raw_values is None:
            # reported as a missing entry
            continue
        values = set()
        for raw in raw_values:
            try:
                values.add(value_type(raw))
            except ValueError:
                problems.append(f"{label}: {key} grants unknown {raw!r}")
        frozen[key] = frozenset(values)
    return MappingProxyType(frozen)


@dataclass(frozen=True, eq=False)
class AccessRegistry:
    """Read-only grant tables shared by every guard.

    Build registries with ``create``, which coerces and validates the tables.
    The constructor only takes a read-only copy of what it is given.
    """

    capability_map: Mapping[Role, frozenset[Capability]]
    team_permissions: Mapping[Team, frozenset[TeamPermission]]
    capabilities: frozenset[Capability] = field(default=ALL_CAPABILITIES)

    def __post_init__(self) -> None:
        for name in ("capability_map", "team_permissions"):
            table = getattr(self, name)
            frozen = MappingProxyType({key: frozenset(values) for key, values in table.items()})
            object.__setattr__(self, name, frozen)
        object.__setattr__(self, "capabilities", frozenset(self.capabilities))

    @classmethod
    def create(
        cls,
        *,
        capability_map: Mapping[str, Iterable[str] | None] | None = None,
        team_permissions: Mapping[str, Iterable[str] | None] | None = None,
        capabilities: Iterable[str] | None = None,
    ) -> AccessRegistry:
        """Freeze the given tables (the static ones by default) and validate them."""
        problems: list[str] = []
        taxonomy: set[Capability] = set()
        for raw in ALL_CAPABILITIES if capabilities is None else capabilities:
            try:
                taxonomy.add(Capability(raw))
            except ValueError:
                problems.append(f"taxonomy: unknown capability {raw!r}")

        registry = cls(
            capability_map=_freeze(
                CAPABILITY_MAP if capability_map is None else capability_map,
                Role,
                Capability,
                "capability map",
                problems,
            ),
            team_permissions=_freeze(
                TEAM_PERMISSIONS if team_permissions is None else team_permissions,
                Team,
                TeamPermission,
                "team permissions",
                problems,
            ),
            capabilities=frozenset(taxonomy),
        )
        problems.extend(registry.problems())
        if problems:
            for problem in problems:
                logger.error("Access registry check failed: %s", problem)
            raise RegistryError(problems)
        return registry

    def problems(self) -> list[str]:
        """List every consistency problem in the registry."""
        found: list[str] = []

        ranks = [ROLE_RANKS.get(role) for role in Role]
        if None in ranks or len(set(ranks)) != len(ranks):
            found.append("roles: every role needs a unique rank")

        for role in Role:
            if role not in self.capability_map:
                found.append(f"capability map: {role} has no entry")
        for role, granted in self.capability_map.items():
            for capability in sorted(granted - self.capabilities):
                found.append(f"capability map: {role} grants {capability} outside the taxonomy")

        for team in Team:
            if team not in self.team_permissions:
                found.append(f"team permissions: {team} has no entry")
            if team not in TEAM_RANKS:
                found.append(f"teams: {team} has no rank")
            if team not in TEAM_SCOPES:
                found.append(f"teams: {team} has no scope")
        return found

    def validate(self) -> None:
        problems = self.problems()
        if problems:
            raise RegistryError(problems)

    def capabilities_for(self, role: Role | str) -> frozenset[Capability]:
        try:
            return self.capability_map.get(Role(role), frozenset())
        except ValueError:
            return frozenset()

    def role_has_capability(self, role: Role | str, capability: Capability | str) -> bool:
        try:
            capability = Capability(capability)
        except ValueError:
            return False
        return capability in self.capabilities and capability in self.capabilities_for(role)

    def team_permissions_for(self, team: Team | str) -> frozenset[TeamPermission]:
        try:
            return self.team_permissions.get(Team(team), frozenset())
        except ValueError:
            return frozenset()

    def team_has_permission(self, team: Team | str, permission: TeamPermission | str) -> bool:
        try:
            return TeamPermission(permission) in self.team_permissions_for(team)
        except ValueError:
            return False


DEFAULT_REGISTRY = AccessRegistry.create()
